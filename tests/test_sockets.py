import ipaddress
import socket

import pytest

from twowho.sockets import (
    BindingSocket,
    ConnectingSocket,
    ListeningSocket,
    Socket,
    SocketError,
    check_result,
)

LOOPBACK = int(ipaddress.IPv4Address("127.0.0.1"))


def _listen():
    return ListeningSocket(socket.AF_INET, socket.SOCK_STREAM, 0, 0, LOOPBACK, 5)


def test_check_result_passes_valid_values():
    assert check_result(0) == 0
    assert check_result(7) == 7


def test_check_result_rejects_negative():
    with pytest.raises(SocketError):
        check_result(-1)


def test_socket_error_is_oserror():
    with pytest.raises(OSError):
        check_result(-3)


def test_plain_socket_keeps_configured_address():
    with Socket(socket.AF_INET, socket.SOCK_STREAM, 0, 2005, socket.INADDR_ANY) as sock:
        assert sock.address == ("0.0.0.0", 2005)
        assert sock.fileno() >= 0


def test_context_manager_closes():
    with Socket(socket.AF_INET, socket.SOCK_STREAM, 0, 0, LOOPBACK) as sock:
        assert sock.fileno() >= 0
    assert sock.fileno() == -1


def test_listening_socket_resolves_port_and_backlog():
    with _listen() as listener:
        host, port = listener.address
        assert host == "127.0.0.1"
        assert port > 0
        assert listener.backlog == 5


def test_binding_to_used_port_fails():
    with _listen() as listener:
        port = listener.address[1]
        with pytest.raises(SocketError):
            BindingSocket(socket.AF_INET, socket.SOCK_STREAM, 0, port, LOOPBACK)


def test_connecting_socket_reaches_listener():
    with _listen() as listener:
        port = listener.address[1]
        with ConnectingSocket(socket.AF_INET, socket.SOCK_STREAM, 0, port, LOOPBACK) as conn:
            assert conn.address == listener.address
            accepted, peer = listener.accept()
            with accepted:
                conn.sendall(b"abc")
                assert accepted.recv(10) == b"abc"
                assert peer[0] == "127.0.0.1"


def test_connecting_to_closed_port_fails():
    listener = _listen()
    port = listener.address[1]
    listener.close()
    with pytest.raises(SocketError):
        ConnectingSocket(socket.AF_INET, socket.SOCK_STREAM, 0, port, LOOPBACK)


def test_close_invalidates_descriptor():
    listener = _listen()
    listener.close()
    assert listener.fileno() == -1