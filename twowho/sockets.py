"""TCP socket wrappers: plain, bound, connecting and listening sockets."""

from __future__ import annotations

import ipaddress
import itertools
import logging
import socket

logger = logging.getLogger(__name__)

_successes = itertools.count(1)


class SocketError(OSError):
    """Raised when a socket cannot be created, bound, connected or listened on."""


def check_result(result):
    """Return ``result`` if it is a valid descriptor or status, else raise SocketError."""
    if result < 0:
        raise SocketError(f"{result} failed to connect...")
    logger.info("Success RATE :: %d", next(_successes))
    return result


def _host_for(domain, interface):
    if isinstance(interface, str):
        return interface
    if domain == socket.AF_INET6:
        return str(ipaddress.IPv6Address(interface))
    return str(ipaddress.IPv4Address(interface))


class Socket:
    """A freshly created socket together with the address it is meant for."""

    def __init__(self, domain, service, protocol, port, interface):
        self._address = (_host_for(domain, interface), port)
        try:
            self._sock = socket.socket(domain, service, protocol)
        except OSError as exc:
            raise SocketError(f"cannot create socket: {exc}") from exc
        check_result(self._sock.fileno())

    @property
    def address(self):
        """The (host, port) pair this socket is associated with."""
        return self._address

    def fileno(self):
        """The underlying descriptor, or -1 once closed."""
        return self._sock.fileno()

    def close(self):
        self._sock.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


class BindingSocket(Socket):
    """A socket bound to a local address and port."""

    def __init__(self, domain, service, protocol, port, interface):
        super().__init__(domain, service, protocol, port, interface)
        try:
            self._sock.bind(self._address)
        except OSError as exc:
            self._sock.close()
            raise SocketError(f"cannot bind to {self._address}: {exc}") from exc
        self._address = tuple(self._sock.getsockname()[:2])
        check_result(self._sock.fileno())


class ConnectingSocket(Socket):
    """A socket connected to a remote address and port."""

    def __init__(self, domain, service, protocol, port, interface):
        super().__init__(domain, service, protocol, port, interface)
        try:
            self._sock.connect(self._address)
        except OSError as exc:
            self._sock.close()
            raise SocketError(f"cannot connect to {self._address}: {exc}") from exc
        check_result(self._sock.fileno())

    def sendall(self, data):
        self._sock.sendall(data)

    def recv(self, size):
        return self._sock.recv(size)


class ListeningSocket(BindingSocket):
    """A bound socket that accepts incoming connections."""

    def __init__(self, domain, service, protocol, port, interface, limit):
        super().__init__(domain, service, protocol, port, interface)
        self._backlog = limit
        self.start()

    def start(self):
        """Begin listening with the configured backlog."""
        try:
            self._sock.listen(self._backlog)
        except OSError as exc:
            self._sock.close()
            raise SocketError(f"cannot listen on {self._address}: {exc}") from exc
        check_result(0)

    @property
    def backlog(self):
        """The maximum number of pending connections."""
        return self._backlog

    def accept(self):
        """Wait for a connection and return ``(connection, address)``."""
        try:
            return self._sock.accept()
        except OSError as exc:
            raise SocketError(f"cannot accept on {self._address}: {exc}") from exc