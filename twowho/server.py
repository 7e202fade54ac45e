"""A minimal TCP server built on a listening socket."""

from __future__ import annotations

import abc
import enum
import logging
import socket
from collections import deque
from dataclasses import dataclass

from .sockets import ListeningSocket

logger = logging.getLogger(__name__)


class Command(enum.IntEnum):
    """Commands understood by the server."""

    CLIENTS = 0
    EXIT = 1
    LEAVE = 2


@dataclass(frozen=True)
class Client:
    """A peer that has connected to the server."""

    address: tuple


class Server(abc.ABC):
    """A server that repeatedly receives, handles and answers one request."""

    MAX_CLIENTS = 100

    def __init__(self, domain, service, protocol, port, interface, limit):
        self._port = port
        logger.info("Server started at ...%d", port)
        self._listener = ListeningSocket(domain, service, protocol, port, interface, limit)
        self.clients: deque[Client] = deque(maxlen=self.MAX_CLIENTS)

    @property
    def listener(self):
        """The listening socket."""
        return self._listener

    @property
    def port(self):
        """The port the server was asked to use."""
        return self._port

    @abc.abstractmethod
    def receive(self):
        """Accept a connection and read the request."""

    @abc.abstractmethod
    def manage(self):
        """Handle the request that was read."""

    @abc.abstractmethod
    def send(self):
        """Answer the request and drop the connection."""

    def serve_once(self):
        logger.info("======WAITING==========")
        self.receive()
        self.manage()
        self.send()
        logger.info("======DONE============")

    def serve_forever(self):
        while True:
            self.serve_once()

    def close(self):
        self._listener.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


class HelloServer(Server):
    """Prints each request and answers every client with a fixed greeting."""

    BUFFER_SIZE = 30000
    RESPONSE = b"hello from server"

    def __init__(self, port, interface=socket.INADDR_ANY, limit=10):
        super().__init__(socket.AF_INET, socket.SOCK_STREAM, 0, port, interface, limit)
        self.buffer = b""
        self._connection = None

    def receive(self):
        connection, address = self.listener.accept()
        self._connection = connection
        self.clients.append(Client(tuple(address[:2])))
        self.buffer = connection.recv(self.BUFFER_SIZE)

    def manage(self):
        print(self.buffer.decode("utf-8", errors="replace"))

    def send(self):
        if self._connection is None:
            raise RuntimeError("no connection to answer")
        connection, self._connection = self._connection, None
        with connection:
            connection.sendall(self.RESPONSE)