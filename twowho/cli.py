"""Command line entry point that starts the greeting server."""

from __future__ import annotations

import logging
import sys

from .server import HelloServer
from .sockets import SocketError

DEFAULT_PORT = 2005


def is_port_number(text):
    """Return True if every character of ``text`` is an ASCII digit."""
    return all("0" <= ch <= "9" for ch in text)


def resolve_port(argv):
    """Pick the port from the first argument, falling back to the default."""
    if not argv:
        print(f"Less arguments provided :: \nDefault port set to {DEFAULT_PORT}")
        return DEFAULT_PORT
    if is_port_number(argv[0]):
        return int(argv[0])
    print(f"Arg is not a valid port number:: Default port set to {DEFAULT_PORT}")
    return DEFAULT_PORT


def main(argv=None):
    """Run the server until interrupted; return an exit status."""
    if argv is None:
        argv = sys.argv[1:]
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    port = resolve_port(argv)
    try:
        with HelloServer(port) as server:
            server.serve_forever()
    except SocketError as exc:
        print(exc, file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())