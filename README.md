# twowho

A small TCP server. It listens on a port, accepts one connection at a time,
reads up to 30000 bytes from the client, prints them, replies with
`hello from server` and closes the connection. It then waits for the next
client, and keeps doing this until it is stopped with Ctrl-C.

## Installation

```
pip install .
```

## Running the server

```
twowho 8080
```

Then connect to `localhost:8080` with any TCP client, or point a browser at
it. What the client sent is printed on the server's console. Progress
messages (`Server started at ...8080`, `======WAITING==========`,
`======DONE============`) are written through `logging` at INFO level.

The port argument is optional. If it is left out, or if it is not made only
of the digits 0-9, the server uses port 2005 and prints a notice that it did
so. If the socket cannot be created, bound or put into listening mode, the
error is printed to standard error and the command exits with status 1.

## Using it from Python

```python
from twowho.server import HelloServer

with HelloServer(8080) as server:
    server.serve_once()      # handle a single client
```

`HelloServer(port, interface=socket.INADDR_ANY, limit=10)` listens on IPv4.
After each request its `buffer` attribute holds the bytes read, and its
`clients` deque holds a `Client` record (the peer address) for each of the
last 100 connections.

`HelloServer` is built on the abstract class `twowho.server.Server`.
`Server` binds and listens when it is created and exposes `listener` and
`port`. `serve_once()` calls `receive()`, `manage()` and `send()` in turn;
`serve_forever()` repeats that without end. A subclass supplies those three
methods. `close()`, or leaving a `with` block, closes the listening socket.

The socket layer is in `twowho.sockets`:

- `Socket` creates a socket and records the `(host, port)` it is meant for
  in `address`; `fileno()` gives the descriptor.
- `BindingSocket` binds to a local address and port; `address` then holds
  the address actually bound (so port 0 shows the port chosen).
- `ListeningSocket` binds and then listens, with a `backlog` limit, and has
  `accept()`.
- `ConnectingSocket` connects to a remote address and has `sendall()` and
  `recv()`.

The interface may be given as a host string or as an integer address such as
`socket.INADDR_ANY`. Each class raises `SocketError` (a subclass of
`OSError`) when the operating system refuses the operation, and each can be
used as a context manager. `check_result(value)` returns a non-negative
value and raises `SocketError` for a negative one.

`twowho.cli` also offers `is_port_number(text)` and `resolve_port(argv)`,
which the command uses to choose its port.

## What it does not do

- It does not speak HTTP. Requests are not parsed, and the reply is the bare
  text `hello from server` with no status line or headers, so a browser may
  not display it.
- It serves one client at a time; there is no concurrency.
- The `Command` enumeration (`CLIENTS`, `EXIT`, `LEAVE`) is defined, but the
  server does not read or act on commands.
- There is no graphical window or other display; all output goes to the
  console.

## Tests

```
pip install .[test]
pytest
```