# tcplane

A small asyncio TCP server library. The server reads one request from each
incoming connection and then passes it through an ordered list of handler
functions. Each handler gets a `Context`. A handler can use it to reply to
the client, flush or shut down the connection, and store data for the
handlers that run after it.

The package depends only on the standard library.

## Installation

```
pip install .
```

To run the tests, install the `test` extra:

```
pip install ".[test]"
pytest
```

## Usage

```python
import asyncio

from tcplane.context import Context
from tcplane.server import Server


async def greet(ctx: Context) -> None:
    await ctx.send("tcplane: 1")


async def main() -> None:
    server = Server()
    server.host("0.0.0.0").port(60000).buffer(512_000)
    server.error_handle(lambda message: print("error:", message))
    server.func(greet)
    server.func(lambda ctx: ctx.set_data_value("seen", True))
    await server.run()


asyncio.run(main())
```

The setters on `Server` (`host`, `port`, `buffer`, `error_handle`, `func`)
each return the server, so you can chain them. `func` raises `TypeError`
if the handler is not callable.

`await server.run()` binds the socket and serves connections until it is
cancelled. `await server.start()` binds the socket and returns the
`asyncio.AbstractServer`. Use it when you want to manage the serving loop
yourself, for example to listen on port `0` and read the chosen port from
the server's sockets.

## How a request is read

`tcplane.server.read_request(config, stream)` reads from the connection in
chunks of `config.buffer_size` bytes. The chunk size is never smaller than
4 bytes. Reading stops in any of these cases:

- the peer closes its side, so the read is empty;
- a read fails with an `OSError`;
- a chunk, after trailing zero bytes are stripped, is not a full buffer
  long;
- a chunk ends with `\r\n\r\n`.

In the last two cases, the read drops the final four bytes of the closing
chunk. A request that ends in `\r\n\r\n` therefore reaches the handlers
without the terminator.

## Handlers and context

The server runs handlers in the order they were added with `Server.func`.
A handler may be a coroutine function or a plain function. When it returns
an awaitable, the server awaits it. All handlers for a connection share one
`tcplane.context.Context`:

- `ctx.request` holds the raw request bytes.
- `ctx.response` holds the `tcplane.response.Response` that was last sent.
- `await ctx.send(data)` writes `data` to the client. `data` can be a
  `str` (encoded as UTF-8), `bytes`, `bytearray`, `memoryview`, or a list
  or tuple of byte values.
- `await ctx.flush()` flushes the connection. `await ctx.close()` shuts
  down its writing half.
- `ctx.set_data_value(key, value)`, `ctx.get_data_value(key, default)`,
  `ctx.remove_data_value(key)` and `ctx.clear_data()` pass data between
  handlers.
- `ctx.socket_addr()`, `ctx.socket_addr_string()`, `ctx.socket_host()` and
  `ctx.socket_port()` return the peer's address, or `None` when it is not
  known.
- `ctx.socket_addr_or_default()` and `ctx.socket_addr_or_default_string()`
  return `0.0.0.0:0` when the peer's address is not known.

The server closes the connection once every handler has finished, or once
one of them has raised.

## Errors

The exceptions live in `tcplane.errors`:

- A failed send or flush raises `ResponseSendError`.
- A failed close raises `CloseError`.
- `send`, `flush` and `close` raise `NotFoundStreamError` when the context
  has no connection.

These three derive from `ResponseError`.

When the server cannot bind its address, `start` and `run` raise
`TcpBindError`, a subclass of `ServerError`.

When a handler raises, the server skips the remaining handlers for that
connection and passes a one-line description of the exception to the
error handler. The default error handler is
`tcplane.config.print_error_handle`, which prints the message to standard
error.

## Other modules

- `tcplane.config` contains `ServerConfig` (host, port, buffer size and
  error handler), the default values, and `SocketAddr`. `SocketAddr` is a
  host and port pair. Its text form is `host:port`, or `[host]:port` for
  IPv6.
- `tcplane.stream.Stream` wraps an asyncio reader and writer pair. A lock
  serialises its writes.
- `tcplane.utils` contains `remove_trailing_zeros(data)` and
  `get_thread_count()`. The second returns the number of CPUs available to
  the process, and never less than 1.

## Defaults

| Setting     | Default   |
|-------------|-----------|
| host        | `0.0.0.0` |
| port        | `60000`   |
| buffer size | `512000`  |

## What it does not do

This is a library only. It installs no command-line program. To start a
server, write a script like the one above. It speaks raw TCP and does not
parse HTTP or any other protocol. Each connection carries one request,
followed by the handler pipeline.