"""The TCP server: configuration, handler registration and connection handling."""

from __future__ import annotations

import asyncio
import contextlib
import inspect
import traceback
from dataclasses import replace
from typing import Any, Awaitable, Callable, Optional

from .config import SPLIT_REQUEST_BYTES, ErrorHandler, ServerConfig
from .context import Context
from .errors import TcpBindError
from .stream import Stream
from .utils import remove_trailing_zeros

Handler = Callable[[Context], Optional[Awaitable[Any]]]


async def read_request(config: ServerConfig, stream: Stream) -> bytes:
    """Read one request from ``stream`` in chunks of the configured buffer size.

    Reading stops at end of stream, at a read error, at a chunk shorter than
    the buffer or ending in zero bytes, or at a chunk ending with the request
    separator. The last four bytes of such a final chunk are taken to be the
    separator and are dropped.
    """
    buffer_size = max(config.buffer_size, len(SPLIT_REQUEST_BYTES))
    request = bytearray()
    while True:
        try:
            chunk = await stream.read(buffer_size)
        except OSError:
            break
        read_len = len(chunk)
        if read_len == 0:
            break
        stripped = remove_trailing_zeros(chunk)
        if len(stripped) != buffer_size or stripped.endswith(SPLIT_REQUEST_BYTES):
            end = max(read_len - len(SPLIT_REQUEST_BYTES), 0)
            request.extend(stripped[:end])
            break
        request.extend(chunk)
    return bytes(request)


class Server:
    """A TCP server that runs every registered handler on each connection."""

    def __init__(self) -> None:
        self.config = ServerConfig()
        self._handlers: list[Handler] = []

    def host(self, host: str) -> Server:
        """Set the address to listen on and return this server."""
        self.config.host = str(host)
        return self

    def port(self, port: int) -> Server:
        """Set the port to listen on and return this server."""
        self.config.port = int(port)
        return self

    def buffer(self, buffer_size: int) -> Server:
        """Set the read buffer size in bytes and return this server."""
        self.config.buffer_size = int(buffer_size)
        return self

    def error_handle(self, func: ErrorHandler) -> Server:
        """Set the function that receives error messages and return this server."""
        self.config.error_handle = func
        return self

    def func(self, func: Handler) -> Server:
        """Append a handler, run in order on every connection; return this server."""
        if not callable(func):
            raise TypeError("handler must be callable")
        self._handlers.append(func)
        return self

    async def start(self) -> asyncio.AbstractServer:
        """Bind the listening socket and begin accepting connections.

        Raises TcpBindError if the address cannot be bound.
        """
        config = self.config
        try:
            return await asyncio.start_server(
                self._handle_connection, config.host, config.port
            )
        except OSError as err:
            raise TcpBindError(str(err)) from err

    async def run(self) -> Server:
        """Bind and serve connections until cancelled."""
        server = await self.start()
        async with server:
            await server.serve_forever()
        return self

    async def _handle_connection(
        self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter
    ) -> None:
        config = replace(self.config)
        handlers = list(self._handlers)
        stream = Stream(reader, writer)
        try:
            request = await read_request(config, stream)
            ctx = Context(stream, request)
            for handler in handlers:
                result = handler(ctx)
                if inspect.isawaitable(result):
                    await result
        except Exception as err:  # a failing handler ends this connection only
            message = "".join(traceback.format_exception_only(type(err), err)).strip()
            with contextlib.suppress(Exception):
                config.error_handle(message)
        finally:
            writer.close()
            with contextlib.suppress(Exception):
                await writer.wait_closed()