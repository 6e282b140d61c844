"""A TCP connection shared between the server and its handlers."""

from __future__ import annotations

import asyncio

from .config import SocketAddr


class Stream:
    """One client connection, with writes serialised by a lock."""

    def __init__(self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        self.reader = reader
        self.writer = writer
        self._lock = asyncio.Lock()

    async def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes; an empty result means end of stream."""
        return await self.reader.read(size)

    async def write_all(self, data: bytes) -> None:
        """Write all of ``data`` and wait until it has been handed off."""
        async with self._lock:
            self.writer.write(data)
            await self.writer.drain()

    async def flush(self) -> None:
        """Wait until buffered output has been sent."""
        async with self._lock:
            await self.writer.drain()

    async def shutdown(self) -> None:
        """Shut down the writing half of the connection."""
        async with self._lock:
            await self.writer.drain()
            if self.writer.can_write_eof():
                self.writer.write_eof()
            else:
                self.writer.close()
                await self.writer.wait_closed()

    def peer_addr(self) -> SocketAddr:
        """Return the address of the remote end; raise OSError if unknown."""
        peer = self.writer.get_extra_info("peername")
        if not isinstance(peer, tuple) or len(peer) < 2:
            raise OSError("peer address is not available")
        return SocketAddr(str(peer[0]), int(peer[1]))