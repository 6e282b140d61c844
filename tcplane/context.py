"""Per-connection state handed to every handler."""

from __future__ import annotations

import ipaddress
from typing import Any, Optional

from .config import DEFAULT_SOCKET_ADDR, SocketAddr
from .errors import NotFoundStreamError
from .response import Response, ResponseLike
from .stream import Stream

Request = bytes


class Context:
    """The connection, the request read from it, the response and handler data.

    One context is shared by every handler run for a connection, so data
    stored by one handler is visible to the handlers after it.
    """

    def __init__(self, stream: Optional[Stream] = None, request: bytes = b"") -> None:
        self.stream = stream
        self.request: Request = bytes(request)
        self.response = Response()
        self.data: dict[str, Any] = {}

    def socket_addr(self) -> Optional[SocketAddr]:
        """Return the peer's address, or None if there is none."""
        if self.stream is None:
            return None
        try:
            return self.stream.peer_addr()
        except OSError:
            return None

    def socket_addr_or_default(self) -> SocketAddr:
        """Return the peer's address, or the unspecified address 0.0.0.0:0."""
        addr = self.socket_addr()
        return DEFAULT_SOCKET_ADDR if addr is None else addr

    def socket_addr_string(self) -> Optional[str]:
        """Return the peer's address as text, or None if there is none."""
        addr = self.socket_addr()
        return None if addr is None else str(addr)

    def socket_addr_or_default_string(self) -> str:
        """Return the peer's address as text, or that of the default address."""
        return str(self.socket_addr_or_default())

    def socket_host(self) -> Optional[ipaddress.IPv4Address | ipaddress.IPv6Address]:
        """Return the peer's IP address, or None if there is none."""
        addr = self.socket_addr()
        return None if addr is None else addr.ip

    def socket_port(self) -> Optional[int]:
        """Return the peer's port, or None if there is none."""
        addr = self.socket_addr()
        return None if addr is None else addr.port

    def _require_stream(self) -> Stream:
        if self.stream is None:
            raise NotFoundStreamError()
        return self.stream

    async def send(self, data: ResponseLike) -> None:
        """Make ``data`` the response payload and write it to the client."""
        stream = self._require_stream()
        self.response.set_response_data(data)
        await self.response.send(stream)

    async def close(self) -> None:
        """Shut down the writing half of the connection."""
        await self.response.close(self._require_stream())

    async def flush(self) -> None:
        """Flush output pending on the connection."""
        await self.response.flush(self._require_stream())

    def set_data_value(self, key: str, value: Any) -> Context:
        """Store ``value`` under ``key`` and return this context."""
        self.data[key] = value
        return self

    def get_data_value(self, key: str, default: Any = None) -> Any:
        """Return the value stored under ``key``, or ``default``."""
        return self.data.get(key, default)

    def remove_data_value(self, key: str) -> Context:
        """Remove the value stored under ``key``, if any, and return this context."""
        self.data.pop(key, None)
        return self

    def clear_data(self) -> Context:
        """Remove every stored value and return this context."""
        self.data.clear()
        return self