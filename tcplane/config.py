"""Server configuration, defaults and the default error handler."""

from __future__ import annotations

import ipaddress
import sys
from dataclasses import dataclass, field
from typing import Callable

DEFAULT_INNER_PRINT = True
DEFAULT_INNER_LOG = True
COLON_SPACE = ": "
COLON_SPACE_SYMBOL = ":"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_LISTEN_PORT = 60000
SPLIT_REQUEST = "\r\n\r\n"
SPLIT_REQUEST_BYTES = SPLIT_REQUEST.encode()
DEFAULT_BUFFER_SIZE = 512_000

ErrorHandler = Callable[[str], None]


@dataclass(frozen=True)
class SocketAddr:
    """A host and port pair identifying one end of a connection."""

    host: str
    port: int

    @property
    def ip(self) -> ipaddress.IPv4Address | ipaddress.IPv6Address:
        """The host as an IP address object."""
        return ipaddress.ip_address(self.host.split("%", 1)[0])

    def __str__(self) -> str:
        if ":" in self.host:
            return f"[{self.host}]{COLON_SPACE_SYMBOL}{self.port}"
        return f"{self.host}{COLON_SPACE_SYMBOL}{self.port}"


DEFAULT_SOCKET_ADDR = SocketAddr("0.0.0.0", 0)


def print_error_handle(error: str) -> None:
    """Print an error message to stderr and flush it."""
    print(error, file=sys.stderr, flush=True)


@dataclass
class ServerConfig:
    """Settings used to start and run a server."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_LISTEN_PORT
    buffer_size: int = DEFAULT_BUFFER_SIZE
    error_handle: ErrorHandler = field(default=print_error_handle)