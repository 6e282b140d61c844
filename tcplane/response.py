"""Response payloads and writing them to a connection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Union

from .errors import CloseError, ResponseSendError

if TYPE_CHECKING:
    from .stream import Stream

ResponseLike = Union[str, bytes, bytearray, memoryview, Iterable[int]]


def to_response_data(data: ResponseLike) -> bytes:
    """Convert text, bytes-like data or a sequence of byte values to bytes."""
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, (list, tuple)):
        return bytes(data)
    raise TypeError(f"cannot use {type(data).__name__} as response data")


@dataclass
class Response:
    """The bytes to be sent back to a client."""

    data: bytes = b""

    def __post_init__(self) -> None:
        self.data = to_response_data(self.data)

    def set_response_data(self, data: ResponseLike) -> Response:
        """Replace the payload and return this response."""
        self.data = to_response_data(data)
        return self

    async def send(self, stream: Stream) -> None:
        """Write the payload to the stream."""
        try:
            await stream.write_all(self.data)
        except OSError as err:
            raise ResponseSendError(str(err)) from err

    async def close(self, stream: Stream) -> None:
        """Shut down the stream's writing half."""
        try:
            await stream.shutdown()
        except OSError as err:
            raise CloseError(str(err)) from err

    async def flush(self, stream: Stream) -> None:
        """Flush any output pending on the stream."""
        try:
            await stream.flush()
        except OSError as err:
            raise ResponseSendError(str(err)) from err