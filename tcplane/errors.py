"""Exceptions raised while responding to clients and running servers."""

from __future__ import annotations

from .config import COLON_SPACE


class ResponseError(Exception):
    """Base class for failures while writing to a client."""


class ResponseSendError(ResponseError):
    """Writing or flushing data to the client failed."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Response Error{COLON_SPACE}{detail}")


class CloseError(ResponseError):
    """Shutting down the connection failed."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Close Error{COLON_SPACE}{detail}")


class NotFoundStreamError(ResponseError):
    """The context has no connection to write to."""

    def __init__(self) -> None:
        super().__init__("Not found stream")


class UnknownResponseError(ResponseError):
    """An unspecified response failure."""

    def __init__(self) -> None:
        super().__init__("Unknown")


class ServerError(Exception):
    """Base class for server failures."""


class TcpBindError(ServerError):
    """The listening socket could not be bound."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Tcp bind error{COLON_SPACE}{detail}")


class UnknownServerError(ServerError):
    """An unspecified server failure."""

    def __init__(self) -> None:
        super().__init__("Unknown")