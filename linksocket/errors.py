"""Errors raised by client and server sockets."""

from __future__ import annotations

from typing import Any


def _format_address(address: tuple[Any, ...]) -> str:
    host, port = address[0], address[1]
    host_text = str(host)
    if ":" in host_text:
        return f"[{host_text}]:{port}"
    return f"{host_text}:{port}"


class ClientSocketError(Exception):
    """A failure on the client socket: a plain message or a wrapped error."""

    def __init__(self, message: str = "", *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return str(self.cause)
        return f"Client socket error: {self.message}"


class ServerSocketError(Exception):
    """A failure on the server socket, wrapping the error that caused it."""

    def __init__(self, cause: BaseException | None = None) -> None:
        super().__init__(cause)
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return "" if self.cause is None else str(self.cause)


class SendError(ServerSocketError):
    """A packet could not be sent to the given address."""

    def __init__(self, address: tuple[Any, ...]) -> None:
        super().__init__(None)
        self.address = address

    def __str__(self) -> str:
        return _format_address(self.address)