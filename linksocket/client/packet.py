"""Packets a client sends to the server."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Packet:
    """A raw payload sent to or received from the server."""

    payload: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "payload", bytes(self.payload))

    @classmethod
    def empty(cls) -> Packet:
        """A packet with no payload."""
        return cls(b"")