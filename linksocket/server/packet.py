"""Packets exchanged between the server and its clients."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple


@dataclass(frozen=True)
class Packet:
    """A payload together with the client address it came from or goes to."""

    address: Tuple[Any, ...]
    payload: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "address", tuple(self.address))
        object.__setattr__(self, "payload", bytes(self.payload))