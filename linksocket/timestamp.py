"""Wall-clock timestamps that travel inside packets."""

from __future__ import annotations

import struct
import time
from dataclasses import dataclass

from linksocket.packet_reader import PacketReader

_U64_LIMIT = 1 << 64


@dataclass(frozen=True)
class Timestamp:
    """Whole seconds since the Unix epoch, written as a big-endian u64."""

    time: int

    def __post_init__(self) -> None:
        if not 0 <= self.time < _U64_LIMIT:
            raise ValueError(f"timestamp out of u64 range: {self.time}")

    @classmethod
    def now(cls) -> Timestamp:
        """The current moment, truncated to whole seconds."""
        return cls(int(time.time()))

    def write(self, buffer: bytearray) -> None:
        """Append the timestamp to an outgoing byte buffer."""
        buffer.extend(struct.pack(">Q", self.time))

    @classmethod
    def read(cls, reader: PacketReader) -> Timestamp:
        """Read a timestamp from an incoming packet."""
        return cls(reader.read_u64())