"""Sequential big-endian reading from a packet payload."""

from __future__ import annotations

import struct


class PacketReader:
    """Reads integers from a byte payload, advancing a position as it goes."""

    def __init__(self, buffer: bytes) -> None:
        self._buffer = bytes(buffer)
        self._position = 0

    def has_more(self) -> bool:
        """Whether unread bytes remain."""
        return self._position < len(self._buffer)

    def _read(self, fmt: str) -> int:
        size = struct.calcsize(fmt)
        end = self._position + size
        if end > len(self._buffer):
            raise EOFError(
                f"need {size} bytes at offset {self._position}, "
                f"payload has {len(self._buffer)}"
            )
        (value,) = struct.unpack_from(fmt, self._buffer, self._position)
        self._position = end
        return value

    def read_u8(self) -> int:
        """Read one unsigned byte."""
        return self._read(">B")

    def read_u16(self) -> int:
        """Read a big-endian unsigned 16-bit integer."""
        return self._read(">H")

    def read_u64(self) -> int:
        """Read a big-endian unsigned 64-bit integer."""
        return self._read(">Q")

    def buffer(self) -> bytes:
        """The whole underlying payload."""
        return self._buffer