"""Bounds-checked little/big-endian reads over an in-memory byte buffer."""

import struct
from enum import Enum

from riffwave.exceptions import TruncatedChunkError


class Endian(Enum):
    """Byte order of a multi-byte field."""

    LITTLE = "<"
    BIG = ">"


class ByteCursor:
    """Single, monotonically advancing read position over a byte buffer.

    Every read and skip is checked against the end of the buffer; running
    past it raises ``TruncatedChunkError`` and leaves the position unchanged.
    """

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._data = bytes(data)
        self._position = 0

    def __len__(self) -> int:
        return len(self._data)

    @property
    def position(self) -> int:
        return self._position

    @property
    def remaining(self) -> int:
        return len(self._data) - self._position

    def _take(self, size: int) -> bytes:
        if size < 0 or size > self.remaining:
            raise TruncatedChunkError(self._position, size, self.remaining)
        start = self._position
        self._position += size
        return self._data[start:self._position]

    def _unpack(self, fmt: str, size: int, endian: Endian) -> int | float:
        return struct.unpack(endian.value + fmt, self._take(size))[0]

    def skip(self, size: int) -> None:
        """Advance the position by ``size`` bytes."""
        self._take(size)

    def skip_padding(self) -> int:
        """Skip one pad byte if one is left in the buffer.

        Returns:
            Number of bytes skipped (0 or 1)
        """
        if self.remaining == 0:
            return 0
        self._position += 1
        return 1

    def read_bytes(self, size: int) -> bytes:
        return self._take(size)

    def read_string(self, size: int, encoding: str = "utf-8") -> str:
        return self._take(size).decode(encoding, errors="replace")

    def read_u8(self) -> int:
        return self._take(1)[0]

    def read_u16(self, endian: Endian = Endian.LITTLE) -> int:
        return self._unpack("H", 2, endian)

    def read_u32(self, endian: Endian = Endian.LITTLE) -> int:
        return self._unpack("I", 4, endian)

    def read_i16(self, endian: Endian = Endian.LITTLE) -> int:
        return self._unpack("h", 2, endian)

    def read_i24(self, endian: Endian = Endian.LITTLE) -> int:
        """Read a 3-byte signed integer, sign-extended to 32 bits.

        The sign is taken from the high bit of the most significant byte
        (third byte little-endian, first byte big-endian) and the missing
        fourth byte is filled with 0xFF or 0x00 accordingly.
        """
        raw = self._take(3)
        if endian is Endian.LITTLE:
            fill = b"\xff" if raw[2] & 0x80 else b"\x00"
            return struct.unpack("<i", raw + fill)[0]
        fill = b"\xff" if raw[0] & 0x80 else b"\x00"
        return struct.unpack(">i", fill + raw)[0]

    def read_i32(self, endian: Endian = Endian.LITTLE) -> int:
        return self._unpack("i", 4, endian)

    def read_i64(self, endian: Endian = Endian.LITTLE) -> int:
        return self._unpack("q", 8, endian)

    def read_f32(self, endian: Endian = Endian.LITTLE) -> float:
        return self._unpack("f", 4, endian)

    def read_f64(self, endian: Endian = Endian.LITTLE) -> float:
        return self._unpack("d", 8, endian)
