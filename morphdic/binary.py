"""Sequential reader for the little-endian binary dictionary format."""

from __future__ import annotations

import struct

from morphdic.errors import InvalidUtf16Error, ParseError
from morphdic.word_id import WordId

_U8 = struct.Struct("<B")
_U16 = struct.Struct("<H")
_I16 = struct.Struct("<h")
_U32 = struct.Struct("<I")
_I32 = struct.Struct("<i")
_U64 = struct.Struct("<Q")


class ByteReader:
    """Reads values from a bytes-like object, advancing ``offset`` as it goes."""

    def __init__(self, data, offset=0):
        if offset < 0:
            raise ParseError(f"negative offset: {offset}")
        self.data = data
        self.offset = offset

    @property
    def remaining(self) -> int:
        """Number of bytes left after the current position."""
        return max(len(self.data) - self.offset, 0)

    def _ensure(self, size: int) -> None:
        if size < 0 or self.offset + size > len(self.data):
            raise ParseError(
                f"need {size} bytes at offset {self.offset}, "
                f"data has {len(self.data)}"
            )

    def _unpack(self, fmt: struct.Struct) -> int:
        self._ensure(fmt.size)
        (value,) = fmt.unpack_from(self.data, self.offset)
        self.offset += fmt.size
        return value

    def take(self, size) -> bytes:
        """Return the next ``size`` bytes."""
        self._ensure(size)
        chunk = bytes(self.data[self.offset : self.offset + size])
        self.offset += size
        return chunk

    def u8(self) -> int:
        return self._unpack(_U8)

    def u16(self) -> int:
        return self._unpack(_U16)

    def i16(self) -> int:
        return self._unpack(_I16)

    def u32(self) -> int:
        return self._unpack(_U32)

    def i32(self) -> int:
        return self._unpack(_I32)

    def u64(self) -> int:
        return self._unpack(_U64)

    def string_length(self) -> int:
        """Read a string length stored in one byte, or two if the high bit is set."""
        length = self.u8()
        if length >= 128:
            low = self.u8()
            return ((length & 0x7F) << 8) | low
        return length

    def utf16_string(self) -> str:
        """Read a length-prefixed UTF-16LE string."""
        length = self.string_length()
        raw = self.take(2 * length)
        try:
            return raw.decode("utf-16-le")
        except UnicodeDecodeError as exc:
            raise InvalidUtf16Error("Invalid utf16 string") from exc

    def u32_array(self) -> list[int]:
        """Read a byte-counted array of unsigned 32-bit integers."""
        count = self.u8()
        return [self.u32() for _ in range(count)]

    def word_id_array(self) -> list[WordId]:
        """Read a byte-counted array of packed word ids."""
        return [WordId(raw) for raw in self.u32_array()]