"""Table mapping trie values to lists of word ids."""

from __future__ import annotations

from morphdic.binary import ByteReader


class WordIdTable:
    """Byte-counted groups of 32-bit word ids, addressed by byte index."""

    def __init__(self, data, size, offset):
        self.data = data
        self.size = size
        self.offset = offset

    def storage_size(self) -> int:
        """Size of the table in bytes, including its 4-byte length prefix."""
        return 4 + self.size

    def entries(self, index) -> list[int]:
        """Return the word ids of the group that starts at byte ``index``."""
        return ByteReader(self.data, self.offset + index).u32_array()