"""Left id, right id and cost of each word."""

from __future__ import annotations

from typing import ClassVar

from morphdic.binary import ByteReader


class WordParams:
    """Fixed-size records of three 16-bit values, with cost overrides."""

    ELEMENT_SIZE: ClassVar[int] = 2 * 3

    def __init__(self, data, size, offset):
        self.data = data
        self.size = size
        self.offset = offset
        self._cost_overrides: dict[int, int] = {}

    def storage_size(self) -> int:
        """Size of the section in bytes, including its 4-byte count."""
        return 4 + self.ELEMENT_SIZE * self.size

    def _read(self, word_id: int, field: int) -> int:
        position = self.offset + self.ELEMENT_SIZE * word_id + 2 * field
        return ByteReader(self.data, position).i16()

    def get_left_id(self, word_id) -> int:
        return self._read(word_id, 0)

    def get_right_id(self, word_id) -> int:
        return self._read(word_id, 1)

    def get_cost(self, word_id) -> int:
        """Return the cost, preferring a value set with ``set_cost``."""
        if word_id in self._cost_overrides:
            return self._cost_overrides[word_id]
        return self._read(word_id, 2)

    def set_cost(self, word_id, cost) -> None:
        """Override the cost of a word."""
        if not -0x8000 <= cost <= 0x7FFF:
            raise ValueError(f"cost does not fit in 16 bits: {cost}")
        self._cost_overrides[word_id] = cost