"""Connection cost matrix between word right and left context ids."""

from __future__ import annotations

import struct

from morphdic.errors import InvalidDictionaryGrammarError


class ConnectionMatrix:
    """Matrix of 16-bit connection costs, stored column by right id."""

    def __init__(self, costs, num_left, num_right):
        costs = list(costs)
        if len(costs) != num_left * num_right:
            raise ValueError("cost count does not match matrix dimensions")
        self._costs = costs
        self.num_left = num_left
        self.num_right = num_right

    @classmethod
    def from_offset_size(cls, data, offset, num_left, num_right):
        """Read a ``num_left`` x ``num_right`` matrix from ``data`` at ``offset``."""
        if offset < 0 or num_left < 0 or num_right < 0:
            raise InvalidDictionaryGrammarError("negative connection matrix size")
        size = num_left * num_right
        if offset + 2 * size > len(data):
            raise InvalidDictionaryGrammarError(
                "connection matrix extends past the end of data"
            )
        costs = struct.unpack_from(f"<{size}h", data, offset)
        return cls(costs, num_left, num_right)

    def _index(self, left: int, right: int) -> int:
        if not (0 <= left < self.num_left and 0 <= right < self.num_right):
            raise IndexError(f"connection ({left}, {right}) is out of range")
        return right * self.num_left + left

    def cost(self, left, right) -> int:
        """Return the cost of connecting ``left`` to ``right``."""
        return self._costs[self._index(left, right)]

    def update(self, left, right, value) -> None:
        """Set the cost of connecting ``left`` to ``right``."""
        if not -0x8000 <= value <= 0x7FFF:
            raise ValueError(f"cost does not fit in 16 bits: {value}")
        self._costs[self._index(left, right)] = value