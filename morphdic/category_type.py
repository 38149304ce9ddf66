"""Bit set of character categories."""

from __future__ import annotations

import enum
from collections.abc import Iterator

from morphdic.errors import InvalidCategoryTypeError


class CategoryType(enum.IntFlag):
    """A set of categories a character belongs to."""

    DEFAULT = 1 << 0
    SPACE = 1 << 1
    KANJI = 1 << 2
    SYMBOL = 1 << 3
    NUMERIC = 1 << 4
    ALPHA = 1 << 5
    HIRAGANA = 1 << 6
    KATAKANA = 1 << 7
    KANJINUMERIC = 1 << 8
    GREEK = 1 << 9
    CYRILLIC = 1 << 10
    USER1 = 1 << 11
    USER2 = 1 << 12
    USER3 = 1 << 13
    USER4 = 1 << 14
    NOOOVBOW = 1 << 31
    ALL = 0x7FFFFFFF

    @classmethod
    def from_name(cls, name):
        """Return the category with the given name, ignoring case."""
        member = cls.__members__.get(name.upper())
        if member is None:
            raise InvalidCategoryTypeError(name)
        return member

    def members(self) -> Iterator[CategoryType]:
        """Yield each single-bit category in this set, lowest bit first."""
        remaining = int(self)
        while remaining:
            lowest = remaining & -remaining
            remaining ^= lowest
            yield CategoryType(lowest)

    def count(self) -> int:
        """Return the number of categories in this set."""
        return int(self).bit_count()

    def describe(self) -> str:
        """Return the names of the categories joined with ' | '."""
        names = [m.name or f"0x{int(m):X}" for m in self.members()]
        return " | ".join(names) if names else "(empty)"