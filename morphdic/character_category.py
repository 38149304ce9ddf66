"""Mapping from characters to their category sets."""

from __future__ import annotations

import bisect
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

from morphdic.category_type import CategoryType
from morphdic.errors import (
    CharacterCategoryError,
    CharacterCategoryErrorKind,
    InvalidCategoryTypeError,
    ParseError,
)

_MAX_CHAR = 0x10FFFF
_U32_MAX = 0xFFFF_FFFF
_HEX = re.compile(r"\+?[0-9A-Fa-f]+")


@dataclass(frozen=True)
class CategoryRange:
    """Half-open range of code points ``[begin, end)`` with its categories."""

    begin: int
    end: int
    categories: CategoryType


def _is_valid_char(code: int) -> bool:
    return 0 <= code <= _MAX_CHAR and not 0xD800 <= code <= 0xDFFF


def _parse_hex(text: str) -> int:
    while text.startswith("0x"):
        text = text[2:]
    if not _HEX.fullmatch(text):
        raise ParseError(f"invalid hexadecimal number: {text!r}")
    value = int(text, 16)
    if value > _U32_MAX:
        raise ParseError(f"number too large: {text!r}")
    return value


def _as_lines(lines: Iterable[str] | str) -> Iterable[str]:
    if isinstance(lines, str):
        return lines.splitlines()
    return lines


def read_character_definition(lines: Iterable[str] | str) -> list[CategoryRange]:
    """Read character definition lines into a list of ranges.

    Each meaningful line has the form ``0xBEGIN[..0xEND] TYPE [TYPE...]``,
    where the end bound is inclusive. Only lines starting with ``0x`` are
    read; everything after a column starting with ``#`` is ignored.
    """
    ranges: list[CategoryRange] = []
    for lineno, raw in enumerate(_as_lines(lines)):
        line = raw.strip()
        if not line or line.startswith("#") or not line.startswith("0x"):
            continue

        cols = line.split()
        if len(cols) < 2:
            raise CharacterCategoryError(
                CharacterCategoryErrorKind.INVALID_FORMAT, lineno
            )

        bounds = cols[0].split("..")
        begin = _parse_hex(bounds[0])
        end = _parse_hex(bounds[1]) + 1 if len(bounds) > 1 else begin + 1
        if begin >= end:
            raise CharacterCategoryError(
                CharacterCategoryErrorKind.INVALID_FORMAT, lineno
            )
        for code in (begin, end):
            if not _is_valid_char(code):
                raise CharacterCategoryError(
                    CharacterCategoryErrorKind.INVALID_CHAR, lineno, code
                )

        categories = CategoryType(0)
        for elem in cols[1:]:
            if elem.startswith("#"):
                break
            try:
                categories |= CategoryType.from_name(elem)
            except InvalidCategoryTypeError:
                raise CharacterCategoryError(
                    CharacterCategoryErrorKind.INVALID_CATEGORY_TYPE, lineno, elem
                ) from None

        ranges.append(CategoryRange(begin, end, categories))
    return ranges


@dataclass(frozen=True)
class CharacterCategory:
    """Non-overlapping split of the code point space into category sets.

    ``categories[i]`` applies to ``[boundaries[i - 1], boundaries[i])``, with
    0 and the end of the code space implied at either side, so there is
    always one more category than boundaries.
    """

    boundaries: tuple[int, ...] = ()
    categories: tuple[CategoryType, ...] = field(
        default=(CategoryType.DEFAULT,)
    )

    @classmethod
    def from_file(cls, path):
        """Read a character definition file."""
        with Path(path).open(encoding="utf-8") as handle:
            return cls.from_lines(handle)

    @classmethod
    def from_lines(cls, lines):
        """Read character definitions from lines of text or a whole string."""
        return cls.compile(read_character_definition(lines))

    @classmethod
    def compile(cls, ranges):
        """Turn possibly overlapping ranges into a searchable mapping."""
        ranges = list(ranges)
        if not ranges:
            return cls()

        boundaries = sorted({b for r in ranges for b in (r.begin, r.end)})
        categories = [CategoryType(0)] * len(boundaries)
        for rng in ranges:
            start = bisect.bisect_left(boundaries, rng.begin) + 1
            for i in range(start, len(boundaries)):
                if boundaries[i] > rng.end:
                    break
                categories[i] |= rng.categories

        categories[0] = CategoryType.DEFAULT

        final_boundaries: list[int] = []
        final_categories: list[CategoryType] = []
        last_category = categories[0]
        last_boundary = boundaries[0]
        for boundary, category in zip(boundaries[1:], categories[1:]):
            if category == last_category:
                last_boundary = boundary
                continue
            final_boundaries.append(last_boundary)
            final_categories.append(last_category)
            last_category = category
            last_boundary = boundary
        final_boundaries.append(last_boundary)
        final_categories.append(last_category)

        final_categories = [c or CategoryType.DEFAULT for c in final_categories]
        final_categories.append(CategoryType.DEFAULT)

        return cls(tuple(final_boundaries), tuple(final_categories))

    def get_category_types(self, char) -> CategoryType:
        """Return the category set of a character (or code point)."""
        if not self.boundaries:
            return CategoryType.DEFAULT
        code = ord(char) if isinstance(char, str) else int(char)
        return self.categories[bisect.bisect_right(self.boundaries, code)]

    def __iter__(self) -> Iterator[tuple[range, CategoryType]]:
        """Yield each code point range with its category set, in order."""
        starts = (0, *self.boundaries)
        ends = (*self.boundaries, _MAX_CHAR)
        yield from zip(
            (range(s, e) for s, e in zip(starts, ends)), self.categories
        )