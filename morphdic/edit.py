"""Recording and applying replacements to byte ranges of input text."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from morphdic.errors import InputTooLongError, InvalidRangeError

REALLY_MAX_LENGTH = 0xFFFF
"""Byte length of edited text beyond which the input is rejected."""


@dataclass(frozen=True)
class ReplaceOp:
    """Replace UTF-8 bytes ``[start, end)`` of the current text with ``text``."""

    start: int
    end: int
    text: str


class InputEditor:
    """Collects replacements, which must be sorted and non-overlapping."""

    def __init__(self):
        self._ops: list[ReplaceOp] = []

    def __len__(self) -> int:
        return len(self._ops)

    def replace(self, start, end, text) -> None:
        """Replace the byte range ``[start, end)`` with ``text``."""
        self._ops.append(ReplaceOp(start, end, text))

    def replace_chars(self, start, end, first, rest=()) -> None:
        """Replace the byte range with ``first`` followed by the chars of ``rest``."""
        self._ops.append(ReplaceOp(start, end, first + "".join(rest)))

    def take(self) -> list[ReplaceOp]:
        """Return the collected replacements and forget them."""
        ops, self._ops = self._ops, []
        return ops


def _is_boundary(data: bytes, index: int) -> bool:
    return index == len(data) or (data[index] & 0xC0) != 0x80


def resolve_edits(source, source_mapping, edits: Iterable[ReplaceOp]):
    """Apply ``edits`` to ``source`` and return ``(text, mapping)``.

    ``source_mapping`` maps each UTF-8 byte of ``source`` (plus one past the
    end) to a byte of the original text; the returned mapping does the same
    for the edited text. A replacement's first byte maps to the start of the
    replaced range and its other bytes to the end of it.
    """
    data = source.encode("utf-8")
    if len(source_mapping) != len(data) + 1:
        raise ValueError("mapping must have one entry per byte plus one")

    parts: list[bytes] = []
    mapping: list[int] = []
    start = 0
    cur_len = len(data)
    for op in edits:
        if not (start <= op.start <= op.end <= len(data)):
            raise InvalidRangeError(op.start, op.end)
        if not (_is_boundary(data, op.start) and _is_boundary(data, op.end)):
            raise InvalidRangeError(op.start, op.end)

        parts.append(data[start : op.start])
        mapping.extend(source_mapping[start : op.start])
        start = op.end

        replacement = op.text.encode("utf-8")
        width = op.end - op.start
        if replacement:
            parts.append(replacement)
            mapping.append(source_mapping[op.start])
            mapping.extend([source_mapping[op.end]] * (len(replacement) - 1))
        cur_len += len(replacement) - width
        if cur_len > REALLY_MAX_LENGTH:
            raise InputTooLongError(cur_len, REALLY_MAX_LENGTH)

    parts.append(data[start:])
    mapping.extend(source_mapping[start:])
    mapping[0] = 0
    return b"".join(parts).decode("utf-8"), mapping