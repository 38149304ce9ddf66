"""Dictionary grammar: parts of speech and connection costs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from morphdic.binary import ByteReader
from morphdic.character_category import CharacterCategory
from morphdic.connect import ConnectionMatrix
from morphdic.errors import InvalidDictionaryGrammarError, ParseError


@dataclass(eq=False)
class Grammar:
    """Part-of-speech list, connection matrix and character categories."""

    pos_list: list[list[str]]
    storage_size: int
    connection: ConnectionMatrix
    character_category: CharacterCategory = field(default_factory=CharacterCategory)

    INHIBITED_CONNECTION: ClassVar[int] = 0x7FFF
    POS_DEPTH: ClassVar[int] = 6
    BOS_PARAMETER: ClassVar[tuple[int, int, int]] = (0, 0, 0)
    EOS_PARAMETER: ClassVar[tuple[int, int, int]] = (0, 0, 0)

    @classmethod
    def parse(cls, data, offset=0):
        """Read the grammar section that starts at ``offset`` in ``data``."""
        reader = ByteReader(data, offset)
        try:
            pos_size = reader.u16()
            pos_list = [
                [reader.utf16_string() for _ in range(cls.POS_DEPTH)]
                for _ in range(pos_size)
            ]
            left_size = reader.i16()
            right_size = reader.i16()
        except ParseError as exc:
            raise InvalidDictionaryGrammarError("Invalid grammar") from exc
        if left_size < 0 or right_size < 0:
            raise InvalidDictionaryGrammarError("Invalid grammar")

        table_offset = reader.offset
        storage_size = (table_offset - offset) + 2 * left_size * right_size
        connection = ConnectionMatrix.from_offset_size(
            data, table_offset, left_size, right_size
        )
        return cls(pos_list, storage_size, connection)

    def connect_cost(self, left_id, right_id) -> int:
        """Cost of a node with right id ``left_id`` followed by left id ``right_id``."""
        return self.connection.cost(left_id & 0xFFFF, right_id & 0xFFFF)

    def set_connect_cost(self, left_id, right_id, cost) -> None:
        """Override the connection cost of one pair of ids."""
        self.connection.update(left_id & 0xFFFF, right_id & 0xFFFF, cost)

    def get_part_of_speech_id(self, pos):
        """Return the index of a part of speech, or None if it is unknown."""
        wanted = list(pos)
        for index, candidate in enumerate(self.pos_list):
            if candidate == wanted:
                return index
        return None

    def merge(self, other) -> None:
        """Append the parts of speech of another grammar."""
        self.pos_list.extend(other.pos_list)