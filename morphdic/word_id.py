"""Packed identifier of a word and the dictionary it comes from."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from morphdic.errors import TooLargeDictionaryIdError, TooLargeWordIdError

_WORD_MASK = 0x0FFF_FFFF
_DIC_MASK = 0xF


@dataclass(frozen=True, order=True, repr=False)
class WordId:
    """Dictionary id in the top 4 bits and word id in the lower 28 bits.

    Dictionary 0 is the system dictionary, 15 marks OOV and special nodes.
    """

    raw: int

    INVALID: ClassVar[WordId]
    BOS: ClassVar[WordId]
    EOS: ClassVar[WordId]
    MAX_WORD: ClassVar[int] = _WORD_MASK

    def __post_init__(self):
        if not 0 <= self.raw <= 0xFFFF_FFFF:
            raise ValueError(f"raw word id out of range: {self.raw}")

    @classmethod
    def new(cls, dic, word):
        """Build from parts, dropping bits that do not fit."""
        return cls(((dic & _DIC_MASK) << 28) | (word & _WORD_MASK))

    @classmethod
    def checked(cls, dic, word):
        """Build from parts, raising if either part does not fit."""
        if dic & ~_DIC_MASK:
            raise TooLargeDictionaryIdError(dic)
        if word & ~_WORD_MASK:
            raise TooLargeWordIdError(word, _WORD_MASK)
        return cls.new(dic, word)

    @classmethod
    def oov(cls, pos_id):
        """Return the id of an OOV node with the given part of speech."""
        return cls.new(_DIC_MASK, pos_id)

    def dic(self) -> int:
        return self.raw >> 28

    def word(self) -> int:
        return self.raw & _WORD_MASK

    def is_system(self) -> bool:
        return self.dic() == 0

    def is_user(self) -> bool:
        return self.dic() not in (0, _DIC_MASK)

    def is_oov(self) -> bool:
        return self.dic() == _DIC_MASK

    def is_special(self) -> bool:
        return WordId.EOS <= self < WordId.INVALID

    def __str__(self) -> str:
        dic = -1 if self.is_oov() else self.dic()
        return f"({dic}, {self.word()})"

    def __repr__(self) -> str:
        return str(self)


WordId.INVALID = WordId(0xFFFF_FFFF)
WordId.BOS = WordId(0xFFFF_FFFE)
WordId.EOS = WordId(0xFFFF_FFFD)