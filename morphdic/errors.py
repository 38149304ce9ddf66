"""Exception types raised while reading dictionaries and preparing input."""

from __future__ import annotations

import enum


class SudachiError(Exception):
    """Base class of every error raised by this package."""


class ParseError(SudachiError):
    """Binary data could not be parsed."""


class InvalidUtf16Error(ParseError):
    """A UTF-16 string in binary data is malformed."""


class InvalidDictionaryGrammarError(SudachiError):
    """The grammar section of a dictionary is malformed."""


class InvalidCategoryTypeError(SudachiError, ValueError):
    """A character category name is not known."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Invalid character category type: {name}")


class CharacterCategoryErrorKind(enum.Enum):
    """What went wrong in a character definition file."""

    INVALID_FORMAT = enum.auto()
    INVALID_CATEGORY_TYPE = enum.auto()
    MULTIPLE_TYPE_DEFINITION = enum.auto()
    INVALID_CHAR = enum.auto()


class CharacterCategoryError(SudachiError):
    """A character definition file has an error at a given line."""

    def __init__(self, kind, line, detail=None):
        self.kind = kind
        self.line = line
        self.detail = detail
        super().__init__(
            f"Invalid character category definition: {self._describe()}"
        )

    def _describe(self) -> str:
        match self.kind:
            case CharacterCategoryErrorKind.INVALID_FORMAT:
                return f"Invalid format at line {self.line}"
            case CharacterCategoryErrorKind.INVALID_CATEGORY_TYPE:
                return f"Invalid type {self.detail} at line {self.line}"
            case CharacterCategoryErrorKind.MULTIPLE_TYPE_DEFINITION:
                return f"Multiple definition for type {self.detail} at line {self.line}"
            case CharacterCategoryErrorKind.INVALID_CHAR:
                return f"Invalid character {self.detail:X} at line {self.line}"
        return f"{self.kind.name} at line {self.line}"


class HeaderErrorKind(enum.Enum):
    """What went wrong while reading a dictionary header."""

    INVALID_VERSION = "Invalid header version"
    INVALID_SYSTEM_DICT_VERSION = "Invalid system dictionary version"
    INVALID_USER_DICT_VERSION = "Invalid user dictionary version"
    CANNOT_PARSE = "Unable to parse"


class HeaderError(SudachiError):
    """A dictionary header is invalid."""

    def __init__(self, kind):
        self.kind = kind
        super().__init__(f"Invalid header: {kind.value}")


class LexiconSetError(SudachiError):
    """Base class of errors about combining lexicons."""


class TooLargeWordIdError(LexiconSetError, ValueError):
    """A word id does not fit into the word part of a WordId."""

    def __init__(self, word, limit):
        self.word = word
        self.limit = limit
        super().__init__(f"too large word_id {word} in dict {limit}")


class TooLargeDictionaryIdError(LexiconSetError, ValueError):
    """A dictionary id does not fit into the dictionary part of a WordId."""

    def __init__(self, dic):
        self.dic = dic
        super().__init__(f"too large dictionary_id {dic}")


class TooManyDictionariesError(LexiconSetError):
    """No room is left for another user dictionary."""


class InputTooLongError(SudachiError, ValueError):
    """The input text is longer than the analysis allows."""

    def __init__(self, length, limit):
        self.length = length
        self.limit = limit
        super().__init__(
            f"Input is too long, it can't be more than {limit} bytes, was {length}"
        )


class InvalidRangeError(SudachiError, ValueError):
    """A range is not valid for the data it applies to."""

    def __init__(self, start, end):
        self.start = start
        self.end = end
        super().__init__(f"Invalid range: {start}..{end}")