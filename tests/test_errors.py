from morphdic.errors import (
    CharacterCategoryError,
    CharacterCategoryErrorKind,
    HeaderError,
    HeaderErrorKind,
    InputTooLongError,
    InvalidCategoryTypeError,
    InvalidRangeError,
    InvalidUtf16Error,
    LexiconSetError,
    ParseError,
    SudachiError,
    TooLargeDictionaryIdError,
    TooLargeWordIdError,
    TooManyDictionariesError,
)


def test_invalid_category_type_keeps_name():
    err = InvalidCategoryTypeError("FOO")
    assert err.name == "FOO"
    assert "FOO" in str(err)


def test_invalid_category_type_is_sudachi_error():
    err = InvalidCategoryTypeError("BAR")
    assert isinstance(err, SudachiError)
    assert err.name == "BAR"
    assert "BAR" in str(err)


def test_character_category_error_fields():
    err = CharacterCategoryError(CharacterCategoryErrorKind.INVALID_FORMAT, 0)
    assert err.kind is CharacterCategoryErrorKind.INVALID_FORMAT
    assert err.line == 0
    assert err.detail is None


def test_character_category_error_type_message_mentions_type():
    err = CharacterCategoryError(
        CharacterCategoryErrorKind.INVALID_CATEGORY_TYPE, 4, "FOO"
    )
    assert "FOO" in str(err)
    assert err.detail == "FOO"


def test_character_category_error_invalid_char_is_hex():
    err = CharacterCategoryError(CharacterCategoryErrorKind.INVALID_CHAR, 5, 0xD800)
    assert "D800" in str(err)
    assert err.line == 5


def test_header_error_message():
    err = HeaderError(HeaderErrorKind.CANNOT_PARSE)
    assert err.kind is HeaderErrorKind.CANNOT_PARSE
    assert str(err) == "Invalid header: Unable to parse"


def test_lexicon_set_errors_share_base():
    errors = [
        TooLargeWordIdError(0x10000000, 0x0FFFFFFF),
        TooLargeDictionaryIdError(16),
        TooManyDictionariesError(),
    ]
    assert [isinstance(err, LexiconSetError) for err in errors] == [True, True, True]
    assert [isinstance(err, SudachiError) for err in errors] == [True, True, True]
    assert errors[0].word == 0x10000000
    assert errors[1].dic == 16


def test_too_large_word_id_fields():
    err = TooLargeWordIdError(0x10000000, 0x0FFFFFFF)
    assert err.word == 0x10000000
    assert err.limit == 0x0FFFFFFF
    assert str(0x10000000) in str(err)


def test_too_large_dictionary_id_fields():
    err = TooLargeDictionaryIdError(16)
    assert err.dic == 16
    assert "16" in str(err)


def test_input_too_long_fields():
    err = InputTooLongError(70000, 49149)
    assert (err.length, err.limit) == (70000, 49149)
    assert "70000" in str(err) and "49149" in str(err)


def test_invalid_range_message():
    err = InvalidRangeError(3, 7)
    assert (err.start, err.end) == (3, 7)
    assert str(err) == "Invalid range: 3..7"


def test_utf16_error_is_parse_error():
    err = InvalidUtf16Error("bad surrogate")
    assert isinstance(err, ParseError)
    assert isinstance(err, SudachiError)
    assert str(err) == "bad surrogate"