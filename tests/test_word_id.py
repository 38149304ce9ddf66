import pytest

from morphdic.errors import TooLargeDictionaryIdError, TooLargeWordIdError
from morphdic.word_id import WordId


@pytest.mark.parametrize(
    "dic, word",
    [
        (0, 0),
        (0, 1),
        (0, 0x0FFFFFFF),
        (14, 0x0FFFFFFF),
        (1, 0),
        (1, 0x0FFFFFFF),
        (15, 3121),
        (15, 0),
        (15, 0x0FFFFFFF),
    ],
)
def test_create(dic, word):
    wid = WordId.new(dic, word)
    assert wid.dic() == dic
    assert wid.word() == word


def test_display():
    assert str(WordId.new(0, 521321)) == "(0, 521321)"


def test_debug():
    assert repr(WordId.new(0, 521321)) == "(0, 521321)"


def test_is_system():
    assert WordId.new(0, 0).is_system()
    assert not WordId.new(1, 0).is_system()
    assert not WordId.new(14, 0).is_system()
    assert not WordId.new(15, 0).is_system()


def test_is_user():
    assert not WordId.new(0, 0).is_user()
    assert WordId.new(1, 0).is_user()
    assert WordId.new(14, 0).is_user()
    assert not WordId.new(15, 0).is_user()


def test_is_oov():
    assert not WordId.new(0, 0).is_oov()
    assert not WordId.new(1, 0).is_oov()
    assert not WordId.new(14, 0).is_oov()
    assert WordId.new(15, 0).is_oov()


def test_is_special():
    assert WordId.EOS.is_special()
    assert WordId.BOS.is_special()
    assert not WordId.INVALID.is_special()
    assert not WordId.new(0, 0).is_special()


def test_oov_display_uses_minus_one():
    assert str(WordId.oov(5)) == "(-1, 5)"


def test_raw_roundtrip():
    wid = WordId.new(3, 12345)
    assert WordId(wid.raw) == wid
    assert WordId.new(wid.dic(), wid.word()) == wid


def test_checked_accepts_valid():
    assert WordId.checked(2, 77) == WordId.new(2, 77)


def test_checked_rejects_large_dic():
    with pytest.raises(TooLargeDictionaryIdError) as info:
        WordId.checked(16, 0)
    assert info.value.dic == 16


def test_checked_rejects_large_word():
    with pytest.raises(TooLargeWordIdError) as info:
        WordId.checked(0, 0x10000000)
    assert info.value.word == 0x10000000
    assert info.value.limit == WordId.MAX_WORD


def test_ordering_follows_raw():
    assert WordId.new(0, 5) < WordId.new(1, 0) < WordId.EOS < WordId.BOS


def test_raw_out_of_range():
    with pytest.raises(ValueError):
        WordId(1 << 32)