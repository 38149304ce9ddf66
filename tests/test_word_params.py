import struct

import pytest

from morphdic.errors import ParseError
from morphdic.word_params import WordParams


def _params():
    data = b"\x00\x00" + struct.pack("<hhh", 4, 5, -300) + struct.pack("<hhh", 7, 8, 1200)
    return WordParams(data, 2, 2)


def test_reads_left_right_and_cost():
    params = _params()
    assert params.get_left_id(0) == 4
    assert params.get_right_id(0) == 5
    assert params.get_cost(0) == -300
    assert params.get_left_id(1) == 7
    assert params.get_right_id(1) == 8
    assert params.get_cost(1) == 1200


def test_set_cost_overrides_only_that_word():
    params = _params()
    params.set_cost(0, 50)
    assert params.get_cost(0) == 50
    assert params.get_cost(1) == 1200
    assert params.get_left_id(0) == 4


def test_set_cost_out_of_range():
    params = _params()
    with pytest.raises(ValueError):
        params.set_cost(0, 40000)


def test_storage_size():
    params = _params()
    assert params.storage_size() == 16
    assert params.size == 2


def test_reading_past_end_raises():
    params = _params()
    with pytest.raises(ParseError):
        params.get_left_id(2)