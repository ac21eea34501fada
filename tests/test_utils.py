import pytest

from godis.utils import (
    bytes_equals,
    convert_range,
    equals,
    remove_duplicates,
    to_cmd_line,
    to_cmd_line2,
    to_cmd_line3,
)

OUT_OF_RANGE = (-1, -1)


def test_to_cmd_line_encodes_each_argument():
    assert to_cmd_line("set", "key", "value") == [b"set", b"key", b"value"]


def test_to_cmd_line_empty():
    assert to_cmd_line() == []


def test_to_cmd_line2_matches_to_cmd_line():
    assert to_cmd_line2("set", "key", "value") == to_cmd_line("set", "key", "value")


def test_to_cmd_line3_keeps_bytes_arguments():
    assert to_cmd_line3("set", b"key", b"\x00\xff") == [b"set", b"key", b"\x00\xff"]


def test_equals_compares_bytes_by_content():
    assert equals(b"abc", bytearray(b"abc"))
    assert not equals(b"abc", b"abd")


def test_equals_other_values():
    marker = object()
    assert equals(marker, marker)
    assert not equals(marker, object())
    assert equals(3, 3)


def test_bytes_equals_none_handling():
    assert not bytes_equals(None, b"")
    assert not bytes_equals(b"", None)
    assert bytes_equals(None, None)
    assert bytes_equals(b"", b"")


def test_bytes_equals_length_mismatch():
    assert not bytes_equals(b"ab", b"abc")


@pytest.mark.parametrize("size", [1, 5, 10])
def test_convert_range_full(size):
    assert convert_range(0, -1, size) == (0, size)
    assert convert_range(0, size - 1, size) == (0, size)


@pytest.mark.parametrize("size", [1, 5, 10])
def test_convert_range_negative_start(size):
    assert convert_range(-1, -1, size) == (size - 1, size)
    assert convert_range(-size, -1, size) == (0, size)


@pytest.mark.parametrize("size", [1, 5, 10])
def test_convert_range_clamps_end(size):
    assert convert_range(0, size + 5, size) == (0, size)


@pytest.mark.parametrize(
    "start_offset, end_offset",
    [(0, 1), (1, 2)],
)
def test_convert_range_start_beyond_size(start_offset, end_offset):
    size = 10
    assert convert_range(size + start_offset, size + end_offset, size) == OUT_OF_RANGE


def test_convert_range_too_negative():
    size = 10
    assert convert_range(-size - 1, 0, size) == OUT_OF_RANGE
    assert convert_range(0, -size - 1, size) == OUT_OF_RANGE


def test_convert_range_start_after_end():
    size = 10
    assert convert_range(size - 2, 1, size) == OUT_OF_RANGE


def test_convert_range_result_within_bounds():
    size = 7
    for start in range(-size, size):
        for end in range(-size, size + 2):
            lo, hi = convert_range(start, end, size)
            if (lo, hi) != OUT_OF_RANGE:
                assert 0 <= lo <= hi <= size


def test_remove_duplicates_keeps_first_occurrence():
    assert remove_duplicates([b"a", b"b", b"a", b"c", b"b"]) == [b"a", b"b", b"c"]


def test_remove_duplicates_empty():
    assert remove_duplicates([]) == []