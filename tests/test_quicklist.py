import pytest

from godis.quicklist import PAGE_SIZE, QuickList
from godis.utils import equals


def _filled(n):
    ql = QuickList()
    for i in range(n):
        ql.add(i)
    return ql


def test_add():
    size = PAGE_SIZE * 10
    ql = _filled(size)
    assert len(ql) == size
    for i in range(size):
        assert ql.get(i) == i
    assert list(ql) == list(range(size))


def test_set():
    size = PAGE_SIZE * 10
    ql = _filled(size)
    for i in range(size):
        ql.set(i, 2 * i)
    for i in range(size):
        assert ql.get(i) == 2 * i


def test_get_out_of_bound():
    ql = _filled(3)
    with pytest.raises(IndexError):
        ql.get(3)
    with pytest.raises(IndexError):
        ql.get(-1)
    with pytest.raises(IndexError):
        QuickList().get(0)


def test_insert_at_head():
    size = PAGE_SIZE * 10
    ql = QuickList()
    for i in range(size):
        ql.insert(0, i)
    assert len(ql) == size
    for i in range(size):
        assert ql.get(i) == size - i - 1


def test_insert_into_second_half_page():
    ql = QuickList()
    for _ in range(PAGE_SIZE):
        ql.add(0)
    for i in range(PAGE_SIZE):
        ql.insert(PAGE_SIZE - 1, i + 1)
    for i in range(PAGE_SIZE - 1, len(ql)):
        assert ql.get(i) == 2 * PAGE_SIZE - 1 - i


def test_insert_out_of_bound():
    ql = _filled(2)
    with pytest.raises(IndexError):
        ql.insert(3, 9)


def test_remove_last():
    size = PAGE_SIZE * 10
    ql = _filled(size)
    for i in range(size):
        assert ql.remove_last() == size - i - 1
        assert len(ql) == size - i - 1
    assert ql.remove_last() is None


def _doubled(n):
    ql = QuickList()
    for i in range(n):
        ql.add(i)
        ql.add(i)
    return ql


SIZE = PAGE_SIZE // 2 + 88  # enough doubled values to span two pages


def test_remove_all_by_val():
    ql = _doubled(SIZE)
    index = 0
    while index < len(ql):
        ql.remove_all_by_val(lambda a, index=index: equals(a, index))
        assert index not in list(ql)
        index += 1
    assert ql.remove_all_by_val(lambda a: a == SIZE - 1) == 2


def test_remove_all_by_val_empty():
    assert QuickList().remove_all_by_val(lambda a: True) == 0


def test_remove_by_val():
    ql = _doubled(SIZE)
    for i in range(SIZE):
        ql.remove_by_val(lambda a, i=i: equals(a, i), 1)
    assert list(ql) == list(range(SIZE))
    for i in range(SIZE):
        ql.remove_by_val(lambda a, i=i: equals(a, i), 1)
    assert len(ql) == 0


def test_reverse_remove_by_val():
    ql = _doubled(SIZE)
    for i in range(SIZE):
        ql.reverse_remove_by_val(lambda a, i=i: equals(a, i), 1)
    assert list(ql) == list(range(SIZE))
    for i in range(SIZE):
        ql.reverse_remove_by_val(lambda a, i=i: equals(a, i), 1)
    assert len(ql) == 0


def test_reverse_remove_takes_from_tail():
    ql = QuickList()
    for v in ("a", "x", "b", "x"):
        ql.add(v)
    assert ql.reverse_remove_by_val(lambda a: a == "x", 1) == 1
    assert list(ql) == ["a", "x", "b"]


def test_contains():
    ql = _filled(4)
    assert ql.contains(lambda a: a == 1)
    assert not ql.contains(lambda a: a == -1)


def test_range():
    size = 10
    ql = _filled(size)
    for start in range(size):
        for stop in range(start, size):
            assert ql.range(start, stop) == list(range(start, stop))


def test_range_across_pages():
    ql = _filled(PAGE_SIZE * 3)
    assert ql.range(PAGE_SIZE - 2, PAGE_SIZE + 3) == list(range(PAGE_SIZE - 2, PAGE_SIZE + 3))


def test_range_errors():
    ql = _filled(3)
    with pytest.raises(IndexError):
        ql.range(3, 3)
    with pytest.raises(IndexError):
        ql.range(2, 1)
    with pytest.raises(IndexError):
        ql.range(0, 4)


def test_remove():
    size = PAGE_SIZE * 3
    ql = _filled(size)
    for i in range(size - 1, -1, -1):
        assert ql.remove(i) == i
        assert len(ql) == i
        assert list(ql) == list(range(i))


def test_remove_from_front():
    size = PAGE_SIZE * 2 + 5
    ql = _filled(size)
    for i in range(size):
        assert ql.remove(0) == i
    assert len(ql) == 0


def test_reversed():
    size = PAGE_SIZE * 10
    ql = _filled(size)
    assert list(reversed(ql)) == list(range(size - 1, -1, -1))