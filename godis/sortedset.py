"""Sorted set: members ordered by score, backed by a dictionary and a skip list."""

from __future__ import annotations

import math
from typing import Iterator, Optional

from godis.border import Border, Element, ScoreBorder
from godis.skiplist import Skiplist, _Node
from godis.wildcard import compile_pattern

_POSITIVE_INF = ScoreBorder(math.inf)


def _step(node: _Node, desc: bool) -> Optional[_Node]:
    return node.backward if desc else node.forward


def _walk(node: Optional[_Node], count: int, desc: bool) -> Iterator[Element]:
    for _ in range(count):
        if node is None:
            break
        yield node.element
        node = _step(node, desc)


def _format_score(score: float) -> str:
    if math.isnan(score):
        return "NaN"
    if math.isinf(score):
        return "+Inf" if score > 0 else "-Inf"
    return f"{score:.10f}"


class SortedSet:
    """A set of unique members, each bound to a score, kept in score order."""

    def __init__(self) -> None:
        self._dict: dict[str, Element] = {}
        self._skiplist = Skiplist()

    def add(self, member: str, score: float) -> bool:
        """Add or update a member; return True if it was newly inserted."""
        old = self._dict.get(member)
        self._dict[member] = Element(member, score)
        if old is not None:
            if score != old.score:
                self._skiplist.remove(member, old.score)
                self._skiplist.insert(member, score)
            return False
        self._skiplist.insert(member, score)
        return True

    def __len__(self) -> int:
        return len(self._dict)

    def __contains__(self, member: object) -> bool:
        return member in self._dict

    def get(self, member: str) -> Optional[Element]:
        """Return the element of ``member``, or None if it is absent."""
        return self._dict.get(member)

    def remove(self, member: str) -> bool:
        """Remove ``member``; return whether it was present."""
        element = self._dict.pop(member, None)
        if element is None:
            return False
        self._skiplist.remove(member, element.score)
        return True

    def get_rank(self, member: str, desc: bool = False) -> int:
        """0-based rank of ``member`` in ascending (or descending) order, -1 if absent."""
        element = self._dict.get(member)
        if element is None:
            return -1
        rank = self._skiplist.get_rank(member, element.score)
        if desc:
            return len(self._skiplist) - rank
        return rank - 1

    def for_each_by_rank(self, start: int, stop: int, desc: bool = False) -> Iterator[Element]:
        """Iterate elements whose 0-based rank lies in ``[start, stop)``.

        Raises IndexError for a range outside the set.
        """
        size = len(self)
        if start < 0 or start >= size:
            raise IndexError(f"illegal start {start}")
        if stop < start or stop > size:
            raise IndexError(f"illegal end {stop}")
        if desc:
            node = self._skiplist.tail if start == 0 else self._skiplist.get_by_rank(size - start)
        else:
            node = self._skiplist.first if start == 0 else self._skiplist.get_by_rank(start + 1)
        return _walk(node, stop - start, desc)

    def range_by_rank(self, start: int, stop: int, desc: bool = False) -> list[Element]:
        """Elements whose 0-based rank lies in ``[start, stop)``."""
        return list(self.for_each_by_rank(start, stop, desc))

    def range_count(self, min_border: Border, max_border: Border) -> int:
        """Number of elements between the two borders."""
        count = 0
        node = self._skiplist.first
        while node is not None:
            element = node.element
            node = node.forward
            if not min_border.less(element):
                continue
            if not max_border.greater(element):
                break
            count += 1
        return count

    def for_each(
        self,
        min_border: Border,
        max_border: Border,
        offset: int = 0,
        limit: int = -1,
        desc: bool = False,
    ) -> Iterator[Element]:
        """Iterate elements between the borders, skipping ``offset``; a negative limit means all."""
        if desc:
            node = self._skiplist.get_last_in_range(min_border, max_border)
        else:
            node = self._skiplist.get_first_in_range(min_border, max_border)

        while node is not None and offset > 0:
            node = _step(node, desc)
            offset -= 1

        produced = 0
        while (produced < limit or limit < 0) and node is not None:
            yield node.element
            node = _step(node, desc)
            if node is None:
                break
            if not min_border.less(node.element) or not max_border.greater(node.element):
                break
            produced += 1

    def range(
        self,
        min_border: Border,
        max_border: Border,
        offset: int = 0,
        limit: int = -1,
        desc: bool = False,
    ) -> list[Element]:
        """Elements between the borders; a negative limit means no limit."""
        if limit == 0 or offset < 0:
            return []
        return list(self.for_each(min_border, max_border, offset, limit, desc))

    def _forget(self, removed: list[Element]) -> None:
        for element in removed:
            self._dict.pop(element.member, None)

    def remove_range(self, min_border: Border, max_border: Border) -> int:
        """Remove elements between the borders; return how many were removed."""
        removed = self._skiplist.remove_range(min_border, max_border, 0)
        self._forget(removed)
        return len(removed)

    def pop_min(self, count: int) -> list[Element]:
        """Remove and return the ``count`` lowest elements (all of them if ``count`` is 0)."""
        first = self._skiplist.first
        if first is None:
            return []
        border = ScoreBorder(first.score, exclude=False)
        removed = self._skiplist.remove_range(border, _POSITIVE_INF, count)
        self._forget(removed)
        return removed

    def remove_by_rank(self, start: int, stop: int) -> int:
        """Remove elements whose 0-based ascending rank lies in ``[start, stop)``."""
        removed = self._skiplist.remove_range_by_rank(start + 1, stop + 1)
        self._forget(removed)
        return len(removed)

    def zset_scan(self, cursor: int, count: int, pattern: str) -> tuple[list[bytes], int]:
        """Matching members each followed by its score; the cursor is -1 for a bad pattern."""
        try:
            matcher = compile_pattern(pattern)
        except ValueError:
            return [], -1
        result: list[bytes] = []
        for member, element in list(self._dict.items()):
            if pattern == "*" or matcher.is_match(member):
                result.append(member.encode())
                result.append(_format_score(element.score).encode())
        return result, 0

    def __repr__(self) -> str:
        return f"SortedSet(size={len(self)})"