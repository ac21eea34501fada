"""Skip list ordered by (score, member) with rank spans, the index of a sorted set."""

from __future__ import annotations

import random
from typing import Optional

from godis.border import Border, Element

MAX_LEVEL = 16


def random_level() -> int:
    """Draw a node level in ``[1, MAX_LEVEL]``; each higher level is half as likely."""
    total = (1 << MAX_LEVEL) - 1
    k = random.randrange(total)
    return MAX_LEVEL - (k + 1).bit_length() + 1


class _Level:
    __slots__ = ("forward", "span")

    def __init__(self) -> None:
        self.forward: Optional[_Node] = None
        self.span = 0


class _Node:
    """A skip list node; ``forward`` is the next node, ``backward`` the previous one."""

    __slots__ = ("element", "backward", "levels")

    def __init__(self, level: int, member: str, score: float) -> None:
        self.element = Element(member, score)
        self.backward: Optional[_Node] = None
        self.levels = [_Level() for _ in range(level)]

    @property
    def member(self) -> str:
        return self.element.member

    @property
    def score(self) -> float:
        return self.element.score

    @property
    def forward(self) -> Optional["_Node"]:
        return self.levels[0].forward

    def _before(self, member: str, score: float) -> bool:
        return self.score < score or (self.score == score and self.member < member)


class Skiplist:
    """Elements kept in ascending (score, member) order with 1-based ranks."""

    def __init__(self) -> None:
        self._header = _Node(MAX_LEVEL, "", 0.0)
        self._tail: Optional[_Node] = None
        self._length = 0
        self._level = 1

    def __len__(self) -> int:
        return self._length

    @property
    def first(self) -> Optional[_Node]:
        """The lowest node, or None when empty."""
        return self._header.levels[0].forward

    @property
    def tail(self) -> Optional[_Node]:
        """The highest node, or None when empty."""
        return self._tail

    def insert(self, member: str, score: float) -> _Node:
        """Insert a new node; the caller makes sure the member is not present."""
        update: list[Optional[_Node]] = [None] * MAX_LEVEL
        rank = [0] * MAX_LEVEL
        node = self._header
        for i in range(self._level - 1, -1, -1):
            rank[i] = 0 if i == self._level - 1 else rank[i + 1]
            while True:
                fwd = node.levels[i].forward
                if fwd is None or not fwd._before(member, score):
                    break
                rank[i] += node.levels[i].span
                node = fwd
            update[i] = node

        level = random_level()
        if level > self._level:
            for i in range(self._level, level):
                rank[i] = 0
                update[i] = self._header
                self._header.levels[i].span = self._length
            self._level = level

        new = _Node(level, member, score)
        for i in range(level):
            prev = update[i]
            new.levels[i].forward = prev.levels[i].forward
            prev.levels[i].forward = new
            new.levels[i].span = prev.levels[i].span - (rank[0] - rank[i])
            prev.levels[i].span = rank[0] - rank[i] + 1

        for i in range(level, self._level):
            update[i].levels[i].span += 1

        new.backward = None if update[0] is self._header else update[0]
        following = new.levels[0].forward
        if following is not None:
            following.backward = new
        else:
            self._tail = new
        self._length += 1
        return new

    def _remove_node(self, node: _Node, update: list[Optional[_Node]]) -> None:
        for i in range(self._level):
            prev = update[i]
            if prev.levels[i].forward is node:
                prev.levels[i].span += node.levels[i].span - 1
                prev.levels[i].forward = node.levels[i].forward
            else:
                prev.levels[i].span -= 1
        following = node.levels[0].forward
        if following is not None:
            following.backward = node.backward
        else:
            self._tail = node.backward
        while self._level > 1 and self._header.levels[self._level - 1].forward is None:
            self._level -= 1
        self._length -= 1

    def remove(self, member: str, score: float) -> bool:
        """Remove the node with this member and score; return whether it was found."""
        update: list[Optional[_Node]] = [None] * MAX_LEVEL
        node = self._header
        for i in range(self._level - 1, -1, -1):
            while True:
                fwd = node.levels[i].forward
                if fwd is None or not fwd._before(member, score):
                    break
                node = fwd
            update[i] = node
        target = node.levels[0].forward
        if target is not None and target.score == score and target.member == member:
            self._remove_node(target, update)
            return True
        return False

    def get_rank(self, member: str, score: float) -> int:
        """1-based rank of the member, or 0 if it is not present."""
        rank = 0
        x = self._header
        for i in range(self._level - 1, -1, -1):
            while True:
                fwd = x.levels[i].forward
                if fwd is None or not (
                    fwd.score < score or (fwd.score == score and fwd.member <= member)
                ):
                    break
                rank += x.levels[i].span
                x = fwd
            if x is not self._header and x.member == member:
                return rank
        return 0

    def get_by_rank(self, rank: int) -> Optional[_Node]:
        """The node at a 1-based rank, or None if there is none."""
        i = 0
        node = self._header
        for level in range(self._level - 1, -1, -1):
            while True:
                fwd = node.levels[level].forward
                if fwd is None or i + node.levels[level].span > rank:
                    break
                i += node.levels[level].span
                node = fwd
            if i == rank:
                return None if node is self._header else node
        return None

    def has_in_range(self, min_border: Border, max_border: Border) -> bool:
        """Whether any element lies between the two borders."""
        if min_border.is_intersected(max_border):
            return False
        if self._tail is None or not min_border.less(self._tail.element):
            return False
        head = self._header.levels[0].forward
        if head is None or not max_border.greater(head.element):
            return False
        return True

    def get_first_in_range(self, min_border: Border, max_border: Border) -> Optional[_Node]:
        """The lowest node within the range, or None."""
        if not self.has_in_range(min_border, max_border):
            return None
        node = self._header
        for level in range(self._level - 1, -1, -1):
            while True:
                fwd = node.levels[level].forward
                if fwd is None or min_border.less(fwd.element):
                    break
                node = fwd
        node = node.levels[0].forward
        if node is None or not max_border.greater(node.element):
            return None
        return node

    def get_last_in_range(self, min_border: Border, max_border: Border) -> Optional[_Node]:
        """The highest node within the range, or None."""
        if not self.has_in_range(min_border, max_border):
            return None
        node = self._header
        for level in range(self._level - 1, -1, -1):
            while True:
                fwd = node.levels[level].forward
                if fwd is None or not max_border.greater(fwd.element):
                    break
                node = fwd
        if node is self._header or not min_border.less(node.element):
            return None
        return node

    def remove_range(self, min_border: Border, max_border: Border, limit: int = 0) -> list[Element]:
        """Remove elements within the range, at most ``limit`` if it is positive."""
        update: list[Optional[_Node]] = [None] * MAX_LEVEL
        removed: list[Element] = []
        node = self._header
        for i in range(self._level - 1, -1, -1):
            while True:
                fwd = node.levels[i].forward
                if fwd is None or min_border.less(fwd.element):
                    break
                node = fwd
            update[i] = node

        current = node.levels[0].forward
        while current is not None:
            if not max_border.greater(current.element):
                break
            following = current.levels[0].forward
            removed.append(current.element)
            self._remove_node(current, update)
            if limit > 0 and len(removed) == limit:
                break
            current = following
        return removed

    def remove_range_by_rank(self, start: int, stop: int) -> list[Element]:
        """Remove elements whose 1-based rank is in ``[start, stop)``."""
        i = 0
        update: list[Optional[_Node]] = [None] * MAX_LEVEL
        removed: list[Element] = []
        node = self._header
        for level in range(self._level - 1, -1, -1):
            while True:
                fwd = node.levels[level].forward
                if fwd is None or i + node.levels[level].span >= start:
                    break
                i += node.levels[level].span
                node = fwd
            update[level] = node

        i += 1
        current = node.levels[0].forward
        while current is not None and i < stop:
            following = current.levels[0].forward
            removed.append(current.element)
            self._remove_node(current, update)
            current = following
            i += 1
        return removed