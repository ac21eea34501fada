"""The list interface and a doubly linked list that implements it."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterator

Expected = Callable[[Any], bool]


class List(ABC):
    """Interface shared by the list implementations."""

    @abstractmethod
    def add(self, val: Any) -> None:
        """Append a value at the tail."""

    @abstractmethod
    def get(self, index: int) -> Any:
        """Return the value at ``index``."""

    @abstractmethod
    def set(self, index: int, val: Any) -> None:
        """Replace the value at ``index``."""

    @abstractmethod
    def insert(self, index: int, val: Any) -> None:
        """Insert before the element at ``index``; ``index == len`` appends."""

    @abstractmethod
    def remove(self, index: int) -> Any:
        """Remove and return the value at ``index``."""

    @abstractmethod
    def remove_last(self) -> Any:
        """Remove and return the last value, or None if the list is empty."""

    @abstractmethod
    def remove_all_by_val(self, expected: Expected) -> int:
        """Remove every value for which ``expected`` is true; return how many."""

    @abstractmethod
    def remove_by_val(self, expected: Expected, count: int) -> int:
        """Remove at most ``count`` matching values scanning from the head."""

    @abstractmethod
    def reverse_remove_by_val(self, expected: Expected, count: int) -> int:
        """Remove at most ``count`` matching values scanning from the tail."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of elements."""

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        """Iterate from head to tail."""

    @abstractmethod
    def contains(self, expected: Expected) -> bool:
        """Whether some value satisfies ``expected``."""

    @abstractmethod
    def range(self, start: int, stop: int) -> list[Any]:
        """Values whose index lies in ``[start, stop)``."""


class _Node:
    __slots__ = ("val", "prev", "next")

    def __init__(self, val: Any) -> None:
        self.val = val
        self.prev: _Node | None = None
        self.next: _Node | None = None


class LinkedList(List):
    """Doubly linked list."""

    def __init__(self, *vals: Any) -> None:
        self._first: _Node | None = None
        self._last: _Node | None = None
        self._size = 0
        for val in vals:
            self.add(val)

    def add(self, val: Any) -> None:
        node = _Node(val)
        if self._last is None:
            self._first = node
            self._last = node
        else:
            node.prev = self._last
            self._last.next = node
            self._last = node
        self._size += 1

    def _find(self, index: int) -> _Node:
        if index < self._size // 2:
            node = self._first
            for _ in range(index):
                node = node.next
        else:
            node = self._last
            for _ in range(self._size - 1 - index):
                node = node.prev
        return node

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= self._size:
            raise IndexError("index out of bound")

    def get(self, index: int) -> Any:
        self._check_index(index)
        return self._find(index).val

    def set(self, index: int, val: Any) -> None:
        self._check_index(index)
        self._find(index).val = val

    def insert(self, index: int, val: Any) -> None:
        if index < 0 or index > self._size:
            raise IndexError("index out of bound")
        if index == self._size:
            self.add(val)
            return
        pivot = self._find(index)
        node = _Node(val)
        node.prev = pivot.prev
        node.next = pivot
        if pivot.prev is None:
            self._first = node
        else:
            pivot.prev.next = node
        pivot.prev = node
        self._size += 1

    def _remove_node(self, node: _Node) -> None:
        if node.prev is None:
            self._first = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._last = node.prev
        else:
            node.next.prev = node.prev
        node.prev = None
        node.next = None
        self._size -= 1

    def remove(self, index: int) -> Any:
        self._check_index(index)
        node = self._find(index)
        self._remove_node(node)
        return node.val

    def remove_last(self) -> Any:
        if self._last is None:
            return None
        node = self._last
        self._remove_node(node)
        return node.val

    def remove_all_by_val(self, expected: Expected) -> int:
        node = self._first
        removed = 0
        while node is not None:
            following = node.next
            if expected(node.val):
                self._remove_node(node)
                removed += 1
            node = following
        return removed

    def remove_by_val(self, expected: Expected, count: int) -> int:
        node = self._first
        removed = 0
        while node is not None:
            following = node.next
            if expected(node.val):
                self._remove_node(node)
                removed += 1
            if removed == count:
                break
            node = following
        return removed

    def reverse_remove_by_val(self, expected: Expected, count: int) -> int:
        node = self._last
        removed = 0
        while node is not None:
            preceding = node.prev
            if expected(node.val):
                self._remove_node(node)
                removed += 1
            if removed == count:
                break
            node = preceding
        return removed

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._first
        while node is not None:
            yield node.val
            node = node.next

    def contains(self, expected: Expected) -> bool:
        return any(expected(val) for val in self)

    def range(self, start: int, stop: int) -> list[Any]:
        if start < 0 or start >= self._size:
            raise IndexError("`start` out of range")
        if stop < start or stop > self._size:
            raise IndexError("`stop` out of range")
        result = []
        for i, val in enumerate(self):
            if i >= stop:
                break
            if i >= start:
                result.append(val)
        return result

    def __repr__(self) -> str:
        return f"LinkedList({', '.join(repr(v) for v in self)})"