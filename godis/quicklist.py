"""A list stored as a sequence of fixed-capacity pages."""

from __future__ import annotations

from typing import Any, Iterator

from godis.linkedlist import Expected, List

# must be even: full pages are split in half
PAGE_SIZE = 1024


class _Cursor:
    """Position inside a QuickList; the offset ranges over ``[-1, len(page)]``."""

    __slots__ = ("ql", "page_index", "offset")

    def __init__(self, ql: "QuickList", page_index: int, offset: int) -> None:
        self.ql = ql
        self.page_index = page_index
        self.offset = offset

    @property
    def page(self) -> list[Any]:
        return self.ql._pages[self.page_index]

    def get(self) -> Any:
        return self.page[self.offset]

    def set(self, val: Any) -> None:
        self.page[self.offset] = val

    def _is_last_page(self) -> bool:
        return self.page_index == len(self.ql._pages) - 1

    def next(self) -> bool:
        page = self.page
        if self.offset < len(page) - 1:
            self.offset += 1
            return True
        if self._is_last_page():
            self.offset = len(page)
            return False
        self.page_index += 1
        self.offset = 0
        return True

    def prev(self) -> bool:
        if self.offset > 0:
            self.offset -= 1
            return True
        if self.page_index == 0:
            self.offset = -1
            return False
        self.page_index -= 1
        self.offset = len(self.page) - 1
        return True

    def at_end(self) -> bool:
        if not self.ql._pages:
            return True
        if not self._is_last_page():
            return False
        return self.offset == len(self.page)

    def at_begin(self) -> bool:
        if not self.ql._pages:
            return True
        if self.page_index != 0:
            return False
        return self.offset == -1

    def remove(self) -> Any:
        pages = self.ql._pages
        page = self.page
        val = page.pop(self.offset)
        if page:
            if self.offset == len(page) and not self._is_last_page():
                self.page_index += 1
                self.offset = 0
        elif self._is_last_page():
            del pages[self.page_index]
            if self.page_index > 0:
                self.page_index -= 1
                self.offset = len(pages[self.page_index])
            else:
                self.page_index = 0
                self.offset = 0
        else:
            # the following page slides into this index
            del pages[self.page_index]
            self.offset = 0
        self.ql._size -= 1
        return val


class QuickList(List):
    """List of pages; cheaper than a linked list for appends, ranges and memory."""

    def __init__(self) -> None:
        self._pages: list[list[Any]] = []
        self._size = 0

    def add(self, val: Any) -> None:
        self._size += 1
        if not self._pages or len(self._pages[-1]) >= PAGE_SIZE:
            self._pages.append([val])
        else:
            self._pages[-1].append(val)

    def _find(self, index: int) -> _Cursor:
        if index < 0 or index >= self._size:
            raise IndexError("index out of bound")
        if index < self._size // 2:
            page_beg = 0
            for page_index, page in enumerate(self._pages):
                if page_beg + len(page) > index:
                    break
                page_beg += len(page)
        else:
            page_beg = self._size
            for page_index in range(len(self._pages) - 1, -1, -1):
                page_beg -= len(self._pages[page_index])
                if page_beg <= index:
                    break
        return _Cursor(self, page_index, index - page_beg)

    def get(self, index: int) -> Any:
        return self._find(index).get()

    def set(self, index: int, val: Any) -> None:
        self._find(index).set(val)

    def insert(self, index: int, val: Any) -> None:
        if index == self._size:
            self.add(val)
            return
        cursor = self._find(index)
        page = cursor.page
        if len(page) < PAGE_SIZE:
            page.insert(cursor.offset, val)
            self._size += 1
            return
        # split a full page into two halves rather than growing it
        half = PAGE_SIZE // 2
        next_page = page[half:]
        del page[half:]
        if cursor.offset < half:
            page.insert(cursor.offset, val)
        else:
            next_page.insert(cursor.offset - half, val)
        self._pages.insert(cursor.page_index + 1, next_page)
        self._size += 1

    def remove(self, index: int) -> Any:
        return self._find(index).remove()

    def __len__(self) -> int:
        return self._size

    def remove_last(self) -> Any:
        if self._size == 0:
            return None
        self._size -= 1
        last_page = self._pages[-1]
        val = last_page.pop()
        if not last_page:
            self._pages.pop()
        return val

    def remove_all_by_val(self, expected: Expected) -> int:
        if self._size == 0:
            return 0
        cursor = self._find(0)
        removed = 0
        while not cursor.at_end():
            if expected(cursor.get()):
                cursor.remove()
                removed += 1
            else:
                cursor.next()
        return removed

    def remove_by_val(self, expected: Expected, count: int) -> int:
        if self._size == 0:
            return 0
        cursor = self._find(0)
        removed = 0
        while not cursor.at_end():
            if expected(cursor.get()):
                cursor.remove()
                removed += 1
                if removed == count:
                    break
            else:
                cursor.next()
        return removed

    def reverse_remove_by_val(self, expected: Expected, count: int) -> int:
        if self._size == 0:
            return 0
        cursor = self._find(self._size - 1)
        removed = 0
        while not cursor.at_begin():
            if expected(cursor.get()):
                cursor.remove()
                removed += 1
                if removed == count:
                    break
            cursor.prev()
        return removed

    def __iter__(self) -> Iterator[Any]:
        for page in self._pages:
            yield from page

    def __reversed__(self) -> Iterator[Any]:
        for page in reversed(self._pages):
            yield from reversed(page)

    def contains(self, expected: Expected) -> bool:
        return any(expected(val) for val in self)

    def range(self, start: int, stop: int) -> list[Any]:
        if start < 0 or start >= self._size:
            raise IndexError("`start` out of range")
        if stop < start or stop > self._size:
            raise IndexError("`stop` out of range")
        cursor = self._find(start)
        result = []
        for _ in range(stop - start):
            result.append(cursor.get())
            cursor.next()
        return result

    def __repr__(self) -> str:
        return f"QuickList(size={self._size}, pages={len(self._pages)})"