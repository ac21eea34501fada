"""Helpers for building command lines, comparing values and converting ranges."""

from __future__ import annotations

from typing import Any, Iterable

_BYTES_LIKE = (bytes, bytearray, memoryview)


def to_cmd_line(*args: str) -> list[bytes]:
    """Encode each string argument as bytes."""
    return [arg.encode() for arg in args]


def to_cmd_line2(command_name: str, *args: str) -> list[bytes]:
    """Build a command line from a command name and string arguments."""
    return [command_name.encode(), *(arg.encode() for arg in args)]


def to_cmd_line3(command_name: str, *args: bytes) -> list[bytes]:
    """Build a command line from a command name and byte-string arguments."""
    return [command_name.encode(), *args]


def equals(a: Any, b: Any) -> bool:
    """Compare two values, comparing byte strings by content."""
    if isinstance(a, _BYTES_LIKE) and isinstance(b, _BYTES_LIKE):
        return bytes_equals(a, b)
    return a == b


def bytes_equals(a: bytes | None, b: bytes | None) -> bool:
    """Compare two byte strings; None equals only None."""
    if (a is None) != (b is None):
        return False
    if a is None:
        return True
    return bytes(a) == bytes(b)


def convert_range(start: int, end: int, size: int) -> tuple[int, int]:
    """Convert an inclusive, possibly negative index range to a half-open slice range.

    Returns ``(-1, -1)`` when the range falls outside the sequence.
    """
    if start < -size:
        return -1, -1
    if start < 0:
        start = size + start
    elif start >= size:
        return -1, -1

    if end < -size:
        return -1, -1
    if end < 0:
        end = size + end + 1
    elif end < size:
        end = end + 1
    else:
        end = size

    if start > end:
        return -1, -1
    return start, end


def remove_duplicates(items: Iterable[bytes]) -> list[bytes]:
    """Drop repeated byte strings, keeping the first occurrence of each."""
    seen: set[bytes] = set()
    result: list[bytes] = []
    for item in items:
        key = bytes(item)
        if key not in seen:
            seen.add(key)
            result.append(item)
    return result