"""A growable bit array stored as bytes, least significant bit first within each byte."""

from __future__ import annotations

from typing import Iterator


class BitMap:
    """Bit array backed by a bytearray; it grows on demand when bits are set."""

    __slots__ = ("_data",)

    def __init__(self, data: bytes | bytearray | None = None) -> None:
        if data is None:
            self._data = bytearray()
        elif isinstance(data, bytearray):
            self._data = data
        else:
            self._data = bytearray(data)

    @classmethod
    def from_bytes(cls, data: bytes | bytearray) -> "BitMap":
        """Wrap ``data``; a bytearray is shared, not copied."""
        return cls(data)

    def bit_size(self) -> int:
        """Number of bits currently stored."""
        return len(self._data) * 8

    def to_bytes(self) -> bytes:
        """The stored bytes."""
        return bytes(self._data)

    def _grow(self, bit_size: int) -> None:
        byte_size = (bit_size + 7) // 8
        gap = byte_size - len(self._data)
        if gap > 0:
            self._data.extend(bytes(gap))

    def set_bit(self, offset: int, val: int) -> None:
        """Set the bit at ``offset`` to 1 if ``val`` is truthy, else to 0."""
        if offset < 0:
            raise IndexError("bit offset out of range")
        byte_index, bit_offset = divmod(offset, 8)
        mask = 1 << bit_offset
        self._grow(offset + 1)
        if val:
            self._data[byte_index] |= mask
        else:
            self._data[byte_index] &= ~mask & 0xFF

    def get_bit(self, offset: int) -> int:
        """Return the bit at ``offset``; bits beyond the stored bytes read as 0."""
        if offset < 0:
            raise IndexError("bit offset out of range")
        byte_index, bit_offset = divmod(offset, 8)
        if byte_index >= len(self._data):
            return 0
        return (self._data[byte_index] >> bit_offset) & 0x01

    def for_each_bit(self, begin: int, end: int = 0) -> Iterator[tuple[int, int]]:
        """Yield ``(offset, bit)`` from ``begin`` up to ``end`` (exclusive; 0 means the end)."""
        offset = begin
        byte_index, bit_offset = divmod(offset, 8)
        while byte_index < len(self._data):
            value = self._data[byte_index]
            while bit_offset < 8:
                yield offset, (value >> bit_offset) & 0x01
                bit_offset += 1
                offset += 1
                if end != 0 and offset >= end:
                    break
            byte_index += 1
            bit_offset = 0
            if end > 0 and offset >= end:
                break

    def for_each_byte(self, begin: int, end: int = 0) -> Iterator[tuple[int, int]]:
        """Yield ``(index, byte)`` from ``begin`` up to ``end`` (exclusive; 0 means the end)."""
        if end == 0 or end > len(self._data):
            end = len(self._data)
        for index in range(begin, end):
            yield index, self._data[index]