"""Snowflake-style generator of unique, time-ordered 64-bit identifiers."""

from __future__ import annotations

import threading
import time

# milliseconds since the Unix epoch of Nov 04 2010 01:42:54.657 UTC
EPOCH_MS = 1288834974657
_NODE_LEFT = 10
_TIME_LEFT = 22
_MAX_SEQUENCE = (1 << _NODE_LEFT) - 1
_NODE_MASK = (1 << (_TIME_LEFT - _NODE_LEFT)) - 1

_FNV64_OFFSET = 14695981039346656037
_FNV64_PRIME = 1099511628211
_MASK64 = (1 << 64) - 1


def _fnv64(data: bytes) -> int:
    h = _FNV64_OFFSET
    for byte in data:
        h = (h * _FNV64_PRIME) & _MASK64
        h ^= byte
    return h


class IDGenerator:
    """Generates IDs laid out as ``timestamp << 22 | node << 10 | sequence``."""

    def __init__(self, node: str) -> None:
        self._lock = threading.Lock()
        self._last_stamp = -1
        self._node_id = _fnv64(node.encode()) & _NODE_MASK
        self._sequence = 1
        # anchor the monotonic clock to the custom epoch
        self._epoch_mono_ns = time.monotonic_ns() - (time.time_ns() - EPOCH_MS * 1_000_000)

    def _now_ms(self) -> int:
        return (time.monotonic_ns() - self._epoch_mono_ns) // 1_000_000

    def next_id(self) -> int:
        """Return the next unique ID."""
        with self._lock:
            timestamp = self._now_ms()
            if timestamp < self._last_stamp:
                raise RuntimeError("can not generate id")
            if timestamp == self._last_stamp:
                self._sequence = (self._sequence + 1) & _MAX_SEQUENCE
                if self._sequence == 0:
                    while timestamp <= self._last_stamp:
                        timestamp = self._now_ms()
            else:
                self._sequence = 0
            self._last_stamp = timestamp
            return (timestamp << _TIME_LEFT) | (self._node_id << _NODE_LEFT) | self._sequence