"""Consistent hashing ring with virtual replicas and ``{hash tag}`` support."""

from __future__ import annotations

import bisect
import zlib
from typing import Callable

HashFunc = Callable[[bytes], int]


def get_partition_key(key: str) -> str:
    """Return the hash tag inside the first ``{...}`` of ``key``, or ``key`` itself."""
    beg = key.find("{")
    if beg == -1:
        return key
    end = key.find("}")
    if end == -1 or end == beg + 1:
        return key
    if end < beg:
        raise ValueError(f"malformed hash tag in key {key!r}")
    return key[beg + 1 : end]


class ConsistentHash:
    """Maps keys to nodes on a hash ring."""

    def __init__(self, replicas: int, hash_func: HashFunc | None = None) -> None:
        self._replicas = replicas
        self._hash_func: HashFunc = hash_func if hash_func is not None else zlib.crc32
        self._keys: list[int] = []
        self._hash_map: dict[int, str] = {}

    def is_empty(self) -> bool:
        """Whether no node has been added."""
        return not self._keys

    def add_node(self, *nodes: str) -> None:
        """Add nodes to the ring; empty names are ignored."""
        for node in nodes:
            if not node:
                continue
            for i in range(self._replicas):
                h = self._hash_func(f"{i}{node}".encode())
                self._keys.append(h)
                self._hash_map[h] = node
        self._keys.sort()

    def pick_node(self, key: str) -> str:
        """Return the node responsible for ``key``, or an empty string if the ring is empty."""
        if not self._keys:
            return ""
        h = self._hash_func(get_partition_key(key).encode())
        idx = bisect.bisect_left(self._keys, h)
        if idx == len(self._keys):
            idx = 0
        return self._hash_map[self._keys[idx]]