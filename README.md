# godis

Pure-Python data structures and helpers for an in-memory, Redis-style
key-value store. There are no third-party dependencies.

## Install

```
pip install .
pip install ".[test]"   # with test dependencies
```

## What is inside

| Module | Contents |
| --- | --- |
| `godis.linkedlist` | `List`, the abstract list interface, and `LinkedList`, a doubly linked list |
| `godis.quicklist` | `QuickList`, a list stored as pages of up to 1024 items that supports forward and reverse iteration |
| `godis.sortedset` | `SortedSet`, which supports rank queries, score and lex ranges, `pop_min` and `zset_scan` |
| `godis.skiplist` | `Skiplist`, the (score, member) index behind `SortedSet`, and `random_level` |
| `godis.border` | `Element`, `ScoreBorder`, `LexBorder`, `parse_score_border` and `parse_lex_border` |
| `godis.bitmap` | `BitMap`, a growable bit array; `for_each_bit` and `for_each_byte` are generators |
| `godis.consistenthash` | `ConsistentHash`, a hash ring with virtual replicas and `{hash tag}` keys, and `get_partition_key` |
| `godis.geohash` | `encode`, `decode`, `to_string`, `to_int`, `from_int`, `distance`, `to_range` and `get_neighbours` |
| `godis.idgenerator` | `IDGenerator`, which produces snowflake-style 64-bit ids through `next_id()` |
| `godis.wildcard` | `compile_pattern`, which turns a glob pattern (`*`, `?`, `[...]`, `[^...]`, `\` escapes) into a `Pattern` with `is_match` |
| `godis.syncutil` | `AtomicBool` and `WaitGroup`; `WaitGroup.wait_with_timeout` returns True on timeout |
| `godis.utils` | `to_cmd_line`, `to_cmd_line2`, `to_cmd_line3`, `equals`, `bytes_equals`, `convert_range` and `remove_duplicates` |

Errors are raised as exceptions. An out-of-range list index raises
`IndexError`. A malformed border or wildcard pattern raises `ValueError`, but
`SortedSet.zset_scan` reports a bad pattern by returning the cursor `-1`.

## Example

```python
from godis.sortedset import SortedSet
from godis.border import parse_score_border

zs = SortedSet()
zs.add("a", 1)
zs.add("b", 2)
zs.add("c", 3)
members = zs.range(parse_score_border("(1"), parse_score_border("+inf"), 0, -1, False)
print([e.member for e in members])   # ['b', 'c']
print(zs.get_rank("c", False))       # 2

from godis.wildcard import compile_pattern
assert compile_pattern("h[a-c]llo").is_match("hbllo")

from godis.consistenthash import ConsistentHash
ring = ConsistentHash(3, None)
ring.add_node("a", "b", "c", "d")
print(ring.pick_node("123{abc}"))    # 'b'

from godis import geohash
code = geohash.encode(48.669, -4.32913)
print(geohash.to_string(geohash.from_int(code)))   # 'gbsuv7zt7zntw'
```

## What this package does not do

This package is a library of building blocks only. It has no network
server, no command protocol or command dispatcher, no key space or database
object, no persistence and no command-line program. It also has no hash-table
dict, hash set, object pool, lock table, logger or timer.

## Tests

```
pytest
```