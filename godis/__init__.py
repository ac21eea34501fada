"""In-memory data structures for a Redis-style key-value store: lists, sorted sets, bitmaps, geohash, consistent hashing, id generation, wildcard patterns and sync helpers."""

__version__ = "0.1.0"