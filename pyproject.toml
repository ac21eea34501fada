[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "godis"
version = "0.1.0"
description = "In-memory data structures for a Redis-style key-value store: lists, sorted sets, bitmaps, geohash, consistent hashing and wildcard patterns"
requires-python = ">=3.10"
dependencies = []
keywords = ["redis", "skiplist", "sorted-set", "quicklist", "bitmap", "geohash", "consistent-hashing", "snowflake", "wildcard", "data-structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["godis"]

[tool.pytest.ini_options]
addopts = "-ra"
