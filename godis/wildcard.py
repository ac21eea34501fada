"""Glob-style patterns (``*``, ``?``, ``[...]``, ``[^...]``) compiled to regular expressions."""

from __future__ import annotations

import re
import warnings

_END_WITH_ESCAPE = "end with escape \\"

# characters of the wildcard syntax that mean something else in a regular expression
_REPLACEMENTS = {
    "+": r"\+",
    ")": r"\)",
    "$": r"\$",
    ".": r"\.",
    "{": r"\{",
    "}": r"\}",
    "|": r"\|",
    "*": ".*",
    "?": ".",
}


class Pattern:
    """A compiled wildcard pattern that matches whole strings."""

    __slots__ = ("_regex",)

    def __init__(self, regex: re.Pattern[str]) -> None:
        self._regex = regex

    def is_match(self, s: str) -> bool:
        """Return True if the whole of ``s`` matches the pattern."""
        return self._regex.match(s) is not None

    def __repr__(self) -> str:
        return f"Pattern({self._regex.pattern!r})"


def _opens_negated_class(src: str, i: int) -> bool:
    """Whether the ``^`` at position ``i`` directly follows an unescaped ``[``."""
    if i == 0 or src[i - 1] != "[":
        return False
    return i == 1 or src[i - 2] != "\\"


def compile_pattern(src: str) -> Pattern:
    """Compile a wildcard string into a :class:`Pattern`.

    Raises ValueError if the pattern ends with a lone escape character or
    does not form a valid expression.
    """
    parts = ["^"]
    i = 0
    length = len(src)
    while i < length:
        ch = src[i]
        if ch == "\\":
            if i == length - 1:
                raise ValueError(_END_WITH_ESCAPE)
            parts.append(ch + src[i + 1])
            i += 2
            continue
        if ch == "^":
            parts.append("^" if _opens_negated_class(src, i) else r"\^")
        else:
            parts.append(_REPLACEMENTS.get(ch, ch))
        i += 1
    parts.append(r"\Z")
    try:
        with warnings.catch_warnings():
            # a literal '[' inside a class such as "[ab[]" is intended
            warnings.simplefilter("ignore", FutureWarning)
            regex = re.compile("".join(parts))
    except re.error as err:
        raise ValueError(str(err)) from err
    return Pattern(regex)