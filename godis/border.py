"""Range borders for sorted-set queries: score borders and lexicographic borders."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

_NOT_A_FLOAT = "ERR min or max is not a float"
_NOT_A_LEX_ITEM = "ERR min or max not valid string range item"


@dataclass(frozen=True)
class Element:
    """A member of a sorted set together with its score."""

    member: str
    score: float


class Border(ABC):
    """One end of a range.

    ``max_border.greater(e)`` is true when ``e`` lies under the upper end and
    ``min_border.less(e)`` is true when ``e`` lies above the lower end.
    """

    exclude: bool

    @abstractmethod
    def greater(self, element: Element) -> bool:
        """Whether ``element`` is within this border used as the upper end."""

    @abstractmethod
    def less(self, element: Element) -> bool:
        """Whether ``element`` is within this border used as the lower end."""

    @abstractmethod
    def is_intersected(self, max_border: "Border") -> bool:
        """Whether the range from this border to ``max_border`` is empty."""


@dataclass(frozen=True)
class ScoreBorder(Border):
    """A bound on scores; ``value`` may be ``math.inf`` or ``-math.inf``."""

    value: float
    exclude: bool = False

    def greater(self, element: Element) -> bool:
        if self.value == -math.inf:
            return False
        if self.value == math.inf:
            return True
        if self.exclude:
            return self.value > element.score
        return self.value >= element.score

    def less(self, element: Element) -> bool:
        if self.value == -math.inf:
            return True
        if self.value == math.inf:
            return False
        if self.exclude:
            return self.value < element.score
        return self.value <= element.score

    def is_intersected(self, max_border: Border) -> bool:
        if not isinstance(max_border, ScoreBorder):
            raise TypeError("score border paired with a non-score border")
        return self.value > max_border.value or (
            self.value == max_border.value and (self.exclude or max_border.exclude)
        )


@dataclass(frozen=True)
class LexBorder(Border):
    """A bound on members; ``inf`` is ``"+"`` or ``"-"`` for the open ends, else empty."""

    value: str = ""
    exclude: bool = False
    inf: str = ""

    def __post_init__(self) -> None:
        if self.inf not in ("", "+", "-"):
            raise ValueError(f"invalid infinity marker {self.inf!r}")

    def greater(self, element: Element) -> bool:
        if self.inf == "-":
            return False
        if self.inf == "+":
            return True
        if self.exclude:
            return self.value > element.member
        return self.value >= element.member

    def less(self, element: Element) -> bool:
        if self.inf == "-":
            return True
        if self.inf == "+":
            return False
        if self.exclude:
            return self.value < element.member
        return self.value <= element.member

    def is_intersected(self, max_border: Border) -> bool:
        if not isinstance(max_border, LexBorder):
            raise TypeError("lex border paired with a non-lex border")
        if self.inf == "+" or max_border.inf == "-":
            return True
        if self.inf == "-" or max_border.inf == "+":
            return False
        return self.value > max_border.value or (
            self.value == max_border.value and (self.exclude or max_border.exclude)
        )


_SCORE_POSITIVE_INF = ScoreBorder(math.inf)
_SCORE_NEGATIVE_INF = ScoreBorder(-math.inf)
_LEX_POSITIVE_INF = LexBorder(inf="+")
_LEX_NEGATIVE_INF = LexBorder(inf="-")


def _parse_float(text: str) -> float:
    if not text or text != text.strip() or "_" in text:
        raise ValueError(_NOT_A_FLOAT)
    try:
        return float(text)
    except ValueError:
        raise ValueError(_NOT_A_FLOAT) from None


def parse_score_border(s: str) -> ScoreBorder:
    """Parse a score bound such as ``2.5``, ``(2.5``, ``inf``, ``+inf`` or ``-inf``."""
    if s in ("inf", "+inf"):
        return _SCORE_POSITIVE_INF
    if s == "-inf":
        return _SCORE_NEGATIVE_INF
    if s.startswith("("):
        return ScoreBorder(_parse_float(s[1:]), exclude=True)
    return ScoreBorder(_parse_float(s), exclude=False)


def parse_lex_border(s: str) -> LexBorder:
    """Parse a lexicographic bound such as ``[a``, ``(a``, ``+`` or ``-``."""
    if s == "+":
        return _LEX_POSITIVE_INF
    if s == "-":
        return _LEX_NEGATIVE_INF
    if s.startswith("("):
        return LexBorder(s[1:], exclude=True)
    if s.startswith("["):
        return LexBorder(s[1:], exclude=False)
    raise ValueError(_NOT_A_LEX_ITEM)