"""Dice expression value type and parser.

Expressions look like ``[N]dF[+M|-M][!T]``:

``N``
    number of dice, 1 when only the faces are given (``"6"`` is ``1d6``).
``M``
    advantage (positive) or disadvantage (negative) dice.
``T``
    explosion threshold. A bare ``!`` explodes on the highest face.

The suffixes are peeled off right to left, each by searching for its own
marker character, before the ``NdF`` core is read.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import (
    EmptyExpression,
    IntError,
    InvalidExpression,
    TooManySegments,
)

_UNSIGNED_RE = re.compile(r"[0-9]+")
_SIGNED_RE = re.compile(r"[+-][0-9]+")
_SEGMENT_RE = re.compile(r"[dD]")


@dataclass(frozen=True)
class Expression:
    num: int
    max: int
    modifier: int = 0
    threshold: Optional[int] = None

    def __post_init__(self) -> None:
        if self.max < 2:
            raise InvalidExpression()
        if self.threshold == 0:
            object.__setattr__(self, "threshold", self.max)

    @classmethod
    def parse(cls, text: str) -> "Expression":
        return parse(text)

    def total_dice(self) -> int:
        """Dice actually rolled, including the extras dropped by the window."""
        return self.num + abs(self.modifier)

    def execute(self, rng, options=None):
        from .roller import execute

        return execute(self, rng, options)

    def __str__(self) -> str:
        out = f"{self.num}d{self.max}"
        if self.modifier:
            out += f"{self.modifier:+d}"
        if self.threshold is not None:
            out += f"!{self.threshold}"
        return out


def _to_int(text: str, pattern: re.Pattern = _UNSIGNED_RE) -> int:
    try:
        if pattern.fullmatch(text) is None:
            raise ValueError(f"invalid literal for int(): {text!r}")
        return int(text)
    except ValueError as exc:
        raise IntError(text) from exc


def _read_segments(text: str) -> Tuple[int, int]:
    segments = _SEGMENT_RE.split(text)
    if not segments[0]:
        raise EmptyExpression()
    left = _to_int(segments[0])
    if len(segments) > 2:
        raise TooManySegments()
    if len(segments) == 1:
        return 1, left
    return left, _to_int(segments[1])


def parse(text: str) -> Expression:
    """Parse ``text`` into an :class:`Expression`.

    The suffixes are split off right to left but converted left to right:
    dice core, then modifier, then threshold. Raises a
    :class:`~legend.errors.ParseExpressionError` subclass on the first
    problem found.
    """
    s = text.replace(" ", "")

    threshold_text = None
    idx = s.rfind("!")
    if idx != -1:
        s, threshold_text = s[:idx], s[idx + 1:]

    modifier_text = None
    idx = max(s.rfind("+"), s.rfind("-"))
    if idx != -1:
        s, modifier_text = s[:idx], s[idx:]

    num, faces = _read_segments(s)
    modifier = _to_int(modifier_text, _SIGNED_RE) if modifier_text is not None else 0

    threshold = None
    if threshold_text is not None:
        # bare "!" is the 0 sentinel, resolved to the highest face
        threshold = _to_int(threshold_text) if threshold_text else 0

    return Expression(num=num, max=faces, modifier=modifier, threshold=threshold)


__all__ = ["Expression", "parse"]
