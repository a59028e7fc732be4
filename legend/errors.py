"""Errors raised while parsing dice expressions."""
from __future__ import annotations


class ParseExpressionError(ValueError):
    """Base class for every dice expression parse failure."""

    kind = "parse"
    message = "Invalid dice expression"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class EmptyExpression(ParseExpressionError):
    kind = "empty"
    message = "Empty expression"


class InvalidExpression(ParseExpressionError):
    """Raised for dice that cannot be rolled, e.g. a one-sided die."""

    kind = "invalid"
    message = "Huh? A die needs at least two faces"


class TooManySegments(ParseExpressionError):
    kind = "too_many_segments"
    message = "Expression has too many segments"


class IntError(ParseExpressionError):
    """Wraps a failed integer conversion; the underlying ``ValueError`` is ``__cause__``."""

    kind = "int"

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"invalid number: {text!r}")


__all__ = [
    "ParseExpressionError",
    "EmptyExpression",
    "InvalidExpression",
    "TooManySegments",
    "IntError",
]
