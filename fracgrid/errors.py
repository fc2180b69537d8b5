"""
Exception hierarchy for fraction parsing and expression building.

Every failure is raised at the point of detection and propagated to the
caller. Nothing in fracgrid substitutes a fallback size for bad input.

    GridError
    ├── InvalidArgument       (also a TypeError)
    └── ParseError            (also a ValueError)
        ├── MalformedFraction
        ├── MalformedNumber
        └── UnknownUnit
"""

from __future__ import annotations


class GridError(Exception):
    """Base class for all fracgrid errors."""


class InvalidArgument(GridError, TypeError):
    """Raised when a textual argument is not a string."""


class ParseError(GridError, ValueError):
    """Raised when input text cannot be parsed.

    Attributes:
        text: The input that failed to parse.
        detail: Human-readable description of the failure.
    """

    def __init__(self, text: str, detail: str) -> None:
        super().__init__(f"{detail}: {text!r}")
        self.text = text
        self.detail = detail


class MalformedFraction(ParseError):
    """Raised when a fraction string does not have exactly one ``/``."""


class MalformedNumber(ParseError):
    """Raised when a numeric literal has no digits or more than one decimal point."""


class UnknownUnit(ParseError):
    """Raised when a literal's trailing suffix is not in the unit table.

    Attributes:
        suffix: The unrecognized suffix.
    """

    def __init__(self, text: str, suffix: str) -> None:
        super().__init__(text, f"unknown unit suffix {suffix!r}")
        self.suffix = suffix
