"""
Value types produced and consumed by the expression builders.

All types are frozen dataclasses. Expressions carry formula text only;
nothing here resolves a formula to a concrete length.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

from fracgrid.errors import InvalidArgument
from fracgrid.parser.numeric import NumericLiteral, parse_number


class Axis(str, Enum):
    """Direction an offset or move applies along."""

    ROW = "row"
    COLUMN = "column"


@dataclass(frozen=True)
class Gutter:
    """
    Spacing between adjacent grid items.

    A zero gutter disables gutter arithmetic entirely. Negative gutters
    are rejected.
    """

    literal: NumericLiteral

    def __post_init__(self) -> None:
        if not self.literal.magnitude.is_finite():
            raise ValueError(f"gutter must be a finite number, got {self.literal.magnitude}")
        if self.literal.sign < 0:
            raise ValueError(f"gutter must not be negative, got {self.literal}")

    def __str__(self) -> str:
        if self.is_zero:
            return "0"
        return str(self.literal)

    @property
    def is_zero(self) -> bool:
        return self.literal.is_zero

    @classmethod
    def zero(cls) -> Gutter:
        return cls(NumericLiteral(Decimal(0)))

    @classmethod
    def parse(cls, value: Any) -> Gutter:
        """Build a Gutter from ``"30px"``, ``0``, ``1.5``, a NumericLiteral or a Gutter."""
        if isinstance(value, Gutter):
            return value
        if isinstance(value, NumericLiteral):
            return cls(value)
        if isinstance(value, str):
            return cls(parse_number(value))
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return cls(NumericLiteral(Decimal(str(value))))
        raise InvalidArgument(f"gutter must be a str, number or Gutter, got {type(value).__name__}")


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value`` pair."""

    property: str
    value: str
    important: bool = False

    def __str__(self) -> str:
        suffix = " !important" if self.important else ""
        return f"{self.property}: {self.value}{suffix}"


@dataclass(frozen=True)
class SizeExpression:
    """Deferred width/height formula, e.g. ``calc(99.99% * (1/3) - ...)``."""

    formula: str

    def __str__(self) -> str:
        return self.formula


@dataclass(frozen=True)
class OffsetExpression:
    """Deferred margin or position declarations for an offset or move."""

    declarations: tuple[Declaration, ...]

    def __str__(self) -> str:
        return "; ".join(str(d) for d in self.declarations)

    def as_dict(self) -> dict[str, str]:
        return {d.property: d.value for d in self.declarations}
