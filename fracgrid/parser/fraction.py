"""
Fraction token: a parsed ``numerator/denominator`` string.

The sign of a fraction is the sign of its numerator; zero is its own
branch. The cycle (items per row before gutter stripping repeats) defaults
to the denominator.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from fracgrid.errors import InvalidArgument, MalformedFraction
from fracgrid.parser.numeric import NumericLiteral, parse_number
from fracgrid.utilities.splitter import split


@dataclass(frozen=True)
class FractionToken:
    """
    Parsed fraction string.

    Attributes:
        numerator: Signed numerator literal.
        denominator: Denominator literal; never zero.
        raw_numerator: Numerator text as written.
        raw_denominator: Denominator text as written.
        cycle_override: Explicit cycle from the caller, or None to use the
            denominator.
    """

    numerator: NumericLiteral
    denominator: NumericLiteral
    raw_numerator: str
    raw_denominator: str
    cycle_override: int | None = None

    def __post_init__(self) -> None:
        if self.denominator.is_zero:
            raise MalformedFraction(
                f"{self.raw_numerator}/{self.raw_denominator}", "fraction denominator is zero"
            )
        _check_cycle(self.cycle_override)

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"

    @property
    def sign(self) -> int:
        return self.numerator.sign

    @property
    def is_zero(self) -> bool:
        return self.numerator.is_zero

    @property
    def term(self) -> str:
        """The parenthesised fraction as it appears inside a calc() formula."""
        return f"({self})"

    @property
    def value(self) -> Decimal:
        """Exact quotient, ignoring units."""
        return self.numerator.magnitude / self.denominator.magnitude

    @property
    def cycle(self) -> int | None:
        """Repeat period for nth-child rules.

        The explicit override when given, otherwise the denominator when it
        is a whole number, otherwise None.
        """
        if self.cycle_override is not None:
            return self.cycle_override
        magnitude = abs(self.denominator.magnitude)
        if magnitude != magnitude.to_integral_value():
            return None
        return int(magnitude)

    def abs(self) -> FractionToken:
        """Return the same fraction with a non-negative numerator."""
        if self.numerator.sign >= 0:
            return self
        return dataclasses.replace(
            self,
            numerator=self.numerator.abs(),
            raw_numerator=self.raw_numerator.replace("-", ""),
        )

    def with_cycle(self, cycle: int | None) -> FractionToken:
        return dataclasses.replace(self, cycle_override=cycle)


def _check_cycle(cycle: Any) -> None:
    if cycle is None:
        return
    if isinstance(cycle, bool) or not isinstance(cycle, int):
        raise ValueError(f"cycle must be an int or None, got {type(cycle).__name__}")
    if cycle < 0:
        raise ValueError(f"cycle must be >= 0, got {cycle}")


def parse_fraction(text: Any, cycle: int | None = None) -> FractionToken:
    """
    Parse a fraction string such as ``"2/3"`` or ``"-1/4"``.

    Args:
        text: The fraction string.
        cycle: Explicit repeat period; ``0`` disables cycle rules. Defaults
            to the denominator.

    Returns:
        FractionToken for the parsed numerator and denominator.

    Raises:
        InvalidArgument: If *text* is not a ``str``.
        MalformedFraction: If *text* does not contain exactly one ``/``, or
            the denominator is zero.
        MalformedNumber: If either side is not a numeric literal.
        UnknownUnit: If either side has an unrecognized unit suffix.
        ValueError: If *cycle* is negative or not an int.
    """
    if not isinstance(text, str):
        raise InvalidArgument(f"fraction must be a str, got {type(text).__name__}")
    _check_cycle(cycle)

    parts = split(text, "/")
    if len(parts) != 2:
        raise MalformedFraction(text, f"fraction must have exactly one '/', found {len(parts) - 1}")

    raw_numerator, raw_denominator = parts
    numerator = parse_number(raw_numerator)
    denominator = parse_number(raw_denominator)

    return FractionToken(
        numerator=numerator,
        denominator=denominator,
        raw_numerator=raw_numerator,
        raw_denominator=raw_denominator,
        cycle_override=cycle,
    )


def coerce_fraction(fraction: FractionToken | str, cycle: int | None = None) -> FractionToken:
    """Accept either a parsed token or fraction text; apply *cycle* if given."""
    if isinstance(fraction, FractionToken):
        return fraction if cycle is None else fraction.with_cycle(cycle)
    return parse_fraction(fraction, cycle)
