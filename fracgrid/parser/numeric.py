"""
Numeric literal parser: signed decimal magnitude with an optional unit suffix.

The literal is read in one left-to-right pass. Digits, ``.`` and ``-``
form the magnitude run; the first character outside that set ends it and
the rest of the string is the unit suffix, looked up exactly in the unit
table. A ``-`` anywhere in the magnitude run marks the literal negative,
so ``"3-2"`` reads as ``-32``. Existing stylesheets depend on that.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from fracgrid.errors import InvalidArgument, MalformedNumber
from fracgrid.units.registry import get_registry
from fracgrid.units.types import Unit
from fracgrid.utilities.splitter import split

_DIGITS = frozenset("0123456789")
_MAGNITUDE_CHARS = _DIGITS | {".", "-"}


def format_decimal(value: Decimal) -> str:
    """Render *value* in plain notation with no exponent and no trailing zeros.

    Every digit of *value* is kept; the decimal context precision does not
    apply.
    """
    if value == 0:
        return "0"
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


@dataclass(frozen=True)
class NumericLiteral:
    """
    A signed decimal magnitude and its unit.

    ``unit`` is UNITLESS when the source text had no suffix.
    """

    magnitude: Decimal
    unit: Unit = Unit.UNITLESS

    def __str__(self) -> str:
        return format_decimal(self.magnitude) + self.unit.value

    @property
    def is_zero(self) -> bool:
        return self.magnitude == 0

    @property
    def sign(self) -> int:
        """-1, 0 or 1."""
        if self.magnitude > 0:
            return 1
        if self.magnitude < 0:
            return -1
        return 0

    def abs(self) -> NumericLiteral:
        return NumericLiteral(magnitude=abs(self.magnitude), unit=self.unit)


def parse_number(text: Any) -> NumericLiteral:
    """
    Parse a numeric literal such as ``"12.5px"``, ``"-0.25"`` or ``"3"``.

    Args:
        text: The literal to parse.

    Returns:
        NumericLiteral with the parsed magnitude and unit.

    Raises:
        InvalidArgument: If *text* is not a ``str``.
        MalformedNumber: If the magnitude run has no digit or more than one ``.``.
        UnknownUnit: If the trailing suffix is not in the unit table.
    """
    if not isinstance(text, str):
        raise InvalidArgument(f"numeric literal must be a str, got {type(text).__name__}")

    minus = False
    digits: list[str] = []
    suffix = ""
    chars = split(text, "")
    for index, char in enumerate(chars):
        if char not in _MAGNITUDE_CHARS:
            suffix = text[index:]
            break
        if char == "-":
            minus = True
        else:
            digits.append(char)

    run = "".join(digits)
    if not any(c in _DIGITS for c in run):
        raise MalformedNumber(text, "numeric literal has no digits")
    if run.count(".") > 1:
        raise MalformedNumber(text, "numeric literal has more than one decimal point")

    unit = get_registry().lookup(suffix, text)
    magnitude = Decimal(run)
    return NumericLiteral(magnitude=-magnitude if minus else magnitude, unit=unit)
