"""parser: numeric literal and fraction parsing."""

from fracgrid.parser.fraction import FractionToken, coerce_fraction, parse_fraction
from fracgrid.parser.numeric import NumericLiteral, format_decimal, parse_number

__all__ = [
    "FractionToken",
    "NumericLiteral",
    "coerce_fraction",
    "format_decimal",
    "parse_fraction",
    "parse_number",
]
