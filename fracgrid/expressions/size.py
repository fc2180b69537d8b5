"""
Size expression builder: fraction + gutter → deferred calc() dimension.

Formulas:
    zero gutter:      calc(99.999999% * f)
    non-zero gutter:  calc(99.99% * f - (g - g * f))

Every item gets a gutter-sized margin and items narrower than the full row
get back the unused share of that gutter, so N items at 1/N plus N - 1
gutters fill the row. The scalars stay just under 100% so rendering engines
that round up never wrap the last item onto a new line.

The container size is unknown until render time, so the formula is never
evaluated here.
"""

from __future__ import annotations

import warnings

from fracgrid.expressions.types import Gutter, SizeExpression
from fracgrid.parser.fraction import FractionToken

GUTTERED_ROUNDER = "99.99%"
GUTTERLESS_ROUNDER = "99.999999%"


class FractionOverflowWarning(UserWarning):
    """Emitted when a fraction larger than one would overflow its container."""


def size_formula(fraction: FractionToken, gutter: Gutter) -> str:
    """Return the bare arithmetic (without ``calc()``) for *fraction* at *gutter*."""
    term = fraction.term
    if gutter.is_zero:
        return f"{GUTTERLESS_ROUNDER} * {term}"
    return f"{GUTTERED_ROUNDER} * {term} - ({gutter} - {gutter} * {term})"


def build_size(fraction: FractionToken, gutter: Gutter) -> SizeExpression:
    """
    Build the width (or height) expression for *fraction*.

    Args:
        fraction: Parsed fraction of the container.
        gutter: Spacing between items; zero switches to the gutterless formula.

    Returns:
        SizeExpression wrapping the ``calc()`` formula.
    """
    if abs(fraction.value) > 1:
        warnings.warn(
            f"fraction {fraction} is larger than its container",
            FractionOverflowWarning,
            stacklevel=2,
        )
    return SizeExpression(formula=f"calc({size_formula(fraction, gutter)})")
