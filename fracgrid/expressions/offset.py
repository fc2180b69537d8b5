"""
Offset and move expression builders.

An offset reserves empty space beside an item with a margin; the side
depends on the numerator's sign:

    axis    sign  side (LTR)      extra gutter
    row     +     margin-right    g * 2
    row     -     margin-left     g        (on |f|)
    column  +     margin-bottom   g * 2
    column  -     margin-top      g * 2    (on |f|)
    any     0     reset to {leading: 0, trailing: g}

The negative row and column cases differ in their gutter term. Layouts
built against existing output rely on both values, so they are kept apart.

A move shifts an item visually without changing its footprint. It always
anchors on ``left`` (row) or ``top`` (column) and adds exactly one gutter;
callers pair ``+f`` and ``-f`` moves to swap two items.
"""

from __future__ import annotations

from fracgrid.expressions.size import GUTTERLESS_ROUNDER, size_formula
from fracgrid.expressions.types import Axis, Declaration, Gutter, OffsetExpression
from fracgrid.parser.fraction import FractionToken


def _sides(axis: Axis, rtl: bool) -> tuple[str, str]:
    """Return the (leading, trailing) margin sides for *axis*."""
    if axis is Axis.COLUMN:
        return "top", "bottom"
    if rtl:
        return "right", "left"
    return "left", "right"


def _gutterless(fraction: FractionToken) -> str:
    return f"calc({GUTTERLESS_ROUNDER} * {fraction.term})"


def build_offset(
    fraction: FractionToken,
    axis: Axis,
    gutter: Gutter,
    rtl: bool = False,
) -> OffsetExpression:
    """
    Build the margin declarations that offset an item by *fraction*.

    Args:
        fraction: Signed fraction; its sign selects the side.
        axis: ROW (left/right margins) or COLUMN (top/bottom margins).
        gutter: Spacing between items.
        rtl: Mirror left and right on the row axis.

    Returns:
        OffsetExpression with one ``!important`` margin for a signed
        fraction, or two ``!important`` margins resetting a zero fraction so
        the reset overrides an earlier offset.
    """
    axis = Axis(axis)
    leading, trailing = _sides(axis, rtl)

    if fraction.is_zero:
        return OffsetExpression(
            declarations=(
                Declaration(f"margin-{leading}", "0", important=True),
                Declaration(f"margin-{trailing}", str(gutter), important=True),
            )
        )

    if fraction.sign > 0:
        side = trailing
        magnitude = fraction
        extra = f"({gutter} * 2)"
    else:
        side = leading
        magnitude = fraction.abs()
        extra = f"({gutter} * 2)" if axis is Axis.COLUMN else str(gutter)

    if gutter.is_zero:
        value = _gutterless(magnitude)
    else:
        value = f"calc({size_formula(magnitude, gutter)} + {extra})"
    return OffsetExpression(declarations=(Declaration(f"margin-{side}", value, important=True),))


def build_move(fraction: FractionToken, axis: Axis, gutter: Gutter) -> OffsetExpression:
    """
    Build the position declaration that shifts an item by *fraction*.

    Args:
        fraction: Signed fraction; negative moves back.
        axis: ROW anchors on ``left``, COLUMN on ``top``.
        gutter: Spacing between items.

    Returns:
        OffsetExpression with a single ``left`` or ``top`` declaration.
    """
    axis = Axis(axis)
    prop = "top" if axis is Axis.COLUMN else "left"
    if gutter.is_zero:
        value = _gutterless(fraction)
    else:
        value = f"calc({size_formula(fraction, gutter)} + {gutter})"
    return OffsetExpression(declarations=(Declaration(prop, value),))
