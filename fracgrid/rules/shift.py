"""
Offset and move rule builders, plus the container helpers grid items rely on.
"""

from __future__ import annotations

from typing import Any

from fracgrid.config.settings import GridConfig
from fracgrid.expressions.offset import build_move, build_offset
from fracgrid.expressions.types import Axis, Declaration
from fracgrid.parser.fraction import FractionToken, coerce_fraction
from fracgrid.rules.registry import register
from fracgrid.rules.types import SELF, Rule, resolve


def offset(
    fraction: FractionToken | str,
    axis: Axis | str = Axis.ROW,
    gutter: Any = None,
    config: GridConfig | None = None,
) -> tuple[Rule, ...]:
    """Reserve *fraction* of empty space beside the element with a margin."""
    cfg, gut = resolve(config, gutter)
    expr = build_offset(coerce_fraction(fraction), Axis(axis), gut, rtl=cfg.rtl)
    return (Rule(SELF, expr.declarations),)


def move(
    fraction: FractionToken | str,
    axis: Axis | str = Axis.ROW,
    gutter: Any = None,
    config: GridConfig | None = None,
) -> tuple[Rule, ...]:
    """Shift the element visually by *fraction* without changing its footprint."""
    _, gut = resolve(config, gutter)
    expr = build_move(coerce_fraction(fraction), Axis(axis), gut)
    return (Rule(SELF, (Declaration("position", "relative"), *expr.declarations)),)


def flex_container(axis: Axis | str = Axis.ROW) -> tuple[Rule, ...]:
    """Turn the element into a wrapping flex container for flexbox-mode items."""
    flow = "column nowrap" if Axis(axis) is Axis.COLUMN else "row wrap"
    return (Rule(SELF, (Declaration("display", "flex"), Declaration("flex-flow", flow))),)


def clearfix() -> tuple[Rule, ...]:
    """Make the element contain its floated children."""
    return (
        Rule(
            f"{SELF}::before, {SELF}::after",
            (Declaration("content", "''"), Declaration("display", "table")),
        ),
        Rule(f"{SELF}::after", (Declaration("clear", "both"),)),
    )


register("offset", offset)
register("move", move)
