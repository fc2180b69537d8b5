"""
Column, row and waffle rule builders.

Each builder sizes the element with build_size() and strips the gutter at
row boundaries with nth-child rules repeating every ``cycle`` items. In
float mode the last item of a row floats to the trailing side and the
first item of the next row clears; flexbox mode relies on the container
wrapping instead.
"""

from __future__ import annotations

from typing import Any

from fracgrid.config.settings import Clearing, GridConfig
from fracgrid.expressions.size import build_size
from fracgrid.expressions.types import Declaration
from fracgrid.parser.fraction import FractionToken, coerce_fraction
from fracgrid.rules.registry import register
from fracgrid.rules.types import SELF, Rule, resolve, sides


def _clear_value(config: GridConfig) -> str:
    if config.clearing is Clearing.BOTH:
        return "both"
    return sides(config)[0]


def _placement(config: GridConfig) -> list[Declaration]:
    """Float or flex declarations opening every grid item."""
    if config.flexbox:
        return [Declaration("flex", "0 0 auto")]
    leading, _ = sides(config)
    return [Declaration("float", leading), Declaration("clear", "none")]


def _row_boundaries(
    cycle: int | None,
    config: GridConfig,
    trailing_margin: bool,
) -> list[Rule]:
    """nth-child rules for the last item of a row and the first of the next."""
    if not cycle:
        return []
    _, trailing = sides(config)
    rules: list[Rule] = []

    last: list[Declaration] = []
    if trailing_margin:
        last.append(Declaration(f"margin-{trailing}", "0"))
    if not config.flexbox:
        last.append(Declaration("float", trailing))
    if last:
        rules.append(Rule(f"{SELF}:nth-child({cycle}n)", tuple(last)))

    if not config.flexbox:
        rules.append(
            Rule(
                f"{SELF}:nth-child({cycle}n + 1)",
                (Declaration("clear", _clear_value(config)),),
            )
        )
    return rules


def column(
    fraction: FractionToken | str,
    cycle: int | None = None,
    gutter: Any = None,
    config: GridConfig | None = None,
) -> tuple[Rule, ...]:
    """
    Size an element as a column spanning *fraction* of its row.

    Args:
        fraction: Share of the row, e.g. ``"1/3"``.
        cycle: Items per row; defaults to the denominator, ``0`` disables
            the nth-child rules.
        gutter: Spacing between columns; None uses ``config.gutter``.
        config: Layout defaults; None uses the packaged defaults.

    Returns:
        Rules for the element, its last child and its row boundaries.
    """
    cfg, gut = resolve(config, gutter)
    frac = coerce_fraction(fraction, cycle)
    _, trailing = sides(cfg)

    base = _placement(cfg)
    base.append(Declaration("width", str(build_size(frac, gut))))
    if gut.is_zero:
        rules = [Rule(SELF, tuple(base))]
    else:
        base.append(Declaration(f"margin-{trailing}", str(gut)))
        rules = [
            Rule(SELF, tuple(base)),
            Rule(f"{SELF}:last-child", (Declaration(f"margin-{trailing}", "0"),)),
        ]

    rules.extend(_row_boundaries(frac.cycle, cfg, trailing_margin=not gut.is_zero))
    return tuple(rules)


def row(
    fraction: FractionToken | str,
    gutter: Any = None,
    config: GridConfig | None = None,
) -> tuple[Rule, ...]:
    """Size an element as a full-width row taking *fraction* of the height."""
    cfg, gut = resolve(config, gutter)
    frac = coerce_fraction(fraction)

    base: list[Declaration] = []
    if cfg.flexbox:
        base.append(Declaration("flex", "0 0 auto"))
    base.append(Declaration("width", "100%"))
    base.append(Declaration("height", str(build_size(frac, gut))))
    if gut.is_zero:
        return (Rule(SELF, tuple(base)),)

    base.append(Declaration("margin-bottom", str(gut)))
    return (
        Rule(SELF, tuple(base)),
        Rule(f"{SELF}:last-child", (Declaration("margin-bottom", "0"),)),
    )


def waffle(
    fraction: FractionToken | str,
    cycle: int | None = None,
    gutter: Any = None,
    config: GridConfig | None = None,
) -> tuple[Rule, ...]:
    """
    Size an element as a cell of a square grid: *fraction* of both width
    and height, with gutters stripped on the last column and last row.
    """
    cfg, gut = resolve(config, gutter)
    frac = coerce_fraction(fraction, cycle)
    _, trailing = sides(cfg)
    size = str(build_size(frac, gut))

    base = _placement(cfg)
    base.append(Declaration("width", size))
    base.append(Declaration("height", size))
    if gut.is_zero:
        rules = [Rule(SELF, tuple(base))]
        rules.extend(_row_boundaries(frac.cycle, cfg, trailing_margin=False))
        return tuple(rules)

    base.append(Declaration(f"margin-{trailing}", str(gut)))
    base.append(Declaration("margin-bottom", str(gut)))
    rules = [
        Rule(SELF, tuple(base)),
        Rule(
            f"{SELF}:last-child",
            (Declaration(f"margin-{trailing}", "0"), Declaration("margin-bottom", "0")),
        ),
    ]
    rules.extend(_row_boundaries(frac.cycle, cfg, trailing_margin=True))
    if frac.cycle:
        rules.append(
            Rule(
                f"{SELF}:nth-last-child(-n + {frac.cycle})",
                (Declaration("margin-bottom", "0"),),
            )
        )
    return tuple(rules)


register("column", column)
register("row", row)
register("waffle", waffle)
