"""
Public stylesheet generation API.

generate_css() is the single entry point that takes a selector, a layout
name and a fraction and returns CSS text. It wires the layout registry →
rule builder → writer.
"""

from __future__ import annotations

from typing import Any

import fracgrid.rules  # noqa: F401: ensures all layout builders are registered
import fracgrid.rules.registry as layout_registry
from fracgrid.config.settings import GridConfig
from fracgrid.parser.fraction import FractionToken
from fracgrid.writer.writer import render_rules


def generate_css(
    selector: str,
    layout: str,
    fraction: FractionToken | str,
    config: GridConfig | None = None,
    **options: Any,
) -> str:
    """
    Generate the CSS rules that lay out *selector* as a grid item.

    Parameters
    ----------
    selector:
        Target selector, e.g. ``".card"``.
    layout:
        Registered layout name (``"column"``, ``"row"``, ``"waffle"``,
        ``"offset"`` or ``"move"``).
    fraction:
        Fraction string such as ``"1/3"`` or a parsed FractionToken.
    config:
        Layout defaults; None uses the packaged defaults.
    **options:
        Extra keyword arguments for the layout builder (``cycle``,
        ``gutter``, ``axis``).

    Returns
    -------
    str
        CSS text with one block per generated rule.

    Raises
    ------
    KeyError
        If *layout* is not registered.
    ParseError
        If *fraction* or a gutter string cannot be parsed.
    """
    builder = layout_registry.get(layout)
    rules = builder(fraction, config=config, **options)
    return render_rules(selector, rules)


def list_layouts() -> list[str]:
    """Return the names accepted by generate_css()."""
    return layout_registry.list_layouts()
