"""
Rule type and the argument resolution shared by every rule builder.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fracgrid.config.settings import GridConfig, get_default_config
from fracgrid.expressions.types import Declaration, Gutter

SELF = "&"


@dataclass(frozen=True)
class Rule:
    """
    A declaration block for a relative selector.

    ``selector`` uses ``&`` for the element the layout is applied to, e.g.
    ``"&:nth-child(3n)"``. The writer substitutes the real selector.
    """

    selector: str
    declarations: tuple[Declaration, ...]


def resolve(config: GridConfig | None, gutter: Any) -> tuple[GridConfig, Gutter]:
    """Return the effective config and gutter for a rule builder call."""
    cfg = config if config is not None else get_default_config()
    if gutter is None:
        return cfg, cfg.gutter
    return cfg, Gutter.parse(gutter)


def sides(config: GridConfig) -> tuple[str, str]:
    """Return the (leading, trailing) horizontal sides for the config's direction."""
    return ("right", "left") if config.rtl else ("left", "right")
