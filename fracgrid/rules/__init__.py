"""rules: layout rule builders for columns, rows, waffles, offsets and moves."""

from fracgrid.rules.grid import column, row, waffle
from fracgrid.rules.registry import get, list_layouts, register
from fracgrid.rules.shift import clearfix, flex_container, move, offset
from fracgrid.rules.types import Rule

__all__ = [
    "Rule",
    # builders
    "clearfix",
    "column",
    "flex_container",
    "move",
    "offset",
    "row",
    "waffle",
    # registry
    "get",
    "list_layouts",
    "register",
]
