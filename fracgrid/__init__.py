"""
fracgrid: fraction-based CSS grid expressions.

Parses fraction strings such as ``"2/3"`` into tokens and turns them into
deferred ``calc()`` size, offset and move expressions, then assembles
column, row and waffle layout rules from them.
"""

from .api.generate import generate_css, list_layouts
from .config.settings import Clearing, GridConfig, get_default_config, load_config
from .errors import (
    GridError,
    InvalidArgument,
    MalformedFraction,
    MalformedNumber,
    ParseError,
    UnknownUnit,
)
from .expressions.offset import build_move, build_offset
from .expressions.size import FractionOverflowWarning, build_size
from .expressions.types import Axis, Declaration, Gutter, OffsetExpression, SizeExpression
from .parser.fraction import FractionToken, parse_fraction
from .parser.numeric import NumericLiteral, parse_number
from .rules.types import Rule
from .units.types import Unit
from .utilities.splitter import split
from .writer.writer import render_rules

__all__ = [
    # types
    "Axis",
    "Clearing",
    "Declaration",
    "FractionToken",
    "GridConfig",
    "Gutter",
    "NumericLiteral",
    "OffsetExpression",
    "Rule",
    "SizeExpression",
    "Unit",
    # errors and warnings
    "GridError",
    "InvalidArgument",
    "ParseError",
    "MalformedFraction",
    "MalformedNumber",
    "UnknownUnit",
    "FractionOverflowWarning",
    # parsing
    "split",
    "parse_number",
    "parse_fraction",
    # expressions
    "build_size",
    "build_offset",
    "build_move",
    # config
    "get_default_config",
    "load_config",
    # output
    "render_rules",
    "generate_css",
    "list_layouts",
]
