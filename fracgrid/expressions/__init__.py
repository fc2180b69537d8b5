"""expressions: deferred calc() builders for sizes, offsets and moves."""

from fracgrid.expressions.offset import build_move, build_offset
from fracgrid.expressions.size import FractionOverflowWarning, build_size
from fracgrid.expressions.types import (
    Axis,
    Declaration,
    Gutter,
    OffsetExpression,
    SizeExpression,
)

__all__ = [
    "Axis",
    "Declaration",
    "FractionOverflowWarning",
    "Gutter",
    "OffsetExpression",
    "SizeExpression",
    "build_move",
    "build_offset",
    "build_size",
]
