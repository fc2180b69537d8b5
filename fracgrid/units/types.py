"""
Core type definitions for the unit table.

The Unit enum is the canonical vocabulary; UnitEntry rows are loaded from
the YAML table and are frozen after startup.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Unit(str, Enum):
    """CSS units recognized as literal suffixes. Values are the suffix text."""

    UNITLESS = ""
    PX = "px"
    CM = "cm"
    MM = "mm"
    PERCENT = "%"
    CH = "ch"
    PICA = "pica"
    IN = "in"
    EM = "em"
    REM = "rem"
    PT = "pt"
    PC = "pc"
    EX = "ex"
    VW = "vw"
    VH = "vh"
    VMIN = "vmin"
    VMAX = "vmax"


class UnitKind(str, Enum):
    ABSOLUTE = "absolute"  # fixed physical length
    FONT_RELATIVE = "font_relative"  # resolved against a font metric
    VIEWPORT = "viewport"  # resolved against the viewport
    PERCENTAGE = "percentage"  # resolved against the containing block


@dataclass(frozen=True)
class UnitEntry:
    unit: Unit
    suffix: str
    kind: UnitKind
    description: str = ""
