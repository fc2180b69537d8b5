"""
Grid configuration: the defaults every layout call falls back to.

Defaults ship as YAML next to this module. load_config() reads any YAML
file with the same keys; keys it omits take the packaged default. The
default configuration is built once at import time and never mutated;
derive per-call variants with dataclasses.replace().
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, cast

import yaml

from fracgrid.expressions.types import Gutter

_DATA_DIR = Path(__file__).parent / "data"
_DEFAULTS_PATH = _DATA_DIR / "defaults.yaml"

_KNOWN_KEYS = ("gutter", "rtl", "flexbox", "clearing")


class Clearing(str, Enum):
    """Side cleared by the first item of each row in float mode."""

    LEFT = "left"
    BOTH = "both"


@dataclass(frozen=True)
class GridConfig:
    """
    Layout defaults threaded through every rule builder.

    Attributes:
        gutter: Spacing between items.
        rtl: Mirror left/right for right-to-left documents.
        flexbox: Emit flex items instead of floats.
        clearing: Side cleared at the start of each row in float mode.
    """

    gutter: Gutter = field(default_factory=lambda: Gutter.parse("30px"))
    rtl: bool = False
    flexbox: bool = False
    clearing: Clearing = Clearing.BOTH

    def __post_init__(self) -> None:
        if not isinstance(self.gutter, Gutter):
            raise TypeError(f"gutter must be a Gutter, got {type(self.gutter).__name__}")
        if not isinstance(self.clearing, Clearing):
            raise TypeError(f"clearing must be a Clearing, got {type(self.clearing).__name__}")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Grid config file not found: {path}") from None
    except yaml.YAMLError as exc:
        raise ValueError(f"Failed to parse grid config file {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Grid config file {path} must contain a mapping")
    return cast(dict[str, Any], data)


def _build_config(data: dict[str, Any], path: Path) -> GridConfig:
    """Validate raw YAML values and build a GridConfig, reporting all problems at once."""
    errors: list[str] = []
    for key in data:
        if key not in _KNOWN_KEYS:
            errors.append(f"unknown key {key!r}")

    values: dict[str, Any] = {}
    if "gutter" in data:
        raw = data["gutter"]
        try:
            values["gutter"] = Gutter.parse(raw)
        except (TypeError, ValueError) as exc:
            errors.append(f"gutter: {exc}")
    for key in ("rtl", "flexbox"):
        if key in data:
            if isinstance(data[key], bool):
                values[key] = data[key]
            else:
                errors.append(f"{key}: expected true or false, got {data[key]!r}")
    if "clearing" in data:
        try:
            values["clearing"] = Clearing(data["clearing"])
        except ValueError:
            allowed = ", ".join(c.value for c in Clearing)
            errors.append(f"clearing: expected one of {allowed}, got {data['clearing']!r}")

    if errors:
        raise ValueError(
            f"Invalid grid config {path}:\n" + "\n".join(f"  • {e}" for e in errors)
        )
    return GridConfig(**values)


def load_config(path: Path | str | None = None) -> GridConfig:
    """
    Load a GridConfig from YAML.

    Args:
        path: Config file to read. None reads the packaged defaults only.

    Returns:
        GridConfig with the file's values layered over the packaged defaults.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ValueError: If the file is not valid YAML, is not a mapping, has
            unknown keys, or has values of the wrong type.
    """
    merged = _read_yaml(_DEFAULTS_PATH)
    source = _DEFAULTS_PATH
    if path is not None:
        source = Path(path)
        merged.update(_read_yaml(source))
    return _build_config(merged, source)


# ── Module-level singleton ─────────────────────────────────────────────────────

_default_config: GridConfig = load_config()


def get_default_config() -> GridConfig:
    """Return the packaged default configuration."""
    return _default_config
