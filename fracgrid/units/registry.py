"""
Unit registry: loads the unit suffix table from YAML at startup, validates
it against the Unit enum, and exposes a read-only lookup API.

The registry is a module-level singleton; call get_registry() to obtain it.
The table is loaded and validated once at import time. Nothing writes to
the registry after startup.
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Any, cast

import yaml

from fracgrid.errors import UnknownUnit
from fracgrid.units.types import Unit, UnitEntry, UnitKind

_DATA_DIR = Path(__file__).parent / "data"


class UnitRegistry:
    """
    Read-only suffix → UnitEntry table.

    ``by_suffix`` and ``by_unit`` are wrapped in MappingProxyType after
    loading and are immutable for the lifetime of the registry instance.

    Instantiate directly to use a custom data directory (e.g. in tests);
    otherwise use get_registry() for the module singleton.
    """

    def __init__(self, data_dir: Path = _DATA_DIR) -> None:
        self._data_dir = data_dir

        # Type annotations only; actual assignment happens in _load_units
        self.by_suffix: MappingProxyType[str, UnitEntry]
        self.by_unit: MappingProxyType[Unit, UnitEntry]

        self._load_units()
        self._validate()

    # ── Loading ────────────────────────────────────────────────────────────────

    def _load_yaml(self, filename: str) -> dict[str, Any]:
        path = self._data_dir / filename
        try:
            with open(path) as f:
                return cast(dict[str, Any], yaml.safe_load(f))
        except FileNotFoundError:
            raise FileNotFoundError(f"Unit data file not found: {path}") from None
        except yaml.YAMLError as exc:
            raise ValueError(f"Failed to parse unit data file {path}: {exc}") from exc

    def _load_units(self) -> None:
        data = self._load_yaml("units.yaml")
        self._entries: list[UnitEntry] = []
        for entry in data["entries"]:
            self._entries.append(
                UnitEntry(
                    unit=Unit[entry["id"]],
                    suffix=str(entry["suffix"]),
                    kind=UnitKind(entry["kind"]),
                    description=entry.get("description", "").strip(),
                )
            )
        self.by_suffix = MappingProxyType({e.suffix: e for e in self._entries})
        self.by_unit = MappingProxyType({e.unit: e for e in self._entries})

    # ── Validation ─────────────────────────────────────────────────────────────

    def _validate(self) -> None:
        """
        Run at startup. Raises ValueError listing all problems found if the
        table disagrees with the Unit enum or repeats a suffix or unit.
        """
        errors: list[str] = []
        seen_suffixes: set[str] = set()
        seen_units: set[Unit] = set()
        for entry in self._entries:
            if entry.unit is Unit.UNITLESS:
                errors.append("UNITLESS must not appear in the unit table")
            if entry.suffix != entry.unit.value:
                errors.append(
                    f"unit {entry.unit.name}: suffix {entry.suffix!r} does not match "
                    f"enum value {entry.unit.value!r}"
                )
            if entry.suffix in seen_suffixes:
                errors.append(f"suffix {entry.suffix!r} is listed more than once")
            if entry.unit in seen_units:
                errors.append(f"unit {entry.unit.name} is listed more than once")
            seen_suffixes.add(entry.suffix)
            seen_units.add(entry.unit)
        for unit in Unit:
            if unit is not Unit.UNITLESS and unit not in seen_units:
                errors.append(f"unit {unit.name} has no entry in units.yaml")
        if errors:
            raise ValueError(
                "Unit registry validation failed:\n" + "\n".join(f"  • {e}" for e in errors)
            )

    # ── Query API ──────────────────────────────────────────────────────────────

    def lookup(self, suffix: str, text: str = "") -> Unit:
        """Return the Unit for an exact, case-sensitive *suffix*.

        An empty suffix is UNITLESS. *text* is the full literal, used only
        for the error message.

        Raises UnknownUnit if the suffix is not in the table.
        """
        if suffix == "":
            return Unit.UNITLESS
        entry = self.by_suffix.get(suffix)
        if entry is None:
            raise UnknownUnit(text or suffix, suffix)
        return entry.unit

    def kind(self, unit: Unit) -> UnitKind | None:
        """Return the UnitKind of *unit*, or None for UNITLESS."""
        entry = self.by_unit.get(unit)
        return entry.kind if entry else None

    def suffixes(self) -> list[str]:
        """Return all recognized suffixes in table order."""
        return [e.suffix for e in self._entries]


# ── Module-level singleton ─────────────────────────────────────────────────────
#
# Initialized eagerly at import time. The registry is read-only after
# construction, so sharing it across threads is safe.

_registry: UnitRegistry = UnitRegistry()


def get_registry() -> UnitRegistry:
    """Return the module-level registry singleton."""
    return _registry


def lookup_unit(suffix: str) -> Unit:
    """Look up *suffix* in the default registry."""
    return _registry.lookup(suffix)
