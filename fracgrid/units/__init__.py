from .registry import UnitRegistry, get_registry, lookup_unit
from .types import Unit, UnitEntry, UnitKind

__all__ = [
    # Enums
    "Unit",
    "UnitKind",
    # Registry entry type (frozen, loaded from YAML)
    "UnitEntry",
    # Registry
    "UnitRegistry",
    "get_registry",
    "lookup_unit",
]
