"""
Layout builder registry.

A simple mapping from layout name to the callable that builds its rules.

Usage
-----
Built-in builders self-register at import time by calling ``register()``.
Import the ``fracgrid.rules`` package to ensure they are registered::

    import fracgrid.rules
    from fracgrid.rules.registry import get, list_layouts

    rules = get("column")("1/3")
"""

from __future__ import annotations

from collections.abc import Callable

from fracgrid.rules.types import Rule

LayoutBuilder = Callable[..., tuple[Rule, ...]]

_REGISTRY: dict[str, LayoutBuilder] = {}


def register(layout: str, builder: LayoutBuilder) -> None:
    """Register *builder* under *layout*.

    ``builder`` takes a fraction as its first argument and returns a tuple
    of Rules.
    """
    _REGISTRY[layout] = builder


def get(layout: str) -> LayoutBuilder:
    """Return the builder registered under *layout*.

    Raises
    ------
    KeyError
        If *layout* has not been registered.
    """
    if layout not in _REGISTRY:
        raise KeyError(f"Unknown layout: {layout!r}")
    return _REGISTRY[layout]


def list_layouts() -> list[str]:
    """Return a sorted list of all registered layout names."""
    return sorted(_REGISTRY.keys())
