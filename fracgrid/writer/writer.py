"""
CSS writer: renders rule tuples as stylesheet text.

For each rule in order:
  1. Substitutes ``&`` in the relative selector with the target selector.
  2. Renders one ``property: value;`` line per declaration, indented two spaces.
  3. Skips rules with no declarations.

Blocks are separated by a blank line.
"""

from __future__ import annotations

from collections.abc import Iterable

from fracgrid.rules.types import SELF, Rule

INDENT = "  "


def render_rule(selector: str, rule: Rule) -> str:
    """Render a single rule for *selector*; empty string if it has no declarations."""
    if not rule.declarations:
        return ""
    lines = [rule.selector.replace(SELF, selector) + " {"]
    lines.extend(f"{INDENT}{declaration};" for declaration in rule.declarations)
    lines.append("}")
    return "\n".join(lines)


def render_rules(selector: str, rules: Iterable[Rule]) -> str:
    """
    Render *rules* for *selector* as CSS text.

    Raises:
        ValueError: If *selector* is empty or whitespace.
    """
    if not selector or not selector.strip():
        raise ValueError("selector must not be empty")
    blocks = (render_rule(selector.strip(), rule) for rule in rules)
    return "\n\n".join(block for block in blocks if block)
