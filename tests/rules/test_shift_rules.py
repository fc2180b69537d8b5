"""Tests for rules.shift: offset, move and container rules."""

from __future__ import annotations

from fracgrid.config import GridConfig
from fracgrid.expressions.types import Axis, Declaration
from fracgrid.rules import Rule, clearfix, flex_container, move, offset

_THIRD = "calc(99.99% * (1/3) - (30px - 30px * (1/3))"


class TestOffset:
    def test_positive_row(self):
        assert offset("1/3") == (
            Rule("&", (Declaration("margin-right", f"{_THIRD} + (30px * 2))", important=True),)),
        )

    def test_rtl_from_config(self):
        rules = offset("-1/3", config=GridConfig(rtl=True))
        assert rules[0].declarations[0].property == "margin-right"

    def test_column_axis_string(self):
        rules = offset("1/3", axis="column")
        assert rules[0].declarations[0].property == "margin-bottom"

    def test_zero_gutter_override(self):
        rules = offset("0/3", gutter=0)
        assert rules[0].declarations == (
            Declaration("margin-left", "0", important=True),
            Declaration("margin-right", "0", important=True),
        )


class TestMove:
    def test_row(self):
        assert move("1/3") == (
            Rule(
                "&",
                (Declaration("position", "relative"), Declaration("left", f"{_THIRD} + 30px)")),
            ),
        )

    def test_column(self):
        rules = move("-1/2", axis=Axis.COLUMN)
        assert rules[0].declarations[1].property == "top"

    def test_rtl_still_anchors_left(self):
        rules = move("1/3", config=GridConfig(rtl=True))
        assert rules[0].declarations[1].property == "left"

    def test_signed_pair_swaps_two_items(self):
        """+f and -f moves share the same magnitude with opposite signs."""
        forward = move("1/2")[0].declarations[1].value
        back = move("-1/2")[0].declarations[1].value
        assert "(1/2)" in forward
        assert "(-1/2)" in back


class TestContainers:
    def test_flex_row(self):
        assert flex_container() == (
            Rule("&", (Declaration("display", "flex"), Declaration("flex-flow", "row wrap"))),
        )

    def test_flex_column(self):
        rules = flex_container("column")
        assert rules[0].declarations[1] == Declaration("flex-flow", "column nowrap")

    def test_clearfix(self):
        rules = clearfix()
        assert rules[0].selector == "&::before, &::after"
        assert rules[1] == Rule("&::after", (Declaration("clear", "both"),))
