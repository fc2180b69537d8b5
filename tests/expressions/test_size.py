"""Tests for expressions.size: deferred width/height formulas."""

from __future__ import annotations

import re
import warnings
from fractions import Fraction

import pytest

from fracgrid.expressions.size import FractionOverflowWarning, build_size, size_formula
from fracgrid.expressions.types import Gutter, SizeExpression
from fracgrid.parser.fraction import parse_fraction

_GUTTER = Gutter.parse("30px")

_GUTTERED = re.compile(
    r"calc\(([\d.]+)% \* \(([\d.]+)/([\d.]+)\) - \(([\d.]+)px - \4px \* \(\2/\3\)\)\)"
)
_GUTTERLESS = re.compile(r"calc\(([\d.]+)% \* \(([\d.]+)/([\d.]+)\)\)")


def _evaluate(formula: str, container_px: float) -> float:
    """Substitute a concrete container width into a px/% calc() formula."""
    container = Fraction(str(container_px))
    match = _GUTTERED.fullmatch(formula)
    if match:
        rounder, numerator, denominator, gutter = map(Fraction, match.groups())
        share = numerator / denominator
        return float(rounder / 100 * container * share - (gutter - gutter * share))
    match = _GUTTERLESS.fullmatch(formula)
    assert match, f"unrecognized formula: {formula}"
    rounder, numerator, denominator = map(Fraction, match.groups())
    return float(rounder / 100 * container * (numerator / denominator))


class TestBuildSize:
    def test_guttered_third(self):
        expr = build_size(parse_fraction("1/3"), _GUTTER)
        assert expr.formula == "calc(99.99% * (1/3) - (30px - 30px * (1/3)))"

    def test_gutterless_third(self):
        expr = build_size(parse_fraction("1/3"), Gutter.zero())
        assert expr.formula == "calc(99.999999% * (1/3))"

    def test_zero_px_gutter_is_gutterless(self):
        expr = build_size(parse_fraction("1/2"), Gutter.parse("0px"))
        assert expr.formula == "calc(99.999999% * (1/2))"

    def test_gutter_unit_is_preserved(self):
        expr = build_size(parse_fraction("2/5"), Gutter.parse("1.5rem"))
        assert expr.formula == "calc(99.99% * (2/5) - (1.5rem - 1.5rem * (2/5)))"

    def test_returns_size_expression(self):
        expr = build_size(parse_fraction("1/2"), _GUTTER)
        assert isinstance(expr, SizeExpression)
        assert str(expr) == expr.formula

    def test_formula_is_not_evaluated(self):
        expr = build_size(parse_fraction("1/4"), _GUTTER)
        assert expr.formula.startswith("calc(")
        assert "%" in expr.formula

    def test_long_literal_is_not_truncated(self):
        expr = build_size(parse_fraction("1/3.00000000000000000000000000001"), Gutter.zero())
        assert expr.formula == "calc(99.999999% * (1/3.00000000000000000000000000001))"

    def test_size_formula_has_no_calc_wrapper(self):
        assert size_formula(parse_fraction("1/3"), Gutter.zero()) == "99.999999% * (1/3)"


class TestRowFillsContainer:
    """N items of 1/N plus N - 1 gutters fill the row up to the 99.99% rounder."""

    @pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 7, 12])
    @pytest.mark.parametrize("container", [320.0, 960.0, 1440.0])
    def test_row_sum(self, n, container):
        size = _evaluate(build_size(parse_fraction(f"1/{n}"), _GUTTER).formula, container)
        total = n * size + (n - 1) * 30
        assert total == pytest.approx(container * 0.9999)
        assert total < container

    def test_mixed_fractions_fill_row(self):
        """A 1/3 and a 2/3 item with one gutter between them fill the row."""
        container = 1000.0
        third = _evaluate(build_size(parse_fraction("1/3"), _GUTTER).formula, container)
        two_thirds = _evaluate(build_size(parse_fraction("2/3"), _GUTTER).formula, container)
        assert third + two_thirds + 30 == pytest.approx(container * 0.9999)

    def test_gutterless_row_sum(self):
        container = 1000.0
        size = _evaluate(build_size(parse_fraction("1/4"), Gutter.zero()).formula, container)
        assert 4 * size == pytest.approx(container * 0.99999999)


class TestOverflowWarning:
    def test_fraction_above_one_warns(self):
        with pytest.warns(FractionOverflowWarning, match="4/3"):
            expr = build_size(parse_fraction("4/3"), _GUTTER)
        assert expr.formula == "calc(99.99% * (4/3) - (30px - 30px * (4/3)))"

    def test_whole_fraction_does_not_warn(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            build_size(parse_fraction("3/3"), _GUTTER)

    def test_warning_is_user_warning(self):
        assert issubclass(FractionOverflowWarning, UserWarning)
