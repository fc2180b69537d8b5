"""Tests for expressions.types: Gutter, Declaration, Axis."""

from decimal import Decimal

import pytest

from fracgrid.errors import InvalidArgument, MalformedNumber
from fracgrid.expressions.types import Axis, Declaration, Gutter
from fracgrid.parser.numeric import NumericLiteral
from fracgrid.units.types import Unit


class TestGutterParse:
    def test_string(self):
        g = Gutter.parse("30px")
        assert g.literal == NumericLiteral(Decimal(30), Unit.PX)
        assert str(g) == "30px"
        assert not g.is_zero

    def test_zero_int(self):
        g = Gutter.parse(0)
        assert g.is_zero
        assert str(g) == "0"

    def test_zero_with_unit_renders_bare_zero(self):
        assert str(Gutter.parse("0px")) == "0"

    def test_float(self):
        assert Gutter.parse(1.5).literal.magnitude == Decimal("1.5")

    def test_gutter_passes_through(self):
        g = Gutter.parse("1em")
        assert Gutter.parse(g) is g

    def test_numeric_literal(self):
        lit = NumericLiteral(Decimal(2), Unit.REM)
        assert Gutter.parse(lit).literal is lit

    def test_zero_factory(self):
        assert Gutter.zero().is_zero

    def test_negative_rejected(self):
        with pytest.raises(ValueError, match="must not be negative"):
            Gutter.parse("-10px")

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_rejected(self, value):
        with pytest.raises(ValueError, match="must be a finite number"):
            Gutter.parse(value)

    def test_non_finite_literal_rejected(self):
        with pytest.raises(ValueError, match="must be a finite number"):
            Gutter(NumericLiteral(Decimal("NaN")))

    def test_malformed_string(self):
        with pytest.raises(MalformedNumber):
            Gutter.parse("wide")

    def test_bool_rejected(self):
        with pytest.raises(InvalidArgument):
            Gutter.parse(True)

    def test_none_rejected(self):
        with pytest.raises(InvalidArgument):
            Gutter.parse(None)


class TestDeclaration:
    def test_str(self):
        assert str(Declaration("width", "100%")) == "width: 100%"

    def test_important(self):
        assert str(Declaration("margin-left", "0", important=True)) == "margin-left: 0 !important"


class TestAxis:
    def test_values(self):
        assert Axis.ROW.value == "row"
        assert Axis.COLUMN.value == "column"

    def test_is_str(self):
        assert isinstance(Axis.ROW, str)
