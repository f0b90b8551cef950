"""Tests for the unit whitelist and quantity conversion."""

import pytest

from larder.ingredients.units import (
    QUANTITY_PATTERN,
    UNIT_WHITELIST,
    is_known_unit,
    parse_quantity,
)


class TestParseQuantity:
    def test_integer(self):
        assert parse_quantity("3") == 3.0

    def test_decimal(self):
        assert parse_quantity("1.25") == 1.25

    def test_fraction(self):
        assert parse_quantity("1/2") == 0.5

    def test_improper_fraction(self):
        assert parse_quantity("3/2") == 1.5

    def test_zero_denominator(self):
        assert parse_quantity("1/0") is None

    def test_non_numeric_side(self):
        assert parse_quantity("a/2") is None
        assert parse_quantity("1/") is None

    def test_empty(self):
        assert parse_quantity("") is None

    def test_not_a_number(self):
        assert parse_quantity("some") is None


class TestUnitWhitelist:
    def test_is_frozen(self):
        assert isinstance(UNIT_WHITELIST, frozenset)

    def test_contents(self):
        assert len(UNIT_WHITELIST) == 25
        assert {"tsp", "tbsp", "cup", "g", "l", "packages"} <= UNIT_WHITELIST

    @pytest.mark.parametrize("word", ["tsp", "TBSP", "Cups", "g", "Cloves"])
    def test_known_units(self, word):
        assert is_known_unit(word) is True

    @pytest.mark.parametrize("word", ["teaspoon", "gram", "liter", "", "eggs"])
    def test_unknown_units(self, word):
        assert is_known_unit(word) is False


class TestQuantityPattern:
    def test_matches_decimal_with_space(self):
        m = QUANTITY_PATTERN.match("1.5 cups")
        assert m is not None
        assert m.group(1) == "1.5"

    def test_matches_fraction(self):
        m = QUANTITY_PATTERN.match("3/4 cup")
        assert m.group(1) == "3/4"

    def test_requires_whitespace(self):
        assert QUANTITY_PATTERN.match("2cups") is None
        assert QUANTITY_PATTERN.match("2") is None

    def test_anchored_at_start(self):
        assert QUANTITY_PATTERN.match("about 2 cups") is None
