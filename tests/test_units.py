"""Unit tests for ingredient units and labels."""

import pytest

from recetapp.ingredients.units import (
    ALL_UNITS,
    UNIT_LABELS,
    IngredientUnit,
    coerce_unit,
    unit_key,
    unit_label,
)


class TestUnitLabels:
    """Tests for the unit label table."""

    def test_every_unit_has_a_label(self):
        """Test that the label table covers the whole enum."""
        assert set(UNIT_LABELS) == set(IngredientUnit)
        assert len(ALL_UNITS) == len(IngredientUnit)

    def test_labels_are_immutable(self):
        """Test that the label table cannot be changed at runtime."""
        with pytest.raises(TypeError):
            UNIT_LABELS[IngredientUnit.G] = "grams"  # type: ignore[index]

    def test_selected_labels(self):
        """Test labels that differ from their codes."""
        assert UNIT_LABELS[IngredientUnit.ML] == "mL"
        assert UNIT_LABELS[IngredientUnit.TBSP] == "Tbsp"
        assert UNIT_LABELS[IngredientUnit.CUP_METRIC] == "cup (metric)"
        assert UNIT_LABELS[IngredientUnit.CELSIUS] == "°C"


class TestCoerceUnit:
    """Tests for coerce_unit function."""

    def test_codes(self):
        """Test coercing storage codes."""
        assert coerce_unit("g") is IngredientUnit.G
        assert coerce_unit("fl_oz") is IngredientUnit.FL_OZ

    def test_case_and_whitespace(self):
        """Test that codes match case-insensitively after trimming."""
        assert coerce_unit(" KG ") is IngredientUnit.KG
        assert coerce_unit("Tbsp") is IngredientUnit.TBSP

    def test_aliases(self):
        """Test coercing long-form spellings."""
        assert coerce_unit("gram") is IngredientUnit.G
        assert coerce_unit("Tablespoons") is IngredientUnit.TBSP
        assert coerce_unit("cup") is IngredientUnit.CUP_US
        assert coerce_unit("liter") is IngredientUnit.L

    def test_enum_passthrough(self):
        """Test that enum members are returned unchanged."""
        assert coerce_unit(IngredientUnit.PIECE) is IngredientUnit.PIECE

    def test_missing(self):
        """Test that missing or blank units become None."""
        assert coerce_unit(None) is None
        assert coerce_unit("") is None
        assert coerce_unit("   ") is None

    def test_unknown_unit_flows_through(self):
        """Test that unrecognized units are kept as stripped strings."""
        assert coerce_unit(" handful ") == "handful"


class TestUnitHelpers:
    """Tests for unit_label and unit_key."""

    def test_label(self):
        """Test label lookup for known, aliased, unknown and missing units."""
        assert unit_label(IngredientUnit.G) == "g"
        assert unit_label("milliliters") == "mL"
        assert unit_label("handful") == "handful"
        assert unit_label(None) is None

    def test_key(self):
        """Test grouping key component for units."""
        assert unit_key(IngredientUnit.TSP) == "tsp"
        assert unit_key("teaspoon") == "tsp"
        assert unit_key(None) == ""
        assert unit_key("") == ""
        assert unit_key("handful") == "handful"

    def test_enum_str(self):
        """Test that units print as their storage code."""
        assert str(IngredientUnit.CUP_US) == "cup_us"
