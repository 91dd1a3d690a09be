"""Ingredient units, payload parsing and display helpers."""

from recetapp.ingredients.display import (
    build_ingredient_lines,
    format_ingredient,
    format_quantity,
)
from recetapp.ingredients.models import AggregatedLine, IngredientEntry
from recetapp.ingredients.parsing import (
    IngredientPayloadError,
    entries_for_recipe,
    legacy_entries,
    parse_ingredients_form,
    parse_structured_ingredients,
)
from recetapp.ingredients.units import (
    ALL_UNITS,
    UNIT_LABELS,
    IngredientUnit,
    coerce_unit,
    unit_label,
)

__all__ = [
    "ALL_UNITS",
    "AggregatedLine",
    "IngredientEntry",
    "IngredientPayloadError",
    "IngredientUnit",
    "UNIT_LABELS",
    "build_ingredient_lines",
    "coerce_unit",
    "entries_for_recipe",
    "format_ingredient",
    "format_quantity",
    "legacy_entries",
    "parse_ingredients_form",
    "parse_structured_ingredients",
    "unit_label",
]
