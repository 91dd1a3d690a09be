"""Ingredient units, display labels and input coercion."""

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping


class IngredientUnit(str, Enum):
    """Units an ingredient quantity can be measured in (value = storage code)."""

    # Volume
    ML = "ml"
    L = "l"
    TSP = "tsp"
    TBSP = "tbsp"
    CUP_METRIC = "cup_metric"
    CUP_US = "cup_us"
    FL_OZ = "fl_oz"
    PT = "pt"
    QT = "qt"
    GAL = "gal"
    # Small amounts
    PINCH = "pinch"
    DASH = "dash"
    DROP = "drop"
    SPLASH = "splash"
    # Weight
    G = "g"
    KG = "kg"
    OZ = "oz"
    LB = "lb"
    # Length
    MM = "mm"
    CM = "cm"
    IN = "in"
    # Temperature
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"
    # Count
    PIECE = "piece"

    def __str__(self) -> str:
        return self.value


# =============================================================================
# Display Labels
# =============================================================================

UNIT_LABELS: Mapping[IngredientUnit, str] = MappingProxyType(
    {
        IngredientUnit.ML: "mL",
        IngredientUnit.L: "L",
        IngredientUnit.TSP: "tsp",
        IngredientUnit.TBSP: "Tbsp",
        IngredientUnit.CUP_METRIC: "cup (metric)",
        IngredientUnit.CUP_US: "cup (US)",
        IngredientUnit.FL_OZ: "fl oz",
        IngredientUnit.PT: "pt",
        IngredientUnit.QT: "qt",
        IngredientUnit.GAL: "gal",
        IngredientUnit.PINCH: "pinch",
        IngredientUnit.DASH: "dash",
        IngredientUnit.DROP: "drop",
        IngredientUnit.SPLASH: "splash",
        IngredientUnit.G: "g",
        IngredientUnit.KG: "kg",
        IngredientUnit.OZ: "oz",
        IngredientUnit.LB: "lb",
        IngredientUnit.MM: "mm",
        IngredientUnit.CM: "cm",
        IngredientUnit.IN: "in",
        IngredientUnit.CELSIUS: "°C",
        IngredientUnit.FAHRENHEIT: "°F",
        IngredientUnit.PIECE: "piece",
    }
)

ALL_UNITS: tuple[IngredientUnit, ...] = tuple(UNIT_LABELS)


# =============================================================================
# Input Aliases (lowercase input -> unit)
# =============================================================================

UNIT_ALIASES: Mapping[str, IngredientUnit] = MappingProxyType(
    {
        "milliliter": IngredientUnit.ML,
        "milliliters": IngredientUnit.ML,
        "millilitre": IngredientUnit.ML,
        "millilitres": IngredientUnit.ML,
        "liter": IngredientUnit.L,
        "liters": IngredientUnit.L,
        "litre": IngredientUnit.L,
        "litres": IngredientUnit.L,
        "teaspoon": IngredientUnit.TSP,
        "teaspoons": IngredientUnit.TSP,
        "tablespoon": IngredientUnit.TBSP,
        "tablespoons": IngredientUnit.TBSP,
        "tbs": IngredientUnit.TBSP,
        "cup": IngredientUnit.CUP_US,
        "cups": IngredientUnit.CUP_US,
        "fl oz": IngredientUnit.FL_OZ,
        "fluid ounce": IngredientUnit.FL_OZ,
        "fluid ounces": IngredientUnit.FL_OZ,
        "pint": IngredientUnit.PT,
        "pints": IngredientUnit.PT,
        "quart": IngredientUnit.QT,
        "quarts": IngredientUnit.QT,
        "gallon": IngredientUnit.GAL,
        "gallons": IngredientUnit.GAL,
        "pinches": IngredientUnit.PINCH,
        "dashes": IngredientUnit.DASH,
        "drops": IngredientUnit.DROP,
        "gram": IngredientUnit.G,
        "grams": IngredientUnit.G,
        "kilogram": IngredientUnit.KG,
        "kilograms": IngredientUnit.KG,
        "ounce": IngredientUnit.OZ,
        "ounces": IngredientUnit.OZ,
        "pound": IngredientUnit.LB,
        "pounds": IngredientUnit.LB,
        "lbs": IngredientUnit.LB,
        "pieces": IngredientUnit.PIECE,
        "pc": IngredientUnit.PIECE,
        "pcs": IngredientUnit.PIECE,
    }
)

_UNITS_BY_CODE: dict[str, IngredientUnit] = {unit.value: unit for unit in IngredientUnit}


def coerce_unit(raw: Any) -> IngredientUnit | str | None:
    """
    Coerce a raw unit value into an IngredientUnit.

    Known codes and aliases are matched case-insensitively. Unknown units are
    not rejected: the stripped string is returned as-is so it still groups and
    displays. Missing or blank units become None.
    """
    if raw is None:
        return None
    if isinstance(raw, IngredientUnit):
        return raw

    text = str(raw).strip()
    if not text:
        return None

    lowered = text.lower()
    if lowered in _UNITS_BY_CODE:
        return _UNITS_BY_CODE[lowered]
    if lowered in UNIT_ALIASES:
        return UNIT_ALIASES[lowered]

    return text


def unit_label(unit: IngredientUnit | str | None) -> str | None:
    """Short display label for a unit; unknown units are shown verbatim."""
    unit = coerce_unit(unit)
    if unit is None:
        return None
    if isinstance(unit, IngredientUnit):
        return UNIT_LABELS.get(unit, unit.value)
    return unit


def unit_key(unit: IngredientUnit | str | None) -> str:
    """Unit component of a grouping key ("" when unitless). Aliases share their unit's key."""
    unit = coerce_unit(unit)
    if unit is None:
        return ""
    if isinstance(unit, IngredientUnit):
        return unit.value
    return unit
