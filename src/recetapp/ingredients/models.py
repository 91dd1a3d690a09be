"""Ingredient data shapes shared by parsing, display and shopping-list code."""

from dataclasses import dataclass

from recetapp.ingredients.units import IngredientUnit

Quantity = int | float


@dataclass(frozen=True)
class IngredientEntry:
    """One ingredient line belonging to one recipe."""

    name: str
    quantity: Quantity | None = None
    unit: IngredientUnit | str | None = None
    is_optional: bool = False
    position: int | float = 0  # ordering hint within the source recipe


@dataclass
class AggregatedLine:
    """One merged shopping-list row."""

    name: str
    unit: IngredientUnit | str | None = None
    quantity: Quantity | None = None
