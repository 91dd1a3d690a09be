"""Display helpers for a single recipe's ingredient list."""

from collections.abc import Iterable

from recetapp.ingredients.models import IngredientEntry, Quantity
from recetapp.ingredients.units import unit_label


def format_quantity(quantity: Quantity) -> str:
    """Render a quantity in its natural numeric form (200.0 -> "200", 0.5 -> "0.5")."""
    if isinstance(quantity, float) and quantity.is_integer():
        return str(int(quantity))
    return str(quantity)


def format_ingredient(entry: IngredientEntry) -> str:
    """Turn a single ingredient into a human-readable label."""
    if entry.quantity is None:
        base = entry.name
    else:
        label = unit_label(entry.unit)
        qty = format_quantity(entry.quantity)
        base = f"{qty} {label} {entry.name}" if label else f"{qty} {entry.name}"

    if entry.is_optional:
        return f"{base} (optional)"
    return base


def build_ingredient_lines(entries: Iterable[IngredientEntry]) -> list[str]:
    """Format a recipe's ingredients in position order."""
    ordered = sorted(entries, key=lambda entry: entry.position)
    return [format_ingredient(entry) for entry in ordered]
