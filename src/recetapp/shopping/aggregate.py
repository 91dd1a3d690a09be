"""Shopping list aggregation across recipes."""

import unicodedata
from collections.abc import Iterable

from recetapp.ingredients.display import format_quantity
from recetapp.ingredients.models import AggregatedLine, IngredientEntry
from recetapp.ingredients.units import unit_key, unit_label
from recetapp.logging_config import get_logger

logger = get_logger(__name__)


def grouping_key(entry: IngredientEntry) -> str:
    """Key deciding which entries merge: normalized name plus unit."""
    return f"{entry.name.strip().lower()}|{unit_key(entry.unit)}"


def display_sort_key(name: str) -> str:
    """
    Collation key for display names.

    Case- and accent-insensitive, so "apple", "Apple" and "Äpple" sort
    together.
    """
    decomposed = unicodedata.normalize("NFKD", name)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def aggregate(entries: Iterable[IngredientEntry]) -> list[AggregatedLine]:
    """
    Merge ingredient entries from any number of recipes into shopping-list lines.

    - Optional entries are dropped before grouping
    - Entries group by (trimmed, lower-cased name, unit); different units never merge
    - Quantities in a group are summed; a missing quantity makes the group's
      quantity None for good, later quantified entries do not revive it
    - Display name and unit come from the first entry seen for each group

    Malformed entries are not rejected: a blank name groups under the empty
    key and negative quantities are summed like any other.

    Returns:
        Lines sorted by display name, case-insensitively ascending.
    """
    groups: dict[str, AggregatedLine] = {}

    for entry in entries:
        if entry.is_optional:
            continue

        key = grouping_key(entry)
        existing = groups.get(key)

        if existing is None:
            groups[key] = AggregatedLine(
                name=entry.name.strip(),
                unit=entry.unit,
                quantity=entry.quantity,
            )
        elif entry.quantity is None:
            existing.quantity = None
        elif existing.quantity is not None:
            existing.quantity += entry.quantity

    return sorted(groups.values(), key=lambda line: display_sort_key(line.name))


def format_line(line: AggregatedLine) -> str:
    """
    Format an aggregated line for display.

    Examples:
        (Flour, 200, g)   -> "200 g Flour"
        (Eggs, 3, None)   -> "3 Eggs"
        (Salt, None, tsp) -> "Salt"
    """
    if line.quantity is None:
        return line.name

    label = unit_label(line.unit)
    if not label:
        return f"{format_quantity(line.quantity)} {line.name}"

    return f"{format_quantity(line.quantity)} {label} {line.name}"


def build_shopping_list(entries: Iterable[IngredientEntry]) -> list[str]:
    """Aggregate entries and format each resulting line."""
    entries = list(entries)
    lines = aggregate(entries)
    logger.debug(f"Aggregated {len(entries)} ingredient entries into {len(lines)} lines")
    return [format_line(line) for line in lines]
