"""Adapt stored and submitted ingredient payloads into IngredientEntry values."""

import json
import math
from collections.abc import Iterable, Mapping
from typing import Any

from recetapp.ingredients.models import IngredientEntry, Quantity
from recetapp.ingredients.units import coerce_unit
from recetapp.logging_config import get_logger

logger = get_logger(__name__)


class IngredientPayloadError(ValueError):
    """Raised when a submitted ingredients payload cannot be decoded."""


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_finite_number(value: Any) -> bool:
    return _is_number(value) and math.isfinite(value)


def _load_json_list(raw: str) -> list[Any] | None:
    """Decode a JSON string, returning None unless it holds a list."""
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning(f"Failed to parse structured ingredients JSON: {e}")
        return None

    if not isinstance(parsed, list):
        logger.warning(
            f"Structured ingredients JSON is a {type(parsed).__name__}, expected a list"
        )
        return None

    return parsed


# =============================================================================
# Stored Payloads
# =============================================================================


def normalize_entry(raw: Any) -> IngredientEntry | None:
    """
    Normalize one stored ingredient object.

    Returns None for items that are not objects or have no usable name.
    Quantities must already be finite numbers (JSON allows NaN and Infinity);
    anything else is treated as missing.
    """
    if not isinstance(raw, Mapping):
        return None

    name = raw.get("ingredientName", raw.get("name"))
    if not isinstance(name, str) or not name.strip():
        return None

    quantity = raw.get("quantity")
    position = raw.get("position")

    return IngredientEntry(
        name=name.strip(),
        quantity=quantity if _is_finite_number(quantity) else None,
        unit=coerce_unit(raw.get("unit")),
        is_optional=bool(raw.get("isOptional", False)),
        position=position if _is_finite_number(position) else 0,
    )


def parse_structured_ingredients(raw: Any) -> list[IngredientEntry]:
    """
    Parse a structured ingredients column into entries.

    Handles:
    - an already decoded list of ingredient objects
    - a JSON string encoding such a list
    - empty values (None, "", [])

    Undecodable input yields an empty list rather than an error.
    """
    if not raw:
        return []

    if isinstance(raw, str):
        items = _load_json_list(raw)
        if items is None:
            return []
    elif isinstance(raw, list):
        items = raw
    else:
        logger.warning(f"Unsupported structured ingredients type: {type(raw).__name__}")
        return []

    entries = []
    for item in items:
        entry = normalize_entry(item)
        if entry is not None:
            entries.append(entry)

    return entries


def legacy_entries(names: Iterable[str] | None) -> list[IngredientEntry]:
    """Convert a legacy list of bare ingredient names into entries."""
    return [
        IngredientEntry(name=name, position=index)
        for index, name in enumerate(names or [])
    ]


def entries_for_recipe(
    structured: Any,
    legacy_names: Iterable[str] | None = None,
) -> list[IngredientEntry]:
    """
    Get a recipe's ingredient entries.

    Prefers the structured payload and falls back to the legacy name list
    when the structured payload is missing or yields nothing.
    """
    entries = parse_structured_ingredients(structured)
    if entries:
        return entries
    return legacy_entries(legacy_names)


# =============================================================================
# Submitted Form Payloads
# =============================================================================


def _parse_form_quantity(value: Any) -> Quantity | None:
    """Accept numbers and numeric strings; anything non-finite is missing."""
    if value is None or value == "":
        return None

    if _is_number(value):
        number = value
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
        if number.is_integer() and "." not in value:
            number = int(number)
    else:
        return None

    if not math.isfinite(number):
        return None
    return number


def parse_ingredients_form(raw: str | None) -> list[IngredientEntry]:
    """
    Parse the ingredients JSON submitted by the recipe editor.

    More lenient than the stored-payload parser: quantities may arrive as
    strings ("1.5"), and positions default to the item's index.

    Raises:
        IngredientPayloadError: If the payload is not a JSON list.
    """
    if not isinstance(raw, str) or not raw.strip():
        return []

    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning(f"Rejected ingredients payload: {e}")
        raise IngredientPayloadError("Ingredients data is invalid.") from e

    if not isinstance(parsed, list):
        logger.warning(f"Rejected ingredients payload of type {type(parsed).__name__}")
        raise IngredientPayloadError("Ingredients data is invalid.")

    cleaned = []
    for index, item in enumerate(parsed):
        if not isinstance(item, Mapping):
            continue

        name = str(item.get("ingredientName") or "").strip()
        if not name:
            continue

        position = item.get("position")
        cleaned.append(
            IngredientEntry(
                name=name,
                quantity=_parse_form_quantity(item.get("quantity")),
                unit=coerce_unit(item.get("unit")),
                is_optional=bool(item.get("isOptional", False)),
                position=position if _is_finite_number(position) else index,
            )
        )

    return cleaned
