"""Recipe selection for shopping lists."""

from collections.abc import Iterable
from typing import Any

from recetapp.ingredients.models import IngredientEntry
from recetapp.ingredients.parsing import entries_for_recipe
from recetapp.logging_config import get_logger

logger = get_logger(__name__)


def parse_recipe_ids(raw: str | None) -> list[str]:
    """
    Parse a comma-separated recipe id list.

    An empty or missing value means "no selection" and yields [].
    """
    if not raw or not raw.strip():
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


def collect_entries(
    recipes: Iterable[Any],
    recipe_ids: Iterable[str],
) -> list[IngredientEntry]:
    """
    Pool the ingredient entries of the selected recipes.

    Args:
        recipes: Recipe records exposing ``id``, ``recipe_ingredients_structured``
            and ``recipe_ingredients``.
        recipe_ids: Ids of the selected recipes. Unknown ids are ignored.

    Returns:
        Flat list of entries in recipe order, ready for aggregation.
    """
    selected = set(recipe_ids)
    if not selected:
        return []

    pooled: list[IngredientEntry] = []
    matched = 0

    for recipe in recipes:
        if recipe.id not in selected:
            continue
        matched += 1
        pooled.extend(
            entries_for_recipe(
                recipe.recipe_ingredients_structured,
                recipe.recipe_ingredients,
            )
        )

    if matched < len(selected):
        logger.info(f"{len(selected) - matched} selected recipe ids did not match any recipe")

    return pooled
