"""Build a shopping list from a JSON file of recipes.

The file holds a list of recipe records (or an object with a "recipes" key),
each with an "id" and structured and/or legacy ingredients.

Run with: recetapp-shopping-list recipes.json --recipes id1,id2
Omit --recipes to include every recipe in the file.
"""

import argparse
import json
import sys
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from recetapp.config import settings
from recetapp.logging_config import configure_logging, get_logger
from recetapp.schemas import RecipePayload
from recetapp.shopping.aggregate import build_shopping_list
from recetapp.shopping.selection import collect_entries, parse_recipe_ids

configure_logging(log_level=settings.log_level)
logger = get_logger(__name__)

_recipes_adapter = TypeAdapter(list[RecipePayload])


def load_recipes(path: Path) -> list[RecipePayload]:
    """Load and validate recipe records from a JSON file."""
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("recipes", [])
    return _recipes_adapter.validate_python(data)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Aggregate recipe ingredients into a shopping list")
    parser.add_argument("file", type=Path, help="JSON file with recipe records")
    parser.add_argument(
        "--recipes", "-r", type=str, help="Comma-separated recipe ids (default: all)"
    )

    args = parser.parse_args(argv)

    try:
        recipes = load_recipes(args.file)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        logger.error(f"Could not load recipes from {args.file}: {e}")
        return 1

    if args.recipes is None:
        recipe_ids = [recipe.id for recipe in recipes]
    else:
        recipe_ids = parse_recipe_ids(args.recipes)

    lines = build_shopping_list(collect_entries(recipes, recipe_ids))
    logger.info(f"Shopping list has {len(lines)} items from {len(recipe_ids)} recipes")

    for line in lines:
        print(line)

    return 0


if __name__ == "__main__":
    sys.exit(main())
