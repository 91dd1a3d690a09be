"""Shopping list aggregation and recipe selection."""

from recetapp.shopping.aggregate import (
    aggregate,
    build_shopping_list,
    format_line,
)
from recetapp.shopping.selection import (
    collect_entries,
    parse_recipe_ids,
)

__all__ = [
    "aggregate",
    "build_shopping_list",
    "collect_entries",
    "format_line",
    "parse_recipe_ids",
]
