"""API routes for shopping lists and ingredient display."""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel

from recetapp.ingredients.display import build_ingredient_lines
from recetapp.ingredients.parsing import IngredientPayloadError, parse_ingredients_form
from recetapp.ingredients.units import unit_key
from recetapp.logging_config import get_logger
from recetapp.schemas import ShoppingListRequest
from recetapp.shopping.aggregate import aggregate, format_line
from recetapp.shopping.selection import collect_entries, parse_recipe_ids

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1", tags=["shopping-list"])


# Request/Response schemas
class ShoppingListItem(BaseModel):
    """One aggregated shopping-list row."""

    name: str
    unit: str | None = None
    quantity: int | float | None = None
    line: str


class ShoppingListResponse(BaseModel):
    """Aggregated shopping list for the selected recipes."""

    selected_count: int
    items: list[ShoppingListItem]
    lines: list[str]


class IngredientLinesRequest(BaseModel):
    """Ingredients JSON as submitted by the recipe editor."""

    ingredients_json: str | None = None


class IngredientLinesResponse(BaseModel):
    """Display lines for a single recipe's ingredients."""

    lines: list[str]
    total: int


# =============================================================================
# Shopping List Endpoints
# =============================================================================


@router.post("/shopping-list", response_model=ShoppingListResponse)
async def create_shopping_list(
    request: ShoppingListRequest,
    recipes: Annotated[
        str | None, Query(description="Comma-separated ids of the selected recipes")
    ] = None,
) -> ShoppingListResponse:
    """
    Build a shopping list from the selected recipes.

    An empty or missing selection returns an empty list.
    """
    recipe_ids = parse_recipe_ids(recipes)
    entries = collect_entries(request.recipes, recipe_ids)
    aggregated = aggregate(entries)

    items = [
        ShoppingListItem(
            name=line.name,
            unit=unit_key(line.unit) or None,
            quantity=line.quantity,
            line=format_line(line),
        )
        for line in aggregated
    ]

    logger.info(
        f"Built shopping list: {len(recipe_ids)} recipes selected, "
        f"{len(entries)} entries, {len(items)} items"
    )

    return ShoppingListResponse(
        selected_count=len(recipe_ids),
        items=items,
        lines=[item.line for item in items],
    )


# =============================================================================
# Ingredient Endpoints
# =============================================================================


@router.post("/ingredients/lines", response_model=IngredientLinesResponse)
async def ingredient_lines(request: IngredientLinesRequest) -> IngredientLinesResponse:
    """Format editor-submitted ingredients in position order."""
    try:
        entries = parse_ingredients_form(request.ingredients_json)
    except IngredientPayloadError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    lines = build_ingredient_lines(entries)
    return IngredientLinesResponse(lines=lines, total=len(lines))
