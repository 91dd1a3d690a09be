"""Common data schemas shared by the API and the command line."""

from typing import Any

from pydantic import BaseModel, Field


class RecipePayload(BaseModel):
    """
    Recipe record as supplied by the caller's data layer.

    Ingredient columns are accepted loosely and cleaned up by the parsing
    step, so one malformed item never rejects the whole recipe.
    """

    id: str
    recipe_name: str = ""
    recipe_ingredients: list[str] | None = Field(default_factory=list)
    recipe_ingredients_structured: list[Any] | str | None = Field(
        None, description="Structured ingredients as a list or a JSON-encoded string"
    )


class ShoppingListRequest(BaseModel):
    """Recipes available to pick from."""

    recipes: list[RecipePayload] = Field(default_factory=list)
