"""Pytest configuration and shared fixtures."""

import json

import pytest

from recetapp.ingredients.models import IngredientEntry
from recetapp.ingredients.units import IngredientUnit
from recetapp.schemas import RecipePayload

# =============================================================================
# Ingredient Entry Fixtures
# =============================================================================


@pytest.fixture
def pancake_entries():
    """Entries for a pancake recipe."""
    return [
        IngredientEntry(name="Flour", quantity=200, unit=IngredientUnit.G, position=0),
        IngredientEntry(name="Milk", quantity=300, unit=IngredientUnit.ML, position=1),
        IngredientEntry(name="Eggs", quantity=2, position=2),
        IngredientEntry(name="Salt", unit=IngredientUnit.PINCH, position=3),
        IngredientEntry(
            name="Maple syrup",
            quantity=2,
            unit=IngredientUnit.TBSP,
            is_optional=True,
            position=4,
        ),
    ]


@pytest.fixture
def bread_entries():
    """Entries for a bread recipe."""
    return [
        IngredientEntry(name="flour ", quantity=500, unit=IngredientUnit.G, position=0),
        IngredientEntry(name="Water", quantity=350, unit=IngredientUnit.ML, position=1),
        IngredientEntry(name="salt", unit=IngredientUnit.PINCH, position=2),
        IngredientEntry(name="Yeast", quantity=7, unit=IngredientUnit.G, position=3),
    ]


# =============================================================================
# Recipe Payload Fixtures
# =============================================================================


@pytest.fixture
def structured_pancakes():
    """Pancake ingredients as stored in the structured column."""
    return [
        {"ingredientName": "Flour", "quantity": 200, "unit": "g", "isOptional": False, "position": 0},
        {"ingredientName": "Milk", "quantity": 300, "unit": "ml", "isOptional": False, "position": 1},
        {"ingredientName": "Eggs", "quantity": 2, "unit": None, "isOptional": False, "position": 2},
        {
            "ingredientName": "Maple syrup",
            "quantity": 2,
            "unit": "tbsp",
            "isOptional": True,
            "position": 3,
        },
    ]


@pytest.fixture
def recipe_records(structured_pancakes):
    """Recipe records covering the three stored ingredient shapes."""
    return [
        {
            "id": "recipe-pancakes",
            "recipe_name": "Pancakes",
            "recipe_ingredients": ["Flour", "Milk", "Eggs"],
            "recipe_ingredients_structured": structured_pancakes,
        },
        {
            "id": "recipe-bread",
            "recipe_name": "Bread",
            "recipe_ingredients": [],
            "recipe_ingredients_structured": json.dumps(
                [
                    {"ingredientName": "flour", "quantity": 500, "unit": "g", "position": 0},
                    {"ingredientName": "Water", "quantity": 350, "unit": "ml", "position": 1},
                ]
            ),
        },
        {
            "id": "recipe-salad",
            "recipe_name": "Salad",
            "recipe_ingredients": ["Lettuce", "Tomato"],
            "recipe_ingredients_structured": None,
        },
    ]


@pytest.fixture
def recipe_payloads(recipe_records):
    """Recipe records validated into RecipePayload models."""
    return [RecipePayload(**record) for record in recipe_records]
