"""API routers for the recetapp application."""

from recetapp.routers.shopping_list import router as shopping_list_router

__all__ = [
    "shopping_list_router",
]
