"""SQLite storage for reviewed recipe ingredients."""

from .recipe_ingredients import RecipeIngredientsDB
from .schema import ensure_schema

__all__ = [
    "RecipeIngredientsDB",
    "ensure_schema",
]
