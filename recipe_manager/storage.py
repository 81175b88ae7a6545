from __future__ import annotations

import itertools
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Protocol

from .models import Ingredient, Recipe, RecipeInfo


class RecipeRepository(Protocol):
    """Protocol describing the behaviour required by the command layer."""

    def list_recipes(self) -> Iterable[Recipe]:
        """Return an iterable of stored recipes ordered oldest first."""

    def get_recipe(self, recipe_id: str) -> Recipe:
        """Return a single recipe or raise :class:`KeyError` if missing."""

    def add_recipe(self, info: RecipeInfo) -> Recipe:
        """Persist a new recipe without ingredients or steps and return it."""

    def update_recipe(
        self,
        recipe_id: str,
        *,
        info: RecipeInfo | None = None,
        ingredients: List[Ingredient] | None = None,
        steps: List[str] | None = None,
    ) -> Recipe:
        """Replace the given parts of an existing recipe and return the result."""

    def delete_recipe(self, recipe_id: str) -> None:
        """Remove a recipe or raise :class:`KeyError` if missing."""


class InMemoryRecipeStorage(RecipeRepository):
    """Process-local storage.

    Identifiers are sequential integers rendered as strings so they are easy
    to type at a prompt.
    """

    def __init__(self) -> None:
        self._recipes: dict[str, Recipe] = {}
        self._ids = itertools.count(1)

    def list_recipes(self) -> Iterable[Recipe]:
        return list(self._recipes.values())

    def get_recipe(self, recipe_id: str) -> Recipe:
        try:
            return self._recipes[str(recipe_id)]
        except KeyError:
            raise KeyError(f"Recipe '{recipe_id}' does not exist.") from None

    def add_recipe(self, info: RecipeInfo) -> Recipe:
        recipe = Recipe(
            id=str(next(self._ids)),
            name=info.name,
            cooking_time=info.cooking_time,
            servings=info.servings,
            created_at=datetime.now(timezone.utc),
        )
        self._recipes[recipe.id] = recipe
        return recipe

    def update_recipe(
        self,
        recipe_id: str,
        *,
        info: Optional[RecipeInfo] = None,
        ingredients: Optional[List[Ingredient]] = None,
        steps: Optional[List[str]] = None,
    ) -> Recipe:
        recipe = self.get_recipe(recipe_id)
        if info is not None:
            recipe.name = info.name
            recipe.cooking_time = info.cooking_time
            recipe.servings = info.servings
        if ingredients is not None:
            recipe.ingredients = list(ingredients)
        if steps is not None:
            recipe.steps = list(steps)
        return recipe

    def delete_recipe(self, recipe_id: str) -> None:
        self.get_recipe(recipe_id)
        del self._recipes[str(recipe_id)]


__all__ = ["InMemoryRecipeStorage", "RecipeRepository"]
