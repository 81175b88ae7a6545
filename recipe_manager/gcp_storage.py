from __future__ import annotations

import os
from datetime import datetime
from typing import Iterable, List, Optional

from google.cloud import firestore

from .models import DEFAULT_SERVINGS, Ingredient, Recipe, RecipeInfo
from .storage import RecipeRepository


def _parse_ingredients(raw: object) -> List[Ingredient]:
    if not isinstance(raw, list):
        return []
    return [Ingredient.from_dict(item) for item in raw if isinstance(item, dict)]


class FirestoreRecipeStorage(RecipeRepository):
    """GCP backed recipe storage using Firestore."""

    def __init__(
        self,
        *,
        project: Optional[str] = None,
        collection_name: str = "recipes",
        client: Optional[firestore.Client] = None,
    ) -> None:
        self._firestore_client = client or firestore.Client(project=project)
        self._collection = self._firestore_client.collection(collection_name)

    @classmethod
    def from_env(cls) -> "FirestoreRecipeStorage":
        """Build a storage instance from environment variables."""

        project = os.environ.get("GCP_PROJECT")
        collection_name = os.environ.get("RECIPES_COLLECTION", "recipes")
        return cls(project=project, collection_name=collection_name)

    def _existing_snapshot(self, doc_ref):
        snapshot = doc_ref.get()
        if not snapshot.exists:
            raise KeyError(f"Recipe '{doc_ref.id}' does not exist.")
        return snapshot

    def list_recipes(self) -> Iterable[Recipe]:
        query = self._collection.order_by("created_at", direction=firestore.Query.ASCENDING)
        for doc in query.stream():
            data = doc.to_dict() or {}
            yield self._doc_to_recipe(doc.id, data)

    def get_recipe(self, recipe_id: str) -> Recipe:
        snapshot = self._existing_snapshot(self._collection.document(recipe_id))
        return self._doc_to_recipe(snapshot.id, snapshot.to_dict() or {})

    def add_recipe(self, info: RecipeInfo) -> Recipe:
        doc = {
            "name": info.name,
            "cooking_time": info.cooking_time,
            "servings": info.servings,
            "ingredients": [],
            "steps": [],
            "created_at": firestore.SERVER_TIMESTAMP,
        }

        doc_ref = self._collection.document()
        doc_ref.set(doc)

        snapshot = doc_ref.get()
        data = snapshot.to_dict() or {}
        return self._doc_to_recipe(snapshot.id, data)

    def update_recipe(
        self,
        recipe_id: str,
        *,
        info: RecipeInfo | None = None,
        ingredients: List[Ingredient] | None = None,
        steps: List[str] | None = None,
    ) -> Recipe:
        doc_ref = self._collection.document(recipe_id)
        snapshot = self._existing_snapshot(doc_ref)

        update_doc: dict = {}
        if info is not None:
            update_doc.update(
                name=info.name,
                cooking_time=info.cooking_time,
                servings=info.servings,
            )
        if ingredients is not None:
            update_doc["ingredients"] = [ingredient.to_dict() for ingredient in ingredients]
        if steps is not None:
            update_doc["steps"] = list(steps)

        if update_doc:
            doc_ref.update(update_doc)
            snapshot = doc_ref.get()

        data = snapshot.to_dict() or {}
        return self._doc_to_recipe(snapshot.id, data)

    def delete_recipe(self, recipe_id: str) -> None:
        doc_ref = self._collection.document(recipe_id)
        self._existing_snapshot(doc_ref)
        doc_ref.delete()

    def _doc_to_recipe(self, doc_id: str, data: dict) -> Recipe:
        created_at = data.get("created_at")
        if isinstance(created_at, datetime):
            timestamp = created_at
        else:
            timestamp = None

        steps = data.get("steps")
        if not isinstance(steps, list):
            steps = []

        return Recipe(
            id=doc_id,
            name=data.get("name", ""),
            cooking_time=data.get("cooking_time", 0),
            servings=data.get("servings", DEFAULT_SERVINGS),
            created_at=timestamp,
            ingredients=_parse_ingredients(data.get("ingredients")),
            steps=[str(step) for step in steps],
        )


__all__ = ["FirestoreRecipeStorage"]
