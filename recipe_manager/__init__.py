import os
from typing import Optional

from flask import Flask

from .commands import recipes_cli
from .models import Ingredient, Recipe, RecipeInfo
from .storage import InMemoryRecipeStorage, RecipeRepository

try:
    from .gcp_storage import FirestoreRecipeStorage
except ImportError:  # pragma: no cover - allows running tests without optional deps
    FirestoreRecipeStorage = None  # type: ignore[assignment,misc]


def _storage_from_env() -> RecipeRepository:
    backend = os.environ.get("RECIPES_BACKEND", "firestore").strip().lower()

    if backend == "memory":
        return InMemoryRecipeStorage()
    if backend != "firestore":
        raise RuntimeError(f"Unknown RECIPES_BACKEND '{backend}'. Use 'memory' or 'firestore'.")
    if FirestoreRecipeStorage is None:
        raise RuntimeError(
            "google-cloud-firestore is not installed. Install optional dependencies, "
            "set RECIPES_BACKEND=memory or pass an explicit storage backend to create_app."
        )
    return FirestoreRecipeStorage.from_env()


def create_app(storage: Optional[RecipeRepository] = None) -> Flask:
    """Create the Flask application that hosts the ``recipes`` commands.

    Parameters
    ----------
    storage:
        Optional recipe repository. When ``None`` the backend is chosen through
        the ``RECIPES_BACKEND`` environment variable.
    """

    app = Flask(__name__)

    if storage is None:
        storage = _storage_from_env()
    app.config["RECIPE_STORAGE"] = storage

    app.cli.add_command(recipes_cli)

    return app


__all__ = ["create_app", "Ingredient", "Recipe", "RecipeInfo"]
