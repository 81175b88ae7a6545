"""Entrypoint for the recipe manager.

Commands are run through the Flask CLI, for example
``flask --app main recipes list`` or ``flask --app main recipes menu``. Set
``RECIPES_BACKEND=memory`` to try the interactive menu without Firestore.
"""

from recipe_manager import create_app

app = create_app()


__all__ = ["app"]
