from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Iterator, List, Optional, Tuple

import click
from flask import current_app
from flask.cli import AppGroup

from .display import (
    NOT_FOUND_MESSAGE,
    display_error,
    display_formatted_recipe,
    display_info,
    display_recipe_details,
    display_recipe_list,
    display_success,
    display_warning,
)
from .formatting import format_recipe
from .models import Ingredient, Recipe
from .prompts import (
    collect_confirmation,
    collect_ingredient,
    collect_recipe_info,
    collect_step,
    collect_step_index_to_remove,
)
from .storage import RecipeRepository

recipes_cli = AppGroup("recipes", help="Manage recipes from the terminal.")


def _storage() -> RecipeRepository:
    return current_app.config["RECIPE_STORAGE"]


@contextmanager
def _storage_errors(action: str) -> Iterator[None]:
    """Turn unexpected backend failures into a logged click error."""

    try:
        yield
    except (KeyError, click.ClickException, click.Abort):
        raise
    except Exception as exc:
        current_app.logger.exception("Failed to %s", action)
        raise click.ClickException(f"Failed to {action}: {exc}") from exc


def _load(recipe_id: str) -> Optional[Recipe]:
    with _storage_errors("load recipe"):
        try:
            return _storage().get_recipe(recipe_id)
        except KeyError:
            return None


def list_recipes() -> None:
    with _storage_errors("list recipes"):
        recipes = list(_storage().list_recipes())
    display_recipe_list(recipes)


def show_recipe(recipe_id: str) -> None:
    display_recipe_details(_load(recipe_id))


def export_recipe(recipe_id: str) -> None:
    display_formatted_recipe(_load(recipe_id), format_recipe)


def add_recipe() -> None:
    info = collect_recipe_info()
    with _storage_errors("save recipe"):
        recipe = _storage().add_recipe(info)
    current_app.logger.info("Created recipe %s", recipe.id)
    display_success(f"Recipe '{recipe.name}' saved with ID {recipe.id}.")

    ingredients: List[Ingredient] = []
    while collect_confirmation("Add an ingredient?"):
        ingredients.append(collect_ingredient())

    steps: List[str] = []
    while collect_confirmation("Add a step?"):
        steps.append(collect_step())

    if ingredients or steps:
        with _storage_errors("save recipe"):
            try:
                recipe = _storage().update_recipe(recipe.id, ingredients=ingredients, steps=steps)
            except KeyError:
                display_error(NOT_FOUND_MESSAGE)
                return
        display_success(
            f"Added {len(ingredients)} ingredient(s) and {len(steps)} step(s) to '{recipe.name}'."
        )


def edit_recipe(recipe_id: str) -> None:
    recipe = _load(recipe_id)
    if recipe is None:
        display_error(NOT_FOUND_MESSAGE)
        return

    info = collect_recipe_info(recipe.info)
    with _storage_errors("update recipe"):
        try:
            updated = _storage().update_recipe(recipe.id, info=info)
        except KeyError:
            display_error(NOT_FOUND_MESSAGE)
            return
    current_app.logger.info("Updated recipe %s", updated.id)
    display_success(f"Recipe '{updated.name}' updated.")


def add_ingredient(recipe_id: str) -> None:
    recipe = _load(recipe_id)
    if recipe is None:
        display_error(NOT_FOUND_MESSAGE)
        return

    ingredient = collect_ingredient()
    with _storage_errors("update recipe"):
        try:
            _storage().update_recipe(recipe.id, ingredients=[*recipe.ingredients, ingredient])
        except KeyError:
            display_error(NOT_FOUND_MESSAGE)
            return
    display_success(f"Added {ingredient.name} to '{recipe.name}'.")


def add_step(recipe_id: str) -> None:
    recipe = _load(recipe_id)
    if recipe is None:
        display_error(NOT_FOUND_MESSAGE)
        return

    step = collect_step()
    with _storage_errors("update recipe"):
        try:
            _storage().update_recipe(recipe.id, steps=[*recipe.steps, step])
        except KeyError:
            display_error(NOT_FOUND_MESSAGE)
            return
    display_success(f"Added step {len(recipe.steps) + 1} to '{recipe.name}'.")


def remove_step(recipe_id: str) -> None:
    recipe = _load(recipe_id)
    if recipe is None:
        display_error(NOT_FOUND_MESSAGE)
        return
    if not recipe.steps:
        display_warning(f"'{recipe.name}' has no steps to remove.")
        return

    for position, step in enumerate(recipe.steps, 1):
        click.echo(f"{position}. {step}")

    index = collect_step_index_to_remove(len(recipe.steps) - 1)
    steps = list(recipe.steps)
    removed = steps.pop(index)
    with _storage_errors("update recipe"):
        try:
            _storage().update_recipe(recipe.id, steps=steps)
        except KeyError:
            display_error(NOT_FOUND_MESSAGE)
            return
    display_success(f"Removed step {index + 1}: {removed}")


def delete_recipe(recipe_id: str) -> None:
    recipe = _load(recipe_id)
    if recipe is None:
        display_error(NOT_FOUND_MESSAGE)
        return

    if not collect_confirmation(f"Are you sure you want to delete '{recipe.name}'?"):
        display_info("Deletion cancelled")
        return

    with _storage_errors("delete recipe"):
        try:
            _storage().delete_recipe(recipe.id)
        except KeyError:
            display_error(NOT_FOUND_MESSAGE)
            return
    current_app.logger.info("Deleted recipe %s", recipe.id)
    display_success("Recipe deleted.")


def _with_recipe_id(action: Callable[[str], None]) -> Callable[[], None]:
    def run() -> None:
        action(click.prompt("Enter recipe ID", type=str).strip())

    return run


MENU: List[Tuple[str, Optional[Callable[[], None]]]] = [
    ("List recipes", list_recipes),
    ("View recipe details", _with_recipe_id(show_recipe)),
    ("View formatted recipe", _with_recipe_id(export_recipe)),
    ("Add a recipe", add_recipe),
    ("Edit a recipe", _with_recipe_id(edit_recipe)),
    ("Add an ingredient", _with_recipe_id(add_ingredient)),
    ("Add a step", _with_recipe_id(add_step)),
    ("Remove a step", _with_recipe_id(remove_step)),
    ("Delete a recipe", _with_recipe_id(delete_recipe)),
    ("Exit", None),
]


@recipes_cli.command("list")
def list_command() -> None:
    """List all recipes."""
    list_recipes()


@recipes_cli.command("show")
@click.argument("recipe_id")
def show_command(recipe_id: str) -> None:
    """Show the details of a recipe."""
    show_recipe(recipe_id)


@recipes_cli.command("export")
@click.argument("recipe_id")
def export_command(recipe_id: str) -> None:
    """Print a recipe as Markdown."""
    export_recipe(recipe_id)


@recipes_cli.command("add")
def add_command() -> None:
    """Create a recipe interactively."""
    add_recipe()


@recipes_cli.command("edit")
@click.argument("recipe_id")
def edit_command(recipe_id: str) -> None:
    """Change the name, cooking time or servings of a recipe."""
    edit_recipe(recipe_id)


@recipes_cli.command("add-ingredient")
@click.argument("recipe_id")
def add_ingredient_command(recipe_id: str) -> None:
    """Append an ingredient to a recipe."""
    add_ingredient(recipe_id)


@recipes_cli.command("add-step")
@click.argument("recipe_id")
def add_step_command(recipe_id: str) -> None:
    """Append a step to a recipe."""
    add_step(recipe_id)


@recipes_cli.command("remove-step")
@click.argument("recipe_id")
def remove_step_command(recipe_id: str) -> None:
    """Remove one step from a recipe."""
    remove_step(recipe_id)


@recipes_cli.command("delete")
@click.argument("recipe_id")
def delete_command(recipe_id: str) -> None:
    """Delete a recipe after confirmation."""
    delete_recipe(recipe_id)


@recipes_cli.command("menu")
def menu_command() -> None:
    """Run an interactive session until Exit is chosen."""
    while True:
        click.secho("\nRecipe Manager", fg="cyan", bold=True)
        for position, (label, _) in enumerate(MENU, 1):
            click.echo(f"{position}. {label}")

        choice = click.prompt("Choose an option", type=click.IntRange(1, len(MENU)))
        label, action = MENU[choice - 1]
        if action is None:
            display_info("Goodbye!")
            return
        action()


__all__ = ["MENU", "recipes_cli"]
