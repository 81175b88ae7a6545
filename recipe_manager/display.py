"""Terminal output for recipes and user feedback.

Messages go through :func:`click.echo`, which strips colours when stdout is
not a terminal. The recipe table is laid out by :mod:`rich`.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence

import click
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .formatting import format_quantity
from .models import Recipe

# Column widths include the one-space padding on each side.
TABLE_COLUMNS = (
    ("ID", 15),
    ("Name", 55),
    ("Cooking Time", None),
    ("Servings", None),
)

NOT_FOUND_MESSAGE = "Recipe not found"


def build_recipe_table(recipes: Sequence[Recipe]) -> Table:
    table = Table(box=box.SQUARE, header_style="cyan")
    for header, max_width in TABLE_COLUMNS:
        table.add_column(header, max_width=max_width, overflow="ellipsis", no_wrap=True)

    for recipe in recipes:
        # Text cells keep recipe names from being parsed as console markup.
        table.add_row(
            Text(str(recipe.id)),
            Text(recipe.name),
            Text(format_quantity(recipe.cooking_time)),
            Text(str(recipe.servings)),
        )
    return table


def display_recipe_list(recipes: Sequence[Recipe]) -> None:
    """Show recipes as a table, one row each, in the order given."""

    recipes = list(recipes)
    if not recipes:
        click.secho("No recipes found", fg="yellow")
        return

    Console(highlight=False).print(build_recipe_table(recipes))


def display_recipe_details(recipe: Optional[Recipe]) -> None:
    """Show every field of a recipe followed by its ingredients and steps."""

    if recipe is None:
        click.secho(NOT_FOUND_MESSAGE, fg="red")
        return

    created = recipe.created_at.strftime("%Y-%m-%d %H:%M") if recipe.created_at else "Unknown"

    click.secho(f"\nRecipe: {recipe.name}", fg="cyan", bold=True)
    click.secho(f"ID: {recipe.id}", fg="green")
    click.secho(f"Cooking Time: {format_quantity(recipe.cooking_time)} minutes", fg="green")
    click.secho(f"Servings: {recipe.servings}", fg="green")
    click.secho(f"Created: {created}", fg="green")

    click.secho("\nIngredients:", fg="cyan", bold=True)
    if not recipe.ingredients:
        click.secho("No ingredients added yet", fg="yellow")
    for position, ingredient in enumerate(recipe.ingredients, 1):
        click.secho(
            f"{position}. {ingredient.name} - {format_quantity(ingredient.quantity)} {ingredient.unit}",
            fg="green",
        )

    click.secho("\nSteps:", fg="cyan", bold=True)
    if not recipe.steps:
        click.secho("No steps added yet", fg="yellow")
    for position, step in enumerate(recipe.steps, 1):
        click.secho(f"{position}. {step}", fg="green")

    click.echo("")


def display_success(message: str) -> None:
    click.secho(f"✓ {message}", fg="green")


def display_error(message: str) -> None:
    click.secho(f"✗ {message}", fg="red")


def display_warning(message: str) -> None:
    click.secho(f"⚠ {message}", fg="yellow")


def display_info(message: str) -> None:
    click.secho(f"ℹ {message}", fg="blue")


def display_formatted_recipe(
    recipe: Optional[Recipe], format_recipe: Callable[[Recipe], str]
) -> None:
    """Print ``format_recipe(recipe)`` between blank lines."""

    if recipe is None:
        click.secho(NOT_FOUND_MESSAGE, fg="red")
        return

    click.echo("\n" + format_recipe(recipe) + "\n")


__all__ = [
    "build_recipe_table",
    "display_error",
    "display_formatted_recipe",
    "display_info",
    "display_recipe_details",
    "display_recipe_list",
    "display_success",
    "display_warning",
]
