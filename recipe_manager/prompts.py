"""Interactive prompts that collect recipe data from the terminal.

Every question loops until the answer passes validation. A rejected answer is
reported in red and the same question is asked again; there is no retry
limit.
"""

from __future__ import annotations

import math
from typing import Callable, Optional, TypeVar

import click

from .models import DEFAULT_SERVINGS, Ingredient, Number, RecipeInfo

T = TypeVar("T")


def parse_number(text: str) -> Optional[Number]:
    """Parse ``text`` as an int or float, returning ``None`` when it is not numeric."""

    text = text.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def _required_text(message: str) -> Callable[[str], str]:
    def convert(answer: str) -> str:
        if not answer.strip():
            raise ValueError(message)
        return answer.strip()

    return convert


def _positive_number(message: str, *, integer: bool = False) -> Callable[[str], Number]:
    def convert(answer: str) -> Number:
        value = parse_number(answer)
        if value is None or value <= 0:
            raise ValueError(message)
        if integer:
            if isinstance(value, float) and not value.is_integer():
                raise ValueError(message)
            value = int(value)
        return value

    return convert


def _ask(text: str, convert: Callable[[str], T], *, default: object = None) -> T:
    while True:
        # An empty default makes click hand back blank answers instead of
        # silently asking again, so the validation message is shown.
        answer = click.prompt(
            text,
            default="" if default is None else str(default),
            show_default=default is not None,
            prompt_suffix=" ",
        )
        try:
            return convert(answer)
        except ValueError as exc:
            click.secho(str(exc), fg="red")


def collect_recipe_info(current: RecipeInfo | None = None) -> RecipeInfo:
    """Ask for the name, cooking time and servings of a recipe.

    When ``current`` is given its values are offered as defaults, which is how
    an existing recipe is edited.
    """

    name = _ask(
        "Enter recipe name:",
        _required_text("Recipe name is required"),
        default=current.name if current else None,
    )
    cooking_time = _ask(
        "Enter the cooking time:",
        _positive_number("Cooking time is required!"),
        default=current.cooking_time if current else None,
    )
    servings = _ask(
        "Enter the number of servings:",
        _positive_number("Please enter a valid number of servings!", integer=True),
        default=current.servings if current else DEFAULT_SERVINGS,
    )
    return RecipeInfo(name=name, cooking_time=cooking_time, servings=servings)


def collect_ingredient() -> Ingredient:
    name = _ask("Enter the ingredient name:", _required_text("Please enter an ingredient!"))
    quantity = _ask(
        f"Enter the quantity for {name}:",
        _positive_number("Please enter a valid quantity!"),
    )
    unit = _ask("Enter units:", _required_text("Please enter the units!"))
    return Ingredient(name=name, quantity=quantity, unit=unit)


def collect_step() -> str:
    return _ask(
        "Enter the step instruction:",
        _required_text("Please enter the step instruction!"),
    )


def collect_step_index_to_remove(max_index: int) -> int:
    """Ask for a 1-based step number and return it as a 0-based index.

    ``max_index`` is the highest valid 0-based index, so the user may enter
    anything from 1 to ``max_index + 1``.
    """

    upper = max_index + 1
    message = f"Please enter a number between 1 and {upper}"

    def convert(answer: str) -> int:
        value = parse_number(answer)
        if value is None or value != int(value) or not 1 <= value <= upper:
            raise ValueError(message)
        return int(value) - 1

    return _ask(f"Enter step number to remove (1-{upper}):", convert)


def collect_confirmation(message: str) -> bool:
    return click.confirm(message, default=True)


__all__ = [
    "collect_confirmation",
    "collect_ingredient",
    "collect_recipe_info",
    "collect_step",
    "collect_step_index_to_remove",
    "parse_number",
]
