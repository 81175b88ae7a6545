from __future__ import annotations

from pathlib import Path
import sys

import click
import pytest
from click.testing import CliRunner

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from recipe_manager.models import Ingredient, RecipeInfo
from recipe_manager.prompts import (
    collect_confirmation,
    collect_ingredient,
    collect_recipe_info,
    collect_step,
    collect_step_index_to_remove,
    parse_number,
)


def run_prompt(func, input_text: str, *args):
    """Run a collector inside a click command and return its value and output."""

    captured = {}

    @click.command()
    def command() -> None:
        captured["value"] = func(*args)

    result = CliRunner().invoke(command, input=input_text)
    assert result.exception is None, result.output
    return captured["value"], result.output


def test_collect_recipe_info_accepts_valid_answers():
    info, output = run_prompt(collect_recipe_info, "Soup\n20\n2\n")

    assert info == RecipeInfo(name="Soup", cooking_time=20, servings=2)
    assert "Enter recipe name:" in output
    assert "Enter the cooking time:" in output
    assert "Enter the number of servings:" in output


def test_collect_recipe_info_defaults_servings_to_four():
    info, output = run_prompt(collect_recipe_info, "Soup\n20\n\n")

    assert info.servings == 4
    assert "[4]" in output


def test_collect_recipe_info_reprompts_for_blank_name():
    info, output = run_prompt(collect_recipe_info, "\n   \nPancakes\n15\n4\n")

    assert info.name == "Pancakes"
    assert output.count("Recipe name is required") == 2


@pytest.mark.parametrize("answer", ["0", "-5", "abc", "nan", ""])
def test_collect_recipe_info_rejects_invalid_cooking_time(answer):
    info, output = run_prompt(collect_recipe_info, f"Soup\n{answer}\n12.5\n3\n")

    assert info.cooking_time == 12.5
    assert output.count("Cooking time is required!") == 1


@pytest.mark.parametrize("answer", ["0", "-1", "lots", "2.5"])
def test_collect_recipe_info_rejects_invalid_servings(answer):
    info, output = run_prompt(collect_recipe_info, f"Soup\n20\n{answer}\n6\n")

    assert info.servings == 6
    assert "Please enter a valid number of servings!" in output


def test_collect_recipe_info_offers_current_values_as_defaults():
    current = RecipeInfo(name="Stew", cooking_time=90, servings=6)

    info, output = run_prompt(collect_recipe_info, "\n\n\n", current)

    assert info == RecipeInfo(name="Stew", cooking_time=90, servings=6)
    assert "[Stew]" in output


def test_collect_ingredient_mentions_name_in_quantity_prompt():
    ingredient, output = run_prompt(collect_ingredient, "Flour\n250\ng\n")

    assert ingredient == Ingredient(name="Flour", quantity=250, unit="g")
    assert "Enter the quantity for Flour:" in output


def test_collect_ingredient_reprompts_each_field():
    ingredient, output = run_prompt(
        collect_ingredient, " \n  Salt \nnone\n-1\n0.5\n\n tsp\n"
    )

    assert ingredient == Ingredient(name="Salt", quantity=0.5, unit="tsp")
    assert output.count("Please enter an ingredient!") == 1
    assert output.count("Please enter a valid quantity!") == 2
    assert output.count("Please enter the units!") == 1


def test_collect_step_rejects_blank_instruction():
    step, output = run_prompt(collect_step, "\n\t\nBoil the water\n")

    assert step == "Boil the water"
    assert output.count("Please enter the step instruction!") == 2


def test_collect_step_index_returns_zero_based_index():
    index, output = run_prompt(collect_step_index_to_remove, "3\n", 2)

    assert index == 2
    assert "Enter step number to remove (1-3):" in output


@pytest.mark.parametrize("answer", ["0", "4", "two", "1.5"])
def test_collect_step_index_rejects_out_of_range(answer):
    index, output = run_prompt(collect_step_index_to_remove, f"{answer}\n1\n", 2)

    assert index == 0
    assert "Please enter a number between 1 and 3" in output


@pytest.mark.parametrize(("answer", "expected"), [("y\n", True), ("n\n", False), ("\n", True)])
def test_collect_confirmation(answer, expected):
    confirmed, output = run_prompt(collect_confirmation, answer, "Delete it?")

    assert confirmed is expected
    assert "Delete it?" in output


def test_parse_number():
    assert parse_number(" 4 ") == 4
    assert isinstance(parse_number("4"), int)
    assert parse_number("0.25") == 0.25
    assert parse_number("inf") is None
    assert parse_number("four") is None
