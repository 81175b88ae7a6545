from __future__ import annotations

from .models import Number, Recipe


def format_quantity(value: Number) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_recipe(recipe: Recipe) -> str:
    """Render a recipe as a Markdown document."""

    md = [f"# {recipe.name}", ""]
    md.append(
        f"_Cooking time: {format_quantity(recipe.cooking_time)} minutes"
        f" | Serves {recipe.servings}_"
    )
    md.append("")
    if recipe.ingredients:
        md.append("## Ingredients")
        for ing in recipe.ingredients:
            md.append(f"- {format_quantity(ing.quantity)} {ing.unit} {ing.name}")
        md.append("")
    if recipe.steps:
        md.append("## Steps")
        for i, step in enumerate(recipe.steps, 1):
            md.append(f"{i}. {step}")
        md.append("")
    return "\n".join(md).strip()


__all__ = ["format_quantity", "format_recipe"]
