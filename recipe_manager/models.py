from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import List, Optional, Union

Number = Union[int, float]

DEFAULT_SERVINGS = 4


@dataclass
class Ingredient:
    """A single ingredient line of a recipe."""

    name: str
    quantity: Number
    unit: str

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Ingredient":
        return cls(
            name=data.get("name", ""),
            quantity=data.get("quantity", 0),
            unit=data.get("unit", ""),
        )


@dataclass
class RecipeInfo:
    """The editable metadata of a recipe, as collected from the user."""

    name: str
    cooking_time: Number
    servings: int = DEFAULT_SERVINGS


@dataclass
class Recipe:
    """Domain object representing a stored recipe."""

    id: str
    name: str
    cooking_time: Number
    servings: int = DEFAULT_SERVINGS
    created_at: Optional[datetime] = None
    ingredients: List[Ingredient] = field(default_factory=list)
    steps: List[str] = field(default_factory=list)

    @property
    def info(self) -> RecipeInfo:
        return RecipeInfo(name=self.name, cooking_time=self.cooking_time, servings=self.servings)


__all__ = ["DEFAULT_SERVINGS", "Ingredient", "Number", "Recipe", "RecipeInfo"]
