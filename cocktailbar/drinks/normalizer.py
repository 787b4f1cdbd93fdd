from __future__ import annotations

from typing import Any

from .models import Ingredient

MAX_INGREDIENT_SLOTS = 15


def extract_ingredients(drink: dict[str, Any]) -> list[Ingredient]:
    """Collect populated ingredient slots 1..15 in slot order."""
    ingredients: list[Ingredient] = []
    for i in range(1, MAX_INGREDIENT_SLOTS + 1):
        name = drink.get(f"strIngredient{i}")
        if name is None or name == "":
            continue
        measure = drink.get(f"strMeasure{i}")
        # Upstream occasionally sends numbers instead of strings
        ingredients.append(Ingredient(
            name=str(name),
            measure="" if measure is None else str(measure),
        ))
    return ingredients


def normalize_drink(drink: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of the raw drink with an ``ingredients`` list added."""
    return {**drink, "ingredients": extract_ingredients(drink)}
