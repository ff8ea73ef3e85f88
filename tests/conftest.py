"""Shared test fixtures."""

from __future__ import annotations

import pytest

from recipeflow.engine.context import Ingredient, Instruction, Rect
from recipeflow.engine.registry import load_transforms
from recipeflow.samples import CHOCOLATE_CHIP_COOKIES, sample_rects

load_transforms()

COOKIES = CHOCOLATE_CHIP_COOKIES

FLOUR = Ingredient("1", "cup", "flour")
EGGS = Ingredient("2", "large", "eggs")
CHIPS = Ingredient("2", "cups", "chocolate chips")
PAPRIKA = Ingredient("1", "tsp", "paprika")

MIX_STEP = Instruction(2, "Mix flour and baking soda")

# Row bounds used across geometry tests: y grows downward
INGREDIENT_RECT = Rect(0.0, 0.0, 100.0, 20.0)
INSTRUCTION_RECT = Rect(200.0, 0.0, 300.0, 40.0)


def recipe_payload(recipe=COOKIES) -> dict:
    """JSON body for the links/flow endpoints."""
    return {
        "ingredients": [
            {"quantity": i.quantity, "measure": i.measure, "name": i.name}
            for i in recipe.ingredients
        ],
        "instructions": [
            {"step": s.step, "description": s.description, "duration": s.duration}
            for s in recipe.instructions
        ],
    }


def rects_payload(rects: dict[int, Rect]) -> dict[str, dict[str, float]]:
    return {
        str(k): {"min_x": r.min_x, "min_y": r.min_y, "max_x": r.max_x, "max_y": r.max_y}
        for k, r in rects.items()
    }


@pytest.fixture
def cookies():
    return COOKIES


@pytest.fixture
def cookie_rects():
    return sample_rects(COOKIES)
