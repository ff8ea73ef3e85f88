"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from recipeflow import __version__
from recipeflow.engine.context import Recipe
from recipeflow.engine.registry import get_registry
from recipeflow.models.requests import IngredientIn, InstructionIn
from recipeflow.models.responses import HealthResponse, RecipeResponse
from recipeflow.samples import CHOCOLATE_CHIP_COOKIES

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        transforms_registered=get_registry().count,
    )


@router.get("/sample", response_model=RecipeResponse)
async def sample() -> RecipeResponse:
    return recipe_to_response(CHOCOLATE_CHIP_COOKIES)


def recipe_to_response(recipe: Recipe) -> RecipeResponse:
    return RecipeResponse(
        title=recipe.title,
        ingredients=[
            IngredientIn(quantity=i.quantity, measure=i.measure, name=i.name)
            for i in recipe.ingredients
        ],
        instructions=[
            InstructionIn(step=s.step, description=s.description, duration=s.duration)
            for s in recipe.instructions
        ],
        total_time=recipe.total_time,
        servings=recipe.servings,
    )
