"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from recipeflow.models.requests import IngredientIn, InstructionIn


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    transforms_registered: int = 0


class RecipeResponse(BaseModel):
    title: str
    ingredients: list[IngredientIn] = Field(default_factory=list)
    instructions: list[InstructionIn] = Field(default_factory=list)
    total_time: str = ""
    servings: int = 0


class LinkOut(BaseModel):
    ingredient_index: int
    instruction_index: int
    confidence: float


class ShapeOut(BaseModel):
    ingredient_index: int
    instruction_index: int
    step: int
    d: str
    color: str
    color_name: str
    opacity: float
    bbox: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)


class LinksResponse(BaseModel):
    links: list[LinkOut] = Field(default_factory=list)
    # ingredient index -> hex colors of the steps it feeds
    connection_colors: dict[int, list[str]] = Field(default_factory=dict)
    processing_time_ms: float = 0.0


class FlowResponse(LinksResponse):
    shapes: list[ShapeOut] = Field(default_factory=list)
    curve_apex_length: float = 0.0
