"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from recipeflow.engine.context import Ingredient, Instruction, Rect


class IngredientIn(BaseModel):
    quantity: str = ""
    measure: str = ""
    name: str

    def to_engine(self) -> Ingredient:
        return Ingredient(quantity=self.quantity, measure=self.measure, name=self.name)


class InstructionIn(BaseModel):
    step: int = Field(..., ge=1, description="1-based display number")
    description: str
    duration: str | None = None

    def to_engine(self) -> Instruction:
        return Instruction(step=self.step, description=self.description, duration=self.duration)


class RectIn(BaseModel):
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def to_engine(self) -> Rect:
        return Rect(self.min_x, self.min_y, self.max_x, self.max_y)


class LinksRequest(BaseModel):
    ingredients: list[IngredientIn] = Field(default_factory=list)
    instructions: list[InstructionIn] = Field(default_factory=list)


class FlowRequest(LinksRequest):
    ingredient_rects: dict[int, RectIn] = Field(
        default_factory=dict,
        description="Measured ingredient row bounds keyed by ingredient index",
    )
    instruction_rects: dict[int, RectIn] = Field(
        default_factory=dict,
        description="Measured instruction row bounds keyed by instruction index",
    )
    curve_apex_length: float | None = Field(
        default=None,
        description="Control-point offset; defaults to the configured value",
    )
    preset: str | None = Field(
        default=None,
        description="Apex preset (default, bouncy, smooth, snappy); ignored if curve_apex_length is set",
    )


class FlowSvgRequest(FlowRequest):
    width: float = Field(default=560.0, gt=0)
    height: float = Field(default=360.0, gt=0)
