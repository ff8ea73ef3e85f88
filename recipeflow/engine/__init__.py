"""RecipeFlow linkage engine."""

from recipeflow.engine.registry import transform, Layer, get_registry, load_transforms
from recipeflow.engine.context import (
    FlowShape,
    Ingredient,
    Instruction,
    Link,
    LinkageContext,
    Recipe,
    Rect,
)
from recipeflow.engine.pipeline import Pipeline, create_pipeline
from recipeflow.engine.linkage import analyze, confidence
from recipeflow.engine.flow import LinkIndexError, build_shapes, connection_colors, step_color

__all__ = [
    "transform",
    "Layer",
    "get_registry",
    "load_transforms",
    "FlowShape",
    "Ingredient",
    "Instruction",
    "Link",
    "LinkageContext",
    "Recipe",
    "Rect",
    "Pipeline",
    "create_pipeline",
    "analyze",
    "confidence",
    "LinkIndexError",
    "build_shapes",
    "connection_colors",
    "step_color",
]
