"""T3.01 — Flow Shapes.

Turn the selected links plus measured row rectangles into filled ribbons.
Gated off by the pipeline until both rectangle maps are populated.
"""

from __future__ import annotations

from recipeflow.engine.context import LinkageContext
from recipeflow.engine.flow import build_shapes
from recipeflow.engine.registry import Layer, transform


@transform(
    id="T3.01",
    layer=Layer.GEOMETRY,
    dependencies=["T2.01"],
    description="Build ribbon paths between linked rows",
    tags={"geometry"},
)
def flow_shapes(ctx: LinkageContext) -> None:
    ctx.shapes = build_shapes(
        ctx.links,
        ctx.ingredient_rects,
        ctx.instruction_rects,
        instructions=ctx.instructions,
        ingredients=ctx.ingredients,
        config=ctx.flow_config,
    )
