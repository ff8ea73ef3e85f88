"""T1.04 — Positional Prior.

Text-independent bonus from the step number: early steps favor dry
ingredients, late steps favor final-assembly items.
"""

from __future__ import annotations

import numpy as np

from recipeflow.engine.context import LinkageContext
from recipeflow.engine.registry import Layer, transform


@transform(
    id="T1.04",
    layer=Layer.SCORING,
    dependencies=["T0.01"],
    description="Score step-position priors for dry and final-assembly ingredients",
    tags={"position"},
)
def positional_prior(ctx: LinkageContext) -> None:
    cfg = ctx.config
    matrix = np.zeros((ctx.num_instructions, ctx.num_ingredients))
    early = np.array([any(t in n for t in cfg.early_step_terms) for n in ctx.names], dtype=bool)
    late = np.array([any(t in n for t in cfg.late_step_terms) for n in ctx.names], dtype=bool)
    for i, ins in enumerate(ctx.instructions):
        if ins.step <= cfg.early_step_max:
            matrix[i, early] += cfg.early_step_weight
        if ins.step >= cfg.late_step_min:
            matrix[i, late] += cfg.late_step_weight
    ctx.add_scores("T1.04", matrix)
