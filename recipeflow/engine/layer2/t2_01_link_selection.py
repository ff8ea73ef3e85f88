"""T2.01 — Link Selection.

Clamp summed scores to [0, max_confidence] and keep pairs strictly above the
threshold. Output order: instruction index, then ingredient index.
"""

from __future__ import annotations

import numpy as np

from recipeflow.engine.context import Link, LinkageContext
from recipeflow.engine.registry import Layer, transform


@transform(
    id="T2.01",
    layer=Layer.LINKING,
    dependencies=["T1.01", "T1.02", "T1.03", "T1.04"],
    description="Clamp confidences and emit links above threshold",
    tags={"always"},
)
def link_selection(ctx: LinkageContext) -> None:
    cfg = ctx.config
    if ctx.scores is None:
        ctx.links = []
        return
    clamped = np.clip(ctx.scores, 0.0, cfg.max_confidence)
    ctx.links = [
        Link(ingredient_index=int(j), instruction_index=int(i), confidence=float(clamped[i, j]))
        for i, j in np.argwhere(clamped > cfg.threshold)
    ]
