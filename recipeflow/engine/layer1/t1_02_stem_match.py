"""T1.02 — Stem Match.

Crude stemming: drop the last character of each qualifying word and look for
the remainder in the step text. Fires independently of T1.01, so a verbatim
hit also counts as a stem hit ("eggs" implies "egg"). That double count is
kept for compatibility with the tuned weights.
"""

from __future__ import annotations

import numpy as np

from recipeflow.engine.context import LinkageContext
from recipeflow.engine.registry import Layer, transform


@transform(
    id="T1.02",
    layer=Layer.SCORING,
    dependencies=["T0.01"],
    description="Score truncated ingredient words in the step text",
    tags={"text"},
)
def stem_match(ctx: LinkageContext) -> None:
    cfg = ctx.config
    matrix = np.zeros((ctx.num_instructions, ctx.num_ingredients))
    for i, text in enumerate(ctx.texts):
        for j, words in enumerate(ctx.tokens):
            hits = sum(1 for w in words if len(w) >= cfg.min_word_length and w[:-1] in text)
            matrix[i, j] = hits * cfg.stem_match_weight
    ctx.add_scores("T1.02", matrix)
