"""T1.01 — Word Match.

+word_match_weight for every ingredient-name word (longer than 3 chars)
that appears verbatim in the instruction text.
"""

from __future__ import annotations

import numpy as np

from recipeflow.engine.context import LinkageContext
from recipeflow.engine.registry import Layer, transform


@transform(
    id="T1.01",
    layer=Layer.SCORING,
    dependencies=["T0.01"],
    description="Score verbatim ingredient words in the step text",
    tags={"text"},
)
def word_match(ctx: LinkageContext) -> None:
    cfg = ctx.config
    matrix = np.zeros((ctx.num_instructions, ctx.num_ingredients))
    for i, text in enumerate(ctx.texts):
        for j, words in enumerate(ctx.tokens):
            hits = sum(1 for w in words if len(w) >= cfg.min_word_length and w in text)
            matrix[i, j] = hits * cfg.word_match_weight
    ctx.add_scores("T1.01", matrix)
