"""T1.03 — Cooking Terms.

Domain lookup: an ingredient whose name contains a table key is likely used
by a step mentioning one of that key's verbs ("flour" + "sift"). Every
matching (key, verb) pair adds cooking_term_weight.
"""

from __future__ import annotations

import numpy as np

from recipeflow.engine.context import LinkageContext
from recipeflow.engine.registry import Layer, transform


@transform(
    id="T1.03",
    layer=Layer.SCORING,
    dependencies=["T0.01"],
    description="Score ingredient/verb pairs from the cooking-term table",
    tags={"text"},
)
def cooking_terms(ctx: LinkageContext) -> None:
    cfg = ctx.config
    matrix = np.zeros((ctx.num_instructions, ctx.num_ingredients))
    for j, name in enumerate(ctx.names):
        verb_sets = [verbs for key, verbs in cfg.cooking_terms.items() if key in name]
        if not verb_sets:
            continue
        for i, text in enumerate(ctx.texts):
            pairs = sum(1 for verbs in verb_sets for v in verbs if v in text)
            matrix[i, j] = pairs * cfg.cooking_term_weight
    ctx.add_scores("T1.03", matrix)
