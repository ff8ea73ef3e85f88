"""T0.01 — Text Normalization.

Lowercase instruction descriptions and ingredient names, and split each
name into word tokens on the configured delimiters.
"""

from __future__ import annotations

import re

from recipeflow.engine.context import LinkageContext
from recipeflow.engine.registry import Layer, transform


def tokenize(name: str, delimiters: str) -> list[str]:
    """Split on any delimiter character, discarding empty tokens."""
    if not delimiters:
        return [name] if name else []
    pattern = "[" + re.escape(delimiters) + "]"
    return [t for t in re.split(pattern, name) if t]


@transform(
    id="T0.01",
    layer=Layer.NORMALIZATION,
    description="Lowercase text and tokenize ingredient names",
    tags={"always"},
)
def normalize(ctx: LinkageContext) -> None:
    ctx.texts = [ins.description.lower() for ins in ctx.instructions]
    ctx.names = [ing.name.lower() for ing in ctx.ingredients]
    ctx.tokens = [tokenize(name, ctx.config.token_delimiters) for name in ctx.names]
