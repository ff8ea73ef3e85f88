"""Ingredient ↔ instruction linkage — the public face of the scoring pipeline."""

from __future__ import annotations

from collections.abc import Sequence

from recipeflow.engine.config import LinkageConfig
from recipeflow.engine.context import Ingredient, Instruction, Link, LinkageContext
from recipeflow.engine.pipeline import create_pipeline

# Final linking transform; the pipeline pulls in everything it depends on.
_LINK_TARGET = "T2.01"


def analyze_context(ctx: LinkageContext) -> LinkageContext:
    """Run normalization, scoring and link selection on ``ctx`` in place."""
    pipeline = create_pipeline(fail_fast=True)
    return pipeline.run(ctx, targets={_LINK_TARGET})


def analyze(
    ingredients: Sequence[Ingredient],
    instructions: Sequence[Instruction],
    config: LinkageConfig | None = None,
) -> list[Link]:
    """Infer which ingredients each instruction step uses.

    Deterministic and side-effect free. Links are ordered by instruction
    index, then ingredient index.
    """
    ctx = LinkageContext(
        ingredients=list(ingredients),
        instructions=list(instructions),
        config=config or LinkageConfig(),
    )
    return analyze_context(ctx).links


def confidence(
    ingredient: Ingredient,
    instruction: Instruction,
    config: LinkageConfig | None = None,
) -> float:
    """Clamped confidence for one pair, whether or not it clears the threshold."""
    cfg = config or LinkageConfig()
    ctx = analyze_context(
        LinkageContext(ingredients=[ingredient], instructions=[instruction], config=cfg)
    )
    return float(min(max(ctx.scores[0, 0], 0.0), cfg.max_confidence))


def links_for_ingredient(links: Sequence[Link], ingredient_index: int) -> list[Link]:
    return [link for link in links if link.ingredient_index == ingredient_index]


def links_for_instruction(links: Sequence[Link], instruction_index: int) -> list[Link]:
    return [link for link in links if link.instruction_index == instruction_index]


def strongest_link(links: Sequence[Link], ingredient_index: int) -> Link | None:
    """Highest-confidence link for an ingredient; earliest step wins ties."""
    best: Link | None = None
    for link in links_for_ingredient(links, ingredient_index):
        if best is None or link.confidence > best.confidence:
            best = link
    return best
