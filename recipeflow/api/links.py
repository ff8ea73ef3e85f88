"""POST /api/links — ingredient/step linkage only."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends

from recipeflow.config import Settings
from recipeflow.dependencies import get_settings
from recipeflow.engine.config import LinkageConfig
from recipeflow.engine.context import Link, LinkageContext
from recipeflow.engine.flow import connection_colors
from recipeflow.engine.linkage import analyze_context
from recipeflow.models.requests import LinksRequest
from recipeflow.models.responses import LinkOut, LinksResponse

router = APIRouter()


def context_from_request(req: LinksRequest, settings: Settings) -> LinkageContext:
    return LinkageContext(
        ingredients=[i.to_engine() for i in req.ingredients],
        instructions=[s.to_engine() for s in req.instructions],
        config=LinkageConfig.from_settings(settings),
    )


def links_payload(ctx: LinkageContext) -> dict:
    """Links plus per-ingredient row tints, shared by the links and flow endpoints."""
    return {
        "links": [_link_out(link) for link in ctx.links],
        "connection_colors": {
            j: colors
            for j in range(ctx.num_ingredients)
            if (colors := connection_colors(j, ctx.links, ctx.instructions, ctx.flow_config))
        },
    }


def _link_out(link: Link) -> LinkOut:
    return LinkOut(
        ingredient_index=link.ingredient_index,
        instruction_index=link.instruction_index,
        confidence=round(link.confidence, 6),
    )


@router.post("/links", response_model=LinksResponse)
async def links(req: LinksRequest, settings: Settings = Depends(get_settings)) -> LinksResponse:
    start = time.perf_counter()

    ctx = analyze_context(context_from_request(req, settings))

    elapsed = (time.perf_counter() - start) * 1000
    return LinksResponse(**links_payload(ctx), processing_time_ms=round(elapsed, 1))
