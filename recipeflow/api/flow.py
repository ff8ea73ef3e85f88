"""POST /api/flow — links plus ribbon geometry for measured rows."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from recipeflow.api.links import context_from_request, links_payload
from recipeflow.config import Settings
from recipeflow.dependencies import get_settings
from recipeflow.engine.config import FlowConfig
from recipeflow.engine.context import LinkageContext
from recipeflow.engine.pipeline import create_pipeline
from recipeflow.models.requests import FlowRequest, FlowSvgRequest
from recipeflow.models.responses import FlowResponse, ShapeOut
from recipeflow.svg.serializer import serialize_svg

router = APIRouter()


def _flow_config(req: FlowRequest, settings: Settings) -> FlowConfig:
    if req.curve_apex_length is not None:
        return FlowConfig(curve_apex_length=req.curve_apex_length)
    if req.preset is not None:
        try:
            return FlowConfig.preset(req.preset)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e)) from e
    return FlowConfig.from_settings(settings)


def _run_flow(req: FlowRequest, settings: Settings) -> LinkageContext:
    ctx = context_from_request(req, settings)
    ctx.flow_config = _flow_config(req, settings)
    ctx.ingredient_rects = {k: r.to_engine() for k, r in req.ingredient_rects.items()}
    ctx.instruction_rects = {k: r.to_engine() for k, r in req.instruction_rects.items()}
    return create_pipeline(fail_fast=True).run(ctx)


@router.post("/flow", response_model=FlowResponse)
async def flow(req: FlowRequest, settings: Settings = Depends(get_settings)) -> FlowResponse:
    start = time.perf_counter()

    ctx = _run_flow(req, settings)

    shapes = [
        ShapeOut(
            ingredient_index=s.link.ingredient_index,
            instruction_index=s.link.instruction_index,
            step=s.step,
            d=s.d,
            color=s.color,
            color_name=s.color_name,
            opacity=round(s.opacity, 6),
            bbox=s.bbox,
        )
        for s in ctx.shapes
    ]

    elapsed = (time.perf_counter() - start) * 1000
    return FlowResponse(
        **links_payload(ctx),
        shapes=shapes,
        curve_apex_length=ctx.flow_config.curve_apex_length,
        processing_time_ms=round(elapsed, 1),
    )


@router.post("/flow/svg")
async def flow_svg(req: FlowSvgRequest, settings: Settings = Depends(get_settings)) -> Response:
    ctx = _run_flow(req, settings)
    svg = serialize_svg(ctx.shapes, req.width, req.height)
    return Response(content=svg, media_type="image/svg+xml")
