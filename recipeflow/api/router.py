"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from recipeflow.api import flow, health, links

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(links.router)
api_router.include_router(flow.router)
