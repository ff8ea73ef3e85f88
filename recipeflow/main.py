"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from recipeflow import __version__
from recipeflow.config import settings
from recipeflow.engine.registry import load_transforms

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.recipeflow_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="RecipeFlow",
        description="Ingredient/step linkage and flow-ribbon geometry for recipe views",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all transform modules to trigger registration
    load_transforms()

    from recipeflow.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
