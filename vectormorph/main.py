"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vectormorph.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.vectormorph_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


def create_app() -> FastAPI:
    app = FastAPI(
        title="VectorMorph",
        description="Vector shape morphing — subpath matching and cubic interpolation",
        version=VERSION,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_converters()

    from vectormorph.api.router import api_router

    app.include_router(api_router)

    return app


def _register_converters() -> None:
    """Import the canonicalizer so its @converter decorators fire."""
    from vectormorph.engine import segmenter  # noqa: F401
    from vectormorph.engine.registry import get_registry

    logger.info("Registered %d path converters", get_registry().count)


app = create_app()
