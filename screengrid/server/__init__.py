# screengrid/server/__init__.py
"""Screengrid layout service - serves generated layouts to renderers."""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .config import settings

logger = logging.getLogger("screengrid.server")

_server_start_time: float = 0.0


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    global _server_start_time
    _server_start_time = time.time()
    logger.info(f"Screengrid layout service starting on {settings.HOST}:{settings.PORT}")
    yield
    from .layout_cache import layout_cache

    layout_cache.clear()
    logger.info("Screengrid layout service shutting down...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    from .layout_cache import layout_cache
    from .models import HealthResponse
    from .routes import layouts, sequence

    app = FastAPI(lifespan=lifespan, title="Screengrid Layout Service")

    app.include_router(layouts.router)
    app.include_router(sequence.router)

    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        """Health check endpoint."""
        return HealthResponse(
            status="ok",
            cached_layouts=len(layout_cache),
            uptime_s=time.time() - _server_start_time,
        )

    return app


app = create_app()
