"""Inventory Assignment Engine — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from allocation_engine.config import settings
from allocation_engine.infrastructure.api.dependencies import get_cache
from allocation_engine.infrastructure.api.routes_assignments import router as assignments_router
from allocation_engine.infrastructure.api.routes_cache import router as cache_router
from allocation_engine.infrastructure.api.routes_catalog import router as catalog_router
from allocation_engine.infrastructure.api.routes_health import router as health_router
from allocation_engine.infrastructure.api.routes_history import router as history_router

logging.basicConfig(level=logging.DEBUG if settings.debug else logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    cache = get_cache()
    cache.start_sweeper()
    logger.info("Cache sweeper started (upstream: %s)", settings.api_base_url)
    yield
    await cache.stop_sweeper()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Inventory Assignment Engine",
        description="Proportional and priority-waterfall allocation of SKUs to sales agents",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(assignments_router, prefix="/api")
    app.include_router(catalog_router, prefix="/api")
    app.include_router(history_router, prefix="/api")
    app.include_router(cache_router, prefix="/api")

    return app


app = create_app()
