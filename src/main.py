from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.core.config import settings
from src.core.observability import setup_logging
from src.core.store import create_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Startup
    setup_logging(settings.app_log_level, settings.log_format)
    app.state.store = create_store(settings)
    logger.info("%s started (store: %s)", settings.app_name, settings.store_rest_url)
    yield
    # Shutdown
    await app.state.store.close()
    logger.info("%s shutting down", settings.app_name)


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from src.api.error_handlers import register_error_handlers

    register_error_handlers(app)

    # Register routes
    from src.api.routes import health
    from src.api.routes.router import api_router

    app.include_router(health.router, tags=["Health"])
    app.include_router(api_router, prefix="/api")

    return app


app = create_app()


def run() -> None:
    uvicorn.run("src.main:app", host=settings.app_host, port=settings.port)


if __name__ == "__main__":
    run()
