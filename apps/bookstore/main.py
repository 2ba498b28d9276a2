"""Bookstore API - FastAPI application entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bookstore.infrastructure.persistence_redis import build_async_client
from bookstore.presentation.http.controllers import (
    auth_router,
    books_router,
    categories_router,
    health_router,
    tags_router,
    users_router,
)
from bookstore.presentation.http.errors import register_exception_handlers
from bookstore.setup.config import get_settings
from bookstore.setup.database import build_engine, build_session_factory
from bookstore.setup.logging import setup_logging

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Own the store handles: created on startup, released on shutdown."""
    setup_logging(settings.log_level, sql_echo=settings.database_echo)
    logger.info(f"Starting {settings.service_name} ({settings.environment})")

    engine = build_engine(settings)
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.redis = build_async_client(
        settings.redis_url, max_connections=settings.redis_max_connections
    )

    try:
        yield
    finally:
        logger.info(f"Shutting down {settings.service_name}")
        await app.state.redis.aclose()
        await engine.dispose()


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    app = FastAPI(
        title="Bookstore API",
        description="Bilingual (en/ar) book catalog",
        version="1.0.0",
        docs_url="/api/docs",
        openapi_url="/api/openapi.json",
        redoc_url="/api/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(auth_router, prefix="/api")
    # tags before books: "/books/tags" must not match "/books/{book_id}"
    app.include_router(tags_router, prefix="/api")
    app.include_router(books_router, prefix="/api")
    app.include_router(categories_router, prefix="/api")
    app.include_router(users_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "bookstore.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.environment == "development",
    )
