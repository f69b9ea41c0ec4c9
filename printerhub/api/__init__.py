"""printerhub REST API: FastAPI application factory."""

from __future__ import annotations

import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from printerhub import __version__
from printerhub.api.deps import dispose_engine, get_engine, init_session_factory
from printerhub.api.errors import register_error_handlers
from printerhub.api.middleware.request_id import RequestIDMiddleware
from printerhub.api.routers import brands, printers
from printerhub.core.database import Base
from printerhub.core.logging import setup_logging

log = structlog.get_logger("printerhub.api")


def _create_tables_enabled() -> bool:
    return os.environ.get("PRINTERHUB_CREATE_TABLES", "1").lower() not in ("0", "false", "no")


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: init DB pool, create tables. Shutdown: dispose engine."""
    init_session_factory()
    if _create_tables_enabled():
        # gen_random_uuid() needs pgcrypto before PostgreSQL 13
        async with get_engine().begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        log.info("database.tables_ready")
    yield
    await dispose_engine()


def create_app() -> FastAPI:
    """Build and return the FastAPI application."""
    setup_logging()

    app = FastAPI(
        title="printerhub",
        version=__version__,
        docs_url="/api/v1/docs",
        openapi_url="/api/v1/openapi.json",
        lifespan=_lifespan,
    )

    register_error_handlers(app)

    cors_origins = os.environ.get("PRINTERHUB_CORS_ORIGINS", "http://localhost:3000")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in cors_origins.split(",")],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health", tags=["ops"])
    async def health() -> JSONResponse:
        return JSONResponse({"status": "ok"})

    app.include_router(brands.router, prefix="/api/v1/brands", tags=["brands"])
    app.include_router(printers.router, prefix="/api/v1/printers", tags=["printers"])

    return app
