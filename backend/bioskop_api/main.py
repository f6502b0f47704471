"""
Bioskop API: FastAPI Application Factory
=========================================

What:  Creates and configures the FastAPI application and runs it under uvicorn.
How:   `create_app()` wires middleware, exception handlers and routers; the
       lifespan builds the shared `Database` handle and verifies the store is
       reachable before the first request is served.
Who:   `uvicorn bioskop_api.main:app`, the `bioskop-api` console script, tests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:  Request ID → Access Log               │
    │                                                     │
    │  Routes:                                            │
    │    /bioskop, /bioskop/{id}   (also /venues)         │
    │    /health                                          │
    │                                                     │
    │  Exception Handlers:                                │
    │    Validation→400 │ NotFound→404 │ Database→500     │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  logging → Database handle → SELECT 1 (fatal on failure)
    Shutdown: dispose the engine's pool
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bioskop_api import __version__
from bioskop_api.config import settings
from bioskop_api.database import Database
from bioskop_api.exceptions import (
    INVALID_INPUT,
    DatabaseError,
    NotFoundError,
    ValidationError,
)
from bioskop_api.middleware.logging import RequestLoggingMiddleware
from bioskop_api.middleware.request_id import RequestIDMiddleware, request_id_var
from bioskop_api.routes import bioskop, health

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure the root logger once, before anything else logs.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s, to stdout.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # The access middleware already logs each request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.log_level == "DEBUG" else logging.WARNING
    )


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup and shutdown.

    A store that cannot be reached at startup is fatal: the error is logged
    and re-raised, and uvicorn exits without serving.
    """
    setup_logging()
    logger.info("Bioskop API %s starting up...", __version__)

    db: Optional[Database] = getattr(app.state, "db", None)
    if db is None:
        db = Database.from_settings(settings)
        app.state.db = db

    try:
        await db.ping()
    except Exception as e:
        logger.error("Gagal koneksi DB: %s", str(e))
        await db.dispose()
        raise

    logger.info("DATABASE IS CONNECTED")
    logger.info("Server running at http://%s:%d", settings.host, settings.port)

    yield

    logger.info("Bioskop API shutting down...")
    await db.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to `{"error": message}` responses.

    Handler table:
        RequestValidationError → 400 "Invalid input" (bad JSON, wrong types, bad path id)
        ValidationError        → 400 with its message
        NotFoundError          → 404 "Data tidak ditemukan"
        DatabaseError          → 500 with its per-operation message
        Exception              → 500 generic message, traceback logged
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Invalid input: %s", rid, exc.errors())
        return _error(400, INVALID_INPUT)

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return _error(400, exc.message)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error(404, exc.message)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return _error(500, exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return _error(500, "Terjadi kesalahan pada server")


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(database: Optional[Database] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        database: A prebuilt handle (tests pass an SQLite one). When omitted
                  the lifespan builds one from settings.
    """
    app = FastAPI(
        title="Bioskop API",
        description="CRUD service for cinema venue records.",
        version=__version__,
        lifespan=lifespan,
    )
    if database is not None:
        app.state.db = database

    # Last added runs first: Request ID wraps the access log
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(bioskop.router, prefix="/bioskop")
    app.include_router(bioskop.router, prefix="/venues", include_in_schema=False)
    app.include_router(health.router)

    return app


app = create_app()


def main() -> None:
    """Console entry point: serve `app` on the configured host and port."""
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
