"""
Recipe API - FastAPI Application Factory
==========================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   uvicorn (uvicorn recipe_api.main:app) and the test suite, which passes
       its own in-memory Database.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │  Middleware:  Request ID → Access log → CORS        │
    │  Routes:      /api/recipes  /api/meal-plans  /health│
    │  app.state.database: engine + session factory       │
    │  Exception handlers → {"error": "<message>"}        │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, create tables (CREATE_SCHEMA_ON_STARTUP)
    Shutdown: dispose the database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from recipe_api import __version__
from recipe_api.config import settings
from recipe_api.database import Database
from recipe_api.exceptions import (
    NotFoundError,
    RecipeAPIError,
    ServerError,
    ValidationError,
)
from recipe_api.middleware.logging import AccessLogMiddleware
from recipe_api.middleware.request_id import RequestIDFilter, RequestIDMiddleware
from recipe_api.routes import health, meal_plans, recipes

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: 2024-01-15T12:00:00 [INFO] [3f2a9c1e] recipe_api.services.recipe_service: ...
    The bracketed request id comes from RequestIDFilter ("-" outside a request).
    Called once during app startup, before anything else logs.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIDFilter())

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] [%(request_id)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[handler],
        force=True,
    )

    # Per-request lines come from recipe_api.access instead
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    database: Database = app.state.database
    logger.info("Recipe API %s starting up (database: %s)", __version__, database.engine.url.render_as_string())

    if settings.create_schema_on_startup:
        await database.create_schema()

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    logger.info("Recipe API shutting down...")
    await database.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error(exc: RecipeAPIError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to status codes and the `{"error": ...}` body.

    Handler hierarchy:
        ValidationError          → 400
        NotFoundError            → exc.status_code (404, or 400 for meal plans)
        ServerError              → 500, driver details logged only
        RequestValidationError   → 400 (body is not a JSON object)
        HTTPException 404/405    → 404, empty body (unmatched route)
        Exception (fallback)     → 500
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("Validation error: %s | Context: %s", exc.message, exc.context)
        return _error(exc)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        logger.info("Not found: %s | Context: %s", exc.message, exc.context)
        return _error(exc)

    @app.exception_handler(ServerError)
    async def handle_server_error(request: Request, exc: ServerError):
        logger.error("Server error: %s | Context: %s", exc.message, exc.context)
        return _error(exc)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        logger.warning("Malformed request: %s", exc.errors())
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        # Unknown path or unsupported method: bare 404
        if exc.status_code in (404, 405):
            return Response(status_code=404)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all: stack trace is logged server-side only."""
        logger.error("Unexpected error: %s", str(exc), exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(database: Optional[Database] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        database: Datastore handle to serve from. Defaults to one built from
                  settings.database_url. Tests pass an in-memory SQLite Database.
    """
    app = FastAPI(
        title="Recipe API",
        description="Recipes and meal plans over a relational datastore.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.database = database or Database()

    # Middleware executes in REVERSE order of addition:
    # RequestID → AccessLog → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(recipes.router)
    app.include_router(meal_plans.router)

    return app


# uvicorn expects `recipe_api.main:app` to be importable
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "recipe_api.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )
