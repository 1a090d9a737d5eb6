"""
NZWalks Backend — FastAPI Application Factory
===============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn nzwalks.main:app).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────┐ ┌──────┐ ┌─────────────┐  │
    │  │  Req ID  │→│ Logging │→│ GZip │→│    CORS     │  │
    │  └──────────┘ └─────────┘ └──────┘ └─────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  /regions  /walks  /walkdifficulties  /health       │
    │                                                     │
    │  Exception Handlers:                                │
    │  ValidationError→400 │ NotFound→404 │ other→500     │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  logging → wait for database (bounded retries) → ready
    Shutdown: dispose database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from nzwalks import __version__
from nzwalks.config import settings
from nzwalks.database import dispose_engine, wait_for_database
from nzwalks.exceptions import FieldErrors, NotFoundError, ValidationError
from nzwalks.middleware.logging import RequestLoggingMiddleware
from nzwalks.middleware.request_id import RequestIDMiddleware, request_id_var
from nzwalks.routes import health, regions, walk_difficulties, walks
from nzwalks.services.validators import field_error_key

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s on stdout
    (container runtimes collect stdout).
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Our access middleware replaces uvicorn's access log
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("=" * 60)
    logger.info("NZWalks Backend %s starting up...", __version__)

    try:
        await wait_for_database()
        logger.info("Database reachable")
    except Exception as e:
        # Keep serving so /health can report the outage
        logger.error(
            "Database unreachable after %d attempts: %s",
            settings.db_connect_attempts,
            str(e),
        )

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("NZWalks Backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _field_key(loc: List[Any]) -> str:
    """("body", "regionId") → "RegionId", matching the validator's error keys."""
    parts = [str(part) for part in loc if part != "body"]
    if not parts:
        return "body"
    return field_error_key(".".join(parts))


def request_validation_field_errors(exc: RequestValidationError) -> FieldErrors:
    """Collapse FastAPI's per-error list into the field-error mapping shape."""
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        if error.get("type") == "json_invalid":
            key = "body"
        else:
            key = _field_key(list(error.get("loc", ())))
        errors.setdefault(key, []).append(error.get("msg", "Invalid value"))
    return errors


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        ValidationError          → 400 with field-error mapping
        RequestValidationError   → 404 for a malformed path id,
                                   400 for a body that is not a JSON object
                                   (field type errors are reported by the
                                   route together with the rule errors)
        NotFoundError            → 404
        Exception (fallback)     → 500, details logged server-side only

    Persistence errors are not special-cased; they land in the fallback.
    """

    def _validation_response(rid: str, errors: FieldErrors) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "error": "validation_error",
                "message": "One or more validation errors occurred.",
                "errors": errors,
                "request_id": rid,
            },
        )

    def _not_found_response(rid: str, message: str) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={"error": "not_found", "message": message, "request_id": rid},
        )

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation failed on fields %s", rid, exc.fields)
        return _validation_response(rid, exc.errors)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        # A path id that is not a UUID matches no resource route
        if any(error.get("loc", ("",))[0] == "path" for error in exc.errors()):
            return _not_found_response(rid, "The requested resource was not found")

        errors = request_validation_field_errors(exc)
        logger.warning("[%s] Malformed request body: fields %s", rid, sorted(errors))
        return _validation_response(rid, errors)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _not_found_response(request_id_var.get(""), exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all: never leak stack traces or SQL to the client."""
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred. Please try again or contact support.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="NZWalks API",
        description=(
            "CRUD API for New Zealand regions and the walks within them. "
            "Walks reference an existing region and difficulty level."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Middleware executes in REVERSE order of addition (last added = outermost)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "Location"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(regions.router)
    app.include_router(walks.router)
    app.include_router(walk_difficulties.router)
    app.include_router(health.router)

    return app


# uvicorn expects `nzwalks.main:app` to be importable
app = create_app()
