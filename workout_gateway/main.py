"""FastAPI application entry point."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from workout_gateway import __version__
from workout_gateway.config import Settings, get_settings
from workout_gateway.errors import GatewayError
from workout_gateway.logging_config import configure_logging
from workout_gateway.models.schemas import ErrorResponse
from workout_gateway.models.workout_library import WORKOUT_CATALOG
from workout_gateway.routers import health, recommendations
from workout_gateway.services.recommender_client import RecommenderClient, build_http_client


logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


async def handle_gateway_error(request: Request, exc: GatewayError) -> JSONResponse:
    return _error_response(exc.status_code, exc.message)


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = _error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Rejected malformed request to %s: %s", request.url.path, exc.errors())
    return _error_response(400, "Invalid request body")


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error while serving %s", request.url.path)
    return _error_response(500, "Internal server error")


def _resolve_frontend_file(dist_dir: Path, requested: str) -> Path | None:
    """Return the bundle file for a request path, falling back to index.html."""

    root = dist_dir.resolve()
    if requested:
        candidate = (root / requested).resolve()
        if candidate.is_relative_to(root) and candidate.is_file():
            return candidate
    index = root / "index.html"
    return index if index.is_file() else None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the shared upstream HTTP client for the lifetime of the app."""

    settings: Settings = app.state.settings
    async with build_http_client() as http_client:
        app.state.recommender_client = RecommenderClient(
            http_client,
            settings.recommender_base_url,
            health_timeout=settings.health_timeout_seconds,
        )
        logger.info("Workout gateway running at http://%s:%s", settings.host, settings.port)
        logger.info("Forwarding profile requests to %s", settings.recommender_base_url)
        yield


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="Workout Gateway",
        description="Workout catalog and recommendation service gateway",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.catalog = WORKOUT_CATALOG

    app.add_exception_handler(GatewayError, handle_gateway_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    # Include routers
    app.include_router(recommendations.router)
    app.include_router(health.router)

    # Registered last so it only sees paths no API route matched.
    @app.get("/{full_path:path}", include_in_schema=False)
    async def serve_frontend(full_path: str):
        """Serve the front-end bundle, defaulting to index.html for client-side routes."""
        path = _resolve_frontend_file(settings.frontend_dist_dir, full_path)
        if path is None:
            logger.warning("Front-end bundle not found in %s", settings.frontend_dist_dir)
            return _error_response(404, "Front-end bundle not found")
        return FileResponse(path)

    return app


app = create_app()
