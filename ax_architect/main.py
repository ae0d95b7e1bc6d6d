"""
FastAPI application entrypoint for the AX Architect API.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ax_architect.api.routes import CORS_HEADERS, router as api_router
from ax_architect.core.config import AppSettings, get_settings
from ax_architect.core.errors import UNKNOWN_ERROR_MESSAGE, InputValidationError, ServiceError
from ax_architect.core.logging import configure_logging

logger = logging.getLogger(__name__)


async def _service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    """Render taxonomy errors as ``{"error": message}``."""
    if isinstance(exc, InputValidationError):
        logger.info("Rejected %s: %s", request.url.path, exc.violations)
    return JSONResponse(status_code=int(exc.status_code), content={"error": exc.message})


async def _cors_and_fallback(request: Request, call_next):
    """Attach CORS headers to every response and mask unexpected failures."""
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        response = JSONResponse(status_code=500, content={"error": UNKNOWN_ERROR_MESSAGE})
    response.headers.update(CORS_HEADERS)
    return response


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """Factory for the FastAPI application."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    if not settings.gateway.is_configured:
        logger.error(
            "LOVABLE_API_KEY is not set; generation requests will fail until it is configured."
        )

    app = FastAPI(
        title="AX Architect API",
        version="0.1.0",
        description="Workflow architecture analysis and AX idea generation over an AI gateway.",
    )
    app.add_exception_handler(ServiceError, _service_error_handler)
    app.middleware("http")(_cors_and_fallback)
    app.include_router(api_router, prefix="/api")
    return app


app = create_app()

__all__ = ["app", "create_app"]
