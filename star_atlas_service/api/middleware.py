"""
Custom middleware and error handlers for the FastAPI application.
Provides CORS, request logging, and a last-resort error envelope.
"""

import time
from typing import Callable
from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

import structlog

from star_atlas_service.core.config import settings
from star_atlas_service.api.schemas.common import create_error_response, to_json_response


logger = structlog.get_logger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for request/response logging."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request and log details."""
        start_time = time.perf_counter()

        logger.info(
            "Request started",
            method=request.method,
            url=str(request.url),
            client_ip=request.client.host if request.client else None,
        )

        try:
            response = await call_next(request)
        except Exception as e:
            process_time = time.perf_counter() - start_time
            logger.error(
                "Request failed",
                method=request.method,
                url=str(request.url),
                error=str(e),
                process_time=process_time,
            )
            return to_json_response(
                create_error_response("An internal server error occurred"),
                status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        process_time = time.perf_counter() - start_time
        response.headers["X-Process-Time"] = str(process_time)

        logger.info(
            "Request completed",
            method=request.method,
            url=str(request.url),
            status_code=response.status_code,
            process_time=process_time,
        )
        return response


async def unhandled_exception_handler(request: Request, exc: Exception) -> Response:
    """Return the error envelope for exceptions no route handled."""
    logger.error("Unhandled error", url=str(request.url), error=str(exc), exc_info=True)
    return to_json_response(
        create_error_response(str(exc) or "An unexpected error occurred"),
        status.HTTP_500_INTERNAL_SERVER_ERROR
    )


def add_middleware(app: FastAPI) -> None:
    """Add all middleware to the FastAPI app."""

    # CORS is fully open; callers are front-ends and gateways on other origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        max_age=settings.cors_max_age,
    )

    # Logging (last added runs first)
    app.add_middleware(LoggingMiddleware)

    app.add_exception_handler(Exception, unhandled_exception_handler)

    logger.info("Middleware configured successfully")
