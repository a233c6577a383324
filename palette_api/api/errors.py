"""Exception handlers for the Palette API.

Maps the core exception taxonomy onto JSON responses. Every error body
includes the deployed version label.
"""

import traceback

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from palette_api.api.models import ErrorResponse, NotFoundResponse
from palette_api.config.settings import Settings
from palette_api.core.exceptions import InternalError, NotFoundError, PaletteAPIError

logger = structlog.get_logger(__name__)


def _settings(request: Request) -> Settings:
    return request.app.state.settings


def error_response(
    status_code: int,
    error: str,
    version: str,
    exc: BaseException | None = None,
    include_detail: bool = False,
) -> JSONResponse:
    """Build a JSON error response, optionally with exception detail."""
    body = ErrorResponse(error=error, version=version)
    if include_detail and exc is not None:
        body.message = str(exc)
        body.stack = "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", exclude_none=True),
    )


def not_found_response(path: str, version: str) -> JSONResponse:
    """Build the 404 body for an unmatched path."""
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=NotFoundResponse(path=path, version=version).model_dump(mode="json"),
    )


# =============================================================================
# Handlers
# =============================================================================


async def palette_error_handler(request: Request, exc: PaletteAPIError) -> JSONResponse:
    """Handle errors raised deliberately by routes."""
    settings = _settings(request)

    if isinstance(exc, NotFoundError):
        return not_found_response(exc.path, settings.app_version)

    if isinstance(exc, InternalError):
        cause = exc.__cause__ or exc
        logger.error(
            "internal_error",
            path=request.url.path,
            method=request.method,
            error=exc.message,
            cause=str(cause),
            error_type=type(cause).__name__,
        )
        return error_response(
            exc.status_code,
            exc.message,
            settings.app_version,
            exc=cause,
            include_detail=settings.is_development,
        )

    logger.info(
        "request_rejected",
        path=request.url.path,
        status_code=exc.status_code,
        error=exc.message,
    )
    return error_response(exc.status_code, exc.message, settings.app_version)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Unmatched paths and unsupported methods both answer 404."""
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return await palette_error_handler(request, NotFoundError(request.url.path))
    return error_response(exc.status_code, str(exc.detail), _settings(request).app_version)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    settings = _settings(request)
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal server error",
        settings.app_version,
        exc=exc,
        include_detail=settings.is_development,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install all handlers on an application."""
    app.add_exception_handler(PaletteAPIError, palette_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
