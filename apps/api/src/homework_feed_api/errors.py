"""Map feed errors onto HTTP responses."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi.responses import JSONResponse

from homework_feed_core.errors import (
    ConfigurationError,
    FeedError,
    StoreError,
    UpstreamError,
)

from .schemas.common import ErrorResponse

if TYPE_CHECKING:
    from fastapi import Request

logger = logging.getLogger(__name__)

STATUS_INTERNAL_ERROR = 500
STATUS_BAD_GATEWAY = 502
INTERNAL_ERROR_CODE = "internal_error"

# First match wins; order subclasses before their bases.
_STATUS_BY_ERROR: list[tuple[type[FeedError], int]] = [
    (ConfigurationError, STATUS_INTERNAL_ERROR),
    (UpstreamError, STATUS_BAD_GATEWAY),
    (StoreError, STATUS_INTERNAL_ERROR),
]


def _error_json(status_code: int, detail: str, code: str) -> JSONResponse:
    payload = ErrorResponse(detail=detail, code=code)
    return JSONResponse(status_code=status_code, content=payload.model_dump())


def feed_error_to_response(exc: FeedError) -> JSONResponse:
    """Build the client-visible response for a known feed failure."""
    status_code = STATUS_INTERNAL_ERROR
    for error_type, mapped in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            status_code = mapped
            break
    return _error_json(status_code, str(exc), exc.code)


def internal_error_to_response(exc: Exception) -> JSONResponse:
    """Build a 500 response carrying the failure detail."""
    detail = f"Internal Exception: {exc}" if str(exc) else f"Internal Exception: {type(exc).__name__}"
    return _error_json(STATUS_INTERNAL_ERROR, detail, INTERNAL_ERROR_CODE)


async def feed_error_handler(request: Request, exc: FeedError) -> JSONResponse:
    """FastAPI exception handler for :class:`FeedError` and subclasses."""
    logger.warning("%s %s failed: %s", request.method, request.url.path, exc)
    return feed_error_to_response(exc)


async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler: any other failure becomes a JSON ``internal_error``."""
    logger.error("%s %s crashed", request.method, request.url.path, exc_info=exc)
    return internal_error_to_response(exc)
