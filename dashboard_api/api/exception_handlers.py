"""
===============================================================================
CRC CARD — api/exception_handlers.py (Centralized exception handling)
===============================================================================

Responsibilities:
  - Translate exceptions escaping a route into RFC 7807 responses.
  - Log errors with request_id + error_id.
  - Never leak internals for untyped exceptions in production.

Notes:
  - Mutation handlers collapse DatabaseError into form messages; only errors
    raised outside them reach here.

Collaborators:
  - crosscutting.error_responses: AppHTTPException, factories, app_exception_handler
  - crosscutting.exceptions: DashboardError, DatabaseError
  - crosscutting.config.get_settings
===============================================================================
"""

from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse

from ..crosscutting.config import get_settings
from ..crosscutting.error_responses import (
    AppHTTPException,
    app_exception_handler,
    database_error,
    internal_error,
)
from ..crosscutting.exceptions import DashboardError, DatabaseError
from ..crosscutting.logger import logger


def _request_id_from(request: Request) -> str | None:
    return getattr(getattr(request, "state", None), "request_id", None)


async def _handle_service_error(
    request: Request,
    *,
    exc: DashboardError,
    app_exc: AppHTTPException,
) -> JSONResponse:
    request_id = _request_id_from(request)

    logger.error(
        "service error",
        extra={
            "code": app_exc.code.value,
            "error_id": exc.error_id,
            "error": exc.message,
            "request_id": request_id,
        },
    )

    app_exc.errors = [{"error_id": exc.error_id}]
    return await app_exception_handler(request, app_exc)


async def database_error_handler(request: Request, exc: DatabaseError) -> JSONResponse:
    return await _handle_service_error(request, exc=exc, app_exc=database_error())


async def dashboard_error_handler(
    request: Request, exc: DashboardError
) -> JSONResponse:
    return await _handle_service_error(
        request, exc=exc, app_exc=internal_error("Internal error.")
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Full stacktrace in the log; generic body in the response."""
    request_id = _request_id_from(request)

    logger.error(
        "unhandled exception",
        exc_info=True,
        extra={"request_id": request_id, "error": str(exc)},
    )

    detail = "Internal error." if get_settings().is_production() else str(exc)

    return await app_exception_handler(request, internal_error(detail))


def register_exception_handlers(app) -> None:
    """
    Register handlers on the FastAPI app.

    The generic Exception handler goes last as the fallback.
    """
    app.add_exception_handler(DatabaseError, database_error_handler)
    app.add_exception_handler(DashboardError, dashboard_error_handler)
    app.add_exception_handler(AppHTTPException, app_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)


__all__ = ["register_exception_handlers"]
