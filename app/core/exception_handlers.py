"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to HTTP responses (SRP, OCP for adding new handlers).
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.domain.exceptions import EventHubException, PersistenceException

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status when applicable
_ERROR_CODE_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "FOREIGN_KEY_VIOLATION": 400,
    "RESOURCE_NOT_FOUND": 404,
    "CASCADE_INCOMPLETE": 500,
    "PERSISTENCE_ERROR": 500,
}

# Request locations that prefix pydantic error locs and are not part of the field name.
_LOC_SOURCES = frozenset({"body", "query", "path"})


def _field_name(loc: tuple[Any, ...]) -> str:
    parts = [str(p) for p in loc if p not in _LOC_SOURCES]
    return ".".join(parts) if parts else str(loc[0]) if loc else "body"


def _field_message(msg: str) -> str:
    return msg.removeprefix("Value error, ")


def _eventhub_exception_handler(
    request: Request, exc: EventHubException
) -> JSONResponse:
    """Return JSON from EventHubException.to_dict() with appropriate status code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    if status >= 500:
        logger.error("%s on %s %s: %s", exc.error_code, request.method, request.url.path, exc.details)
    return JSONResponse(
        status_code=status,
        content=exc.to_dict(),
    )


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 400 with one field/message pair per failing input."""
    errors = [
        {"field": _field_name(tuple(e.get("loc", ()))), "message": _field_message(e.get("msg", ""))}
        for e in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={
            "error": "VALIDATION_ERROR",
            "message": "Validation failed",
            "details": {},
            "errors": errors,
        },
    )


def _persistence_exception_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    """Return 500 with a generic message; engine text only goes to the log."""
    logger.exception(
        "Database error on %s %s", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(status_code=500, content=PersistenceException().to_dict())


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (status + detail)."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "HTTP_ERROR", "message": exc.detail, "details": {}},
        headers=getattr(exc, "headers", None),
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    detail: Any = str(exc) if settings.debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": detail, "details": {}},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: EventHubException (and
    subclasses), RequestValidationError, SQLAlchemyError,
    StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(EventHubException, _eventhub_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, _persistence_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
