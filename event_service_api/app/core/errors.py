"""
Error taxonomy and its HTTP mapping.

Services raise one of three ``ServiceError`` subclasses:

* ``NotFoundError`` – no row matched the key (404);
* ``InvalidValuesError`` – nothing to write or a request that failed
  validation (400);
* ``StoreError`` – the database rejected or failed a statement (500).

``register_exception_handlers`` renders these, FastAPI's own HTTP and
validation errors, and anything unexpected, in the failure envelope
``{"error": ..., "success": false}``.
"""

import logging
from typing import Any, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base class for errors raised by the service layer."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "not found") -> None:
        super().__init__(message)


class InvalidValuesError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "invalid values") -> None:
        super().__init__(message)


class StoreError(ServiceError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(message: str) -> dict:
    return {"error": message, "success": False}


def describe_validation_errors(errors: Sequence[Any]) -> str:
    """Flatten pydantic error entries into ``field: message`` pairs."""
    parts = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ())]
        # Drop the "body"/"query"/"path" marker unless it is all there is.
        field = ".".join(loc[1:]) if len(loc) > 1 else ".".join(loc)
        msg = err.get("msg", "invalid value")
        parts.append(f"{field}: {msg}" if field else msg)
    return "; ".join(parts) or "invalid values"


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(describe_validation_errors(exc.errors())),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("internal server error"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the envelope-producing handlers on ``app``."""
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
