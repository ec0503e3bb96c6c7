"""
Global exception handling for the application.
Every error leaves the API as ``{"message": "..."}`` with a matching status code.
"""

from typing import Any, Dict, Optional

import structlog
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = structlog.get_logger(__name__)


class AppError(Exception):
    """Base class for all application exceptions."""
    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class EntityNotFound(AppError):
    """Resource not found error."""
    def __init__(self, message: str = "Entity not found", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_404_NOT_FOUND, details)


class BadRequest(AppError):
    """Malformed or semantically invalid input."""
    def __init__(self, message: str = "Bad request", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_400_BAD_REQUEST, details)


class Conflict(BadRequest):
    """Duplicate of an existing unique record."""
    def __init__(self, message: str = "Already exists", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class Unauthorized(AppError):
    """Login failure (bad credentials, deactivated account)."""
    def __init__(self, message: str = "Invalid credentials", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_401_UNAUTHORIZED, details)


class Forbidden(AppError):
    """Authorization failure error."""
    def __init__(self, message: str = "Forbidden", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_403_FORBIDDEN, details)


# -- Authorization gate failures ---------------------------------------------


class TokenRequired(Unauthorized):
    def __init__(self, message: str = "Access token required"):
        super().__init__(message)


class InvalidToken(Forbidden):
    """Bad signature and expiry are reported identically."""
    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class AdminRequired(Forbidden):
    def __init__(self, message: str = "Admin access required"):
        super().__init__(message)


class EmployeeRequired(Forbidden):
    def __init__(self, message: str = "Employee access required"):
        super().__init__(message)


class StoreUnavailable(AppError):
    """The credential store lookup itself failed."""
    def __init__(self, message: str = "Server error"):
        super().__init__(message, status.HTTP_500_INTERNAL_SERVER_ERROR)


def _message_response(status_code: int, message: str, **extra: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message, **extra})


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return _message_response(exc.status_code, exc.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"field": ".".join(str(p) for p in err.get("loc", ()) if p != "body"), "message": err.get("msg")}
        for err in exc.errors()
    ]
    return _message_response(status.HTTP_400_BAD_REQUEST, "Invalid request", errors=errors)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all uncaught exceptions globally."""

    if isinstance(exc, AppError):
        return await app_error_handler(request, exc)

    logger.exception("Unhandled error", path=request.url.path, error=str(exc))
    return _message_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error")


def register_exception_handlers(app) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
