"""
Custom exception handlers for consistent API error responses.

Services raise the exceptions below; the handlers registered by
`register_exception_handlers` turn them into the error envelope

    {"success": false, "error": "...", "error_code": "...", "path": "..."}
"""

import logging
from typing import Any, Dict, Optional

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class APIError(HTTPException):
    """Base API error with consistent structure"""

    def __init__(
        self,
        status_code: int,
        detail: str,
        error_code: Optional[str] = None,
        headers: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.error_code = error_code

    def __str__(self) -> str:
        return str(self.detail)


class NotFoundError(APIError):
    """Resource not found error"""

    def __init__(
        self, detail: str = "Resource not found", error_code: str = "NOT_FOUND"
    ):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND, detail=detail, error_code=error_code
        )


class ValidationError(APIError):
    """Validation error"""

    def __init__(
        self, detail: str = "Validation failed", error_code: str = "VALIDATION_ERROR"
    ):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            error_code=error_code,
        )


class InvalidInputError(ValidationError):
    """Malformed date, time, email or guest count"""

    def __init__(self, detail: str = "Invalid input"):
        super().__init__(detail=detail, error_code="INVALID_INPUT")


class AuthenticationError(APIError):
    """Authentication error"""

    def __init__(
        self, detail: str = "Invalid credentials", error_code: str = "AUTH_FAILED"
    ):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            error_code=error_code,
        )


class ConflictError(APIError):
    """Resource conflict error"""

    def __init__(self, detail: str = "Resource conflict", error_code: str = "CONFLICT"):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT, detail=detail, error_code=error_code
        )


class StatusTransitionError(ConflictError):
    """Status change rejected by the transition table"""

    def __init__(self, current: str, requested: str):
        super().__init__(
            detail=f"Cannot change status from {current} to {requested}",
            error_code="INVALID_STATUS_TRANSITION",
        )
        self.current = current
        self.requested = requested


class PersistenceError(APIError):
    """Storage unreachable or write failure. The message stays generic."""

    def __init__(self, detail: str = "A storage error occurred. Please try again later."):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
            error_code="PERSISTENCE_ERROR",
        )


class ServiceUnavailableError(APIError):
    """A dependency such as the database cannot be reached"""

    def __init__(self, detail: str = "Service unavailable", error_code: str = "SERVICE_UNAVAILABLE"):
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=detail,
            error_code=error_code,
        )


def _error_body(request: Request, message: str, error_code: Optional[str]) -> Dict[str, Any]:
    return {
        "success": False,
        "error": message,
        "error_code": error_code,
        "path": str(request.url.path),
    }


async def handle_api_error(request: Request, exc: APIError) -> JSONResponse:
    """Handle custom API errors"""
    if exc.status_code >= 500:
        logger.error(f"{exc.error_code} at {request.url.path}: {exc.detail}")
    else:
        logger.warning(f"{exc.error_code} at {request.url.path}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(request, exc.detail, exc.error_code),
        headers=exc.headers,
    )


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Keep plain HTTPExceptions (404 routes, 405) in the same envelope"""
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(request, str(exc.detail), "HTTP_ERROR"),
        headers=exc.headers,
    )


async def handle_value_error(request: Request, exc: ValueError) -> JSONResponse:
    """Convert ValueError to consistent API response"""
    logger.warning(f"ValueError at {request.url.path}: {str(exc)}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(request, str(exc), "VALIDATION_ERROR"),
    )


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report the first schema error in plain words"""
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", []) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else first.get("msg", message)
    logger.warning(f"Request validation failed at {request.url.path}: {message}")
    body = _error_body(request, message, "REQUEST_VALIDATION_ERROR")
    body["details"] = [
        {"loc": list(err.get("loc", [])), "msg": err.get("msg")} for err in errors
    ]
    return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content=body)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error at {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(request, "Internal server error", "INTERNAL_ERROR"),
    )


def register_exception_handlers(app):
    """Register all exception handlers with the FastAPI app"""
    app.add_exception_handler(APIError, handle_api_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(ValueError, handle_value_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
