"""
Error taxonomy and centralized error translation.

Operational errors carry their own status code and a message that is safe
to show to clients. Anything else is treated as a programming error: it is
logged in full and the client only gets a generic 500.
"""

from typing import Any, Dict

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.logger import logger

GENERIC_ERROR_MESSAGE = "Something went wrong!"


class ErrorResponse(Exception):
    """Base class for operational errors"""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    is_operational = True

    def __init__(self, message: str, status_code: int = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)

    @property
    def status(self) -> str:
        return "fail" if 400 <= self.status_code < 500 else "error"


class ValidationError(ErrorResponse):
    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(ErrorResponse):
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(ErrorResponse):
    status_code = status.HTTP_404_NOT_FOUND


class DatabaseError(ErrorResponse):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class ErrorResponseModel(BaseModel):
    """Pydantic model for error responses"""
    status: str
    message: str


def original_url(request: Request) -> str:
    """Path plus query string, as the client sent it"""
    url = request.url.path
    if request.url.query:
        url += f"?{request.url.query}"
    return url


def _request_metadata(request: Request, status_code: int) -> Dict[str, Any]:
    return {
        "event": "error_response",
        "status_code": status_code,
        "method": request.method,
        "path": request.url.path,
    }


def translate_error(request: Request, exc: Exception) -> JSONResponse:
    """Turn any exception into the JSON error body the API promises"""
    if getattr(exc, "is_operational", False):
        metadata = _request_metadata(request, exc.status_code)
        if exc.status_code >= 500:
            logger.error(f"Error: {exc.message}", error=exc, metadata=metadata)
        else:
            logger.warning(f"Error: {exc.message}", metadata=metadata)
        return JSONResponse(
            status_code=exc.status_code,
            content={"status": exc.status, "message": exc.message},
        )

    logger.error(
        f"Unhandled exception: {exc}",
        error=exc,
        metadata=_request_metadata(request, status.HTTP_500_INTERNAL_SERVER_ERROR),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"status": "error", "message": GENERIC_ERROR_MESSAGE},
    )


def _format_location(loc) -> str:
    if not loc:
        return "request"
    parts = [str(part) for part in loc if part not in ("body", "query", "path")]
    return ".".join(parts) or str(loc[0])


def validation_error_from(exc: RequestValidationError) -> ValidationError:
    """Collapse framework validation errors into one readable ValidationError"""
    violations = [
        f"{_format_location(err.get('loc', ()))}: {err.get('msg', 'invalid value')}"
        for err in exc.errors()
    ]
    return ValidationError("; ".join(violations) or "Invalid request")


async def error_response_handler(request: Request, exc: ErrorResponse):
    """Handler for operational errors raised by route handlers"""
    return translate_error(request, exc)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Handler for body and query validation failures"""
    return translate_error(request, validation_error_from(exc))


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handler for routing errors; unmatched routes become NotFoundError"""
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        error = NotFoundError(f"Can't find {original_url(request)} on this server!")
    else:
        error = ErrorResponse(str(exc.detail), status_code=exc.status_code)
    return translate_error(request, error)
