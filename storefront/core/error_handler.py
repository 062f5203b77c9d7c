"""
Error handling and sanitization

- StorefrontError subclasses → mapped to 404/400/409 with their code and details,
  messages shown as written (truncated)
- Unhandled exceptions → logged with traceback, generic 500 returned to client
- Validation errors → left to FastAPI (safe to expose)
"""
import logging
import traceback
from typing import Union

from fastapi import Request, HTTPException
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from storefront.core.config import settings
from storefront.core.exceptions import StorefrontError, DataIntegrityError

logger = logging.getLogger(__name__)

# Patterns that indicate internal/sensitive error information
SENSITIVE_PATTERNS = [
    "password",
    "secret",
    "token",
    "credential",
    "sqlalchemy",
    "asyncpg",
    "aiosqlite",
    "postgresql",
    "sqlite",
    "traceback",
    "file \"",
    "/storefront/",
    "\\storefront\\",
]


def is_sensitive_error(message: str) -> bool:
    """Check if error message contains sensitive information."""
    message_lower = message.lower()
    return any(pattern in message_lower for pattern in SENSITIVE_PATTERNS)


def sanitize_error_message(error: Union[str, Exception]) -> str:
    """
    Sanitize an error message for safe client exposure.

    Args:
        error: The error string or exception

    Returns:
        Sanitized error message safe for client
    """
    if isinstance(error, str):
        message = error
    else:
        message = str(error)

    if settings.DEBUG:
        return message

    if is_sensitive_error(message):
        return "An internal error occurred. Please try again later."

    return truncate_message(message)


def truncate_message(message: str, limit: int = 200) -> str:
    if len(message) > limit:
        return message[:limit] + "..."
    return message


async def storefront_error_handler(request: Request, exc: StorefrontError) -> JSONResponse:
    """Map the storefront error taxonomy onto HTTP responses."""
    if isinstance(exc, DataIntegrityError):
        logger.error(f"Data integrity failure on {request.method} {request.url.path}: {exc.message} {exc.details}")
    else:
        logger.info(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")

    body = exc.to_dict()
    # 4xx messages are written by the services for the caller
    if exc.status_code >= 500:
        body["message"] = sanitize_error_message(exc.message)
    else:
        body["message"] = truncate_message(exc.message)
    return JSONResponse(status_code=exc.status_code, content=body)


class ErrorSanitizationMiddleware(BaseHTTPMiddleware):
    """
    Catch unhandled exceptions and sanitize error responses.

    - In production: Returns generic error, logs full details
    - In development: Returns full error for debugging
    """

    async def dispatch(self, request: Request, call_next):
        try:
            response = await call_next(request)
            return response
        except HTTPException:
            raise
        except Exception as e:
            error_id = f"{request.client.host if request.client else 'unknown'}-{id(e)}"
            logger.error(
                f"Unhandled exception [{error_id}]: {type(e).__name__}: {str(e)}\n"
                f"Path: {request.url.path}\n"
                f"Method: {request.method}\n"
                f"Traceback:\n{traceback.format_exc()}"
            )

            if settings.DEBUG:
                return JSONResponse(
                    status_code=500,
                    content={
                        "error": "internal_error",
                        "message": str(e),
                        "type": type(e).__name__,
                        "error_id": error_id,
                    }
                )
            return JSONResponse(
                status_code=500,
                content={
                    "error": "internal_error",
                    "message": "An unexpected error occurred. Please try again later.",
                    "error_id": error_id,
                }
            )
