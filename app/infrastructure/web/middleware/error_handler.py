"""
Global error handler middleware for the FastAPI application.
Catches and formats all exceptions consistently.
"""

import logging
import traceback
from typing import Any, Dict
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from fastapi import status
import json

from app.config import settings
from app.domain.models.base import (
    DomainException, ValidationError, EntityNotFoundError, ForbiddenError,
    RefreshRedirectError
)

logger = logging.getLogger(__name__)


def status_for_exception(exc: Exception) -> int:
    """HTTP status code reported for a domain exception."""
    if isinstance(exc, RefreshRedirectError):
        return status.HTTP_303_SEE_OTHER
    if isinstance(exc, ValidationError):
        return status.HTTP_422_UNPROCESSABLE_ENTITY
    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, ForbiddenError):
        return status.HTTP_403_FORBIDDEN
    if isinstance(exc, DomainException):
        return status.HTTP_400_BAD_REQUEST
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_title(status_code: int) -> str:
    return {
        status.HTTP_400_BAD_REQUEST: "Bad Request",
        status.HTTP_403_FORBIDDEN: "Forbidden",
        status.HTTP_404_NOT_FOUND: "Not Found",
        status.HTTP_422_UNPROCESSABLE_ENTITY: "Validation Error",
    }.get(status_code, "Internal Server Error")


def public_message(exc: DomainException) -> str:
    """Message shown to the caller. Lookup failures do not echo the missing ID."""
    if isinstance(exc, EntityNotFoundError):
        return f"{exc.entity_type} not found"
    return exc.message


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Middleware to handle all uncaught exceptions and format error responses.
    """

    async def dispatch(self, request: Request, call_next):
        """
        Process the request and handle any exceptions.
        """
        try:
            response = await call_next(request)
            return response
        except Exception as exc:
            return await self.handle_exception(request, exc)

    async def handle_exception(self, request: Request, exc: Exception) -> JSONResponse:
        """
        Handle different types of exceptions and return appropriate responses.
        """
        if isinstance(exc, DomainException):
            logger.info(
                "Domain exception on %s %s: %s",
                request.method, request.url.path, exc.message
            )
        else:
            logger.error(
                f"Unhandled exception: {type(exc).__name__}: {str(exc)}",
                exc_info=True,
                extra={
                    "request_path": request.url.path,
                    "request_method": request.method,
                    "client_host": request.client.host if request.client else None
                }
            )

        error_response = self.format_error_response(exc)

        if settings.debug and not isinstance(exc, DomainException):
            error_response["debug"] = {
                "exception_type": type(exc).__name__,
                "traceback": traceback.format_exc().split("\n")
            }

        return JSONResponse(
            status_code=error_response.get("status_code", 500),
            content=error_response
        )

    def format_error_response(self, exc: Exception) -> Dict[str, Any]:
        """
        Format exception into a consistent error response structure.
        """
        error_response = {
            "error": "Internal Server Error",
            "message": "An unexpected error occurred",
            "status_code": status.HTTP_500_INTERNAL_SERVER_ERROR
        }

        if isinstance(exc, DomainException) and not isinstance(exc, RefreshRedirectError):
            status_code = status_for_exception(exc)
            error_response.update({
                "error": error_title(status_code),
                "message": public_message(exc),
                "error_code": exc.code,
                "status_code": status_code
            })
        elif isinstance(exc, json.JSONDecodeError):
            error_response.update({
                "error": "Invalid JSON",
                "message": "The request body contains invalid JSON",
                "status_code": status.HTTP_400_BAD_REQUEST
            })
        elif isinstance(exc, PermissionError):
            error_response.update({
                "error": "Forbidden",
                "message": "You don't have permission to perform this action",
                "status_code": status.HTTP_403_FORBIDDEN
            })

        return error_response
