# =============================================================================
# app/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized exception handling for the API.
# Domain errors carry a fixed message and status code; the handlers below
# turn them into {"error": ..., "code": ...} JSON bodies.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class TodoApiException(Exception):
    """
    Base exception for the Todo API.

    All custom exceptions inherit from this class and map to one
    HTTP status code and one machine-readable error code.
    """

    def __init__(
        self,
        message: str,
        code: str = "TODO_API_ERROR",
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result: dict[str, Any] = {
            "error": self.message,
            "code": self.code,
        }
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Todo Exceptions
# =============================================================================

class TodoValidationError(TodoApiException):
    """Raised when create/update input is missing or malformed."""

    def __init__(self, message: str = "Todo text is required"):
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            status_code=400,
        )


class TodoNotFoundError(TodoApiException):
    """Raised when an id does not resolve to an existing todo."""

    def __init__(self, todo_id: Any = None):
        super().__init__(
            message="Todo not found",
            code="TODO_NOT_FOUND",
            status_code=404,
        )
        self.todo_id = todo_id


class InvalidRequestBodyError(TodoApiException):
    """Raised when a request body is not valid JSON."""

    def __init__(self, error: str):
        super().__init__(
            message="Invalid request body",
            code="INVALID_REQUEST",
            status_code=400,
            details={"error": error},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def todo_api_exception_handler(
    request: Request,
    exc: TodoApiException
) -> JSONResponse:
    """Convert TodoApiException to JSON response."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request body validation errors.

    Malformed JSON or wrongly typed fields are client errors, answered
    with 400 like the domain validation error rather than FastAPI's 422.
    """
    logger.warning(f"Rejected request body on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=400,
        content={
            "error": "Invalid request body",
            "code": "INVALID_REQUEST",
            "details": {"errors": jsonable_encoder(exc.errors())},
        }
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "error": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )
