# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Error bodies carry a machine-readable code and, where possible, a hint
# on how to fix the problem.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class BookshelfException(Exception):
    """
    Base exception for the Bookshelf API.

    All custom exceptions inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: str = "BOOKSHELF_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# User Store Exceptions
# =============================================================================

class UserStoreUnavailableError(BookshelfException):
    """Raised when the external user store cannot be queried."""

    def __init__(self, table: str, error: str):
        super().__init__(
            message=f"User store unavailable: {error}",
            code="USER_STORE_UNAVAILABLE",
            status_code=503,
            suggestion="Check SUPABASE_URL, SUPABASE_SERVICE_KEY and that the table exists",
            details={"table": table},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def bookshelf_exception_handler(
    request: Request,
    exc: BookshelfException
) -> JSONResponse:
    """Convert BookshelfException to a JSON response."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors.

    Returns the pydantic error list under "errors" so clients can see
    which field was missing.
    """
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": jsonable_encoder(exc.errors()),
        }
    )
