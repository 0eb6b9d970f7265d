# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Services raise these exceptions; the handlers below turn each one into a
# JSON response of the form {"error": "<message>"}.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class CustomerAPIException(Exception):
    """
    Base exception for the Customer API.

    All custom exceptions inherit from this class.
    The code is for logs only; clients see the message under "error".
    """

    def __init__(
        self,
        message: str,
        code: str = "CUSTOMER_API_ERROR",
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
        return {"error": self.message}


# =============================================================================
# Customer Exceptions
# =============================================================================

class CustomerNotFoundError(CustomerAPIException):
    """Raised when a customer id has no matching record."""

    def __init__(self, customer_id: str):
        super().__init__(
            message="Customer not found",
            code="CUSTOMER_NOT_FOUND",
            status_code=404,
            details={"customer_id": customer_id},
        )


class MissingRequiredFieldsError(CustomerAPIException):
    """Raised when a create request lacks name, email or document."""

    def __init__(self, missing: list[str]):
        super().__init__(
            message="Missing required fields",
            code="MISSING_REQUIRED_FIELDS",
            status_code=400,
            details={"missing": missing},
        )


class InvalidRequestBodyError(CustomerAPIException):
    """Raised when a request body has the wrong shape or field types."""

    def __init__(self, errors: list[Any] | None = None):
        super().__init__(
            message="Invalid request body",
            code="INVALID_REQUEST_BODY",
            status_code=400,
            details={"errors": errors or []},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def customer_api_exception_handler(
    request: Request,
    exc: CustomerAPIException
) -> JSONResponse:
    """Convert CustomerAPIException to JSON response."""
    logger.debug(f"{request.method} {request.url.path} -> {exc.status_code} {exc.code} {exc.details}")
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

    Covers malformed JSON and values of the wrong type (e.g. a number where
    a string is expected).
    """
    logger.debug(f"{request.method} {request.url.path} -> 400 invalid body: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body"}
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions, e.g. the database being unavailable."""
    logger.exception(f"Unexpected error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"}
    )
