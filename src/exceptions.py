"""
Custom exception classes for the Reckoning Ledger.

This module defines a hierarchy of custom exceptions that map to HTTP status codes
and provide consistent error responses across the API.

Exception hierarchy:
    AppException (base)
    ├── ResourceError
    │   ├── NotFoundError (404)
    │   ├── AlreadyExistsError (409)
    │   └── AccountBlockedError (409)
    ├── ValidationError (422)
    │   └── InvalidInputError
    └── PersistenceError (500)
"""

import uuid
from typing import Any


class AppException(Exception):
    """
    Base exception class for all application exceptions.

    All custom exceptions should inherit from this class to ensure
    consistent error handling and response formatting.

    Attributes:
        status_code: HTTP status code for the error
        error_code: Machine-readable error code
        message: Human-readable error message
        details: Optional additional error details
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for JSON response.

        Returns:
            Dictionary with error information
        """
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


# =============================================================================
# Resource Errors
# =============================================================================


class ResourceError(AppException):
    """Base class for resource-related errors."""

    def __init__(
        self,
        message: str,
        status_code: int,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=status_code,
            error_code=error_code,
            details=details,
        )


class NotFoundError(ResourceError):
    """Raised when a referenced account or user does not exist."""

    def __init__(
        self,
        resource: str = "Resource",
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        if message is None:
            message = f"{resource} not found"
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details,
        )


class AlreadyExistsError(ResourceError):
    """Raised when attempting to create a resource that already exists."""

    def __init__(
        self,
        resource: str = "Resource",
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        if message is None:
            message = f"{resource} already exists"
        super().__init__(
            message=message,
            status_code=409,
            error_code="ALREADY_EXISTS",
            details=details,
        )


class AccountBlockedError(ResourceError):
    """Raised when a balance operation targets a disabled account."""

    def __init__(
        self,
        account_id: uuid.UUID | None = None,
        message: str = "Account is blocked",
        details: dict[str, Any] | None = None,
    ) -> None:
        if details is None:
            details = {}
        if account_id is not None:
            details["account_id"] = str(account_id)

        super().__init__(
            message=message,
            status_code=409,
            error_code="ACCOUNT_BLOCKED",
            details=details,
        )
        self.account_id = account_id


# =============================================================================
# Validation Errors (422 Unprocessable Entity)
# =============================================================================


class ValidationError(AppException):
    """Base class for validation errors."""

    def __init__(
        self,
        message: str = "Validation failed",
        error_code: str = "VALIDATION_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=422,
            error_code=error_code,
            details=details,
        )


class InvalidInputError(ValidationError):
    """Raised when input data is invalid."""

    def __init__(
        self,
        field: str | None = None,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        if message is None and field:
            message = f"Invalid input for field: {field}"
        elif message is None:
            message = "Invalid input"

        super().__init__(
            message=message,
            error_code="INVALID_INPUT",
            details=details,
        )


# =============================================================================
# Persistence Error (500 Internal Server Error)
# =============================================================================


class PersistenceError(AppException):
    """Raised when the database rejects a unit of work; nothing was committed."""

    def __init__(
        self,
        message: str = "Storage operation failed",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=500,
            error_code="PERSISTENCE_ERROR",
            details=details,
        )
