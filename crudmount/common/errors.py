"""
Error Definitions

Defines custom exception classes used in the application for unified error handling.
"""

from typing import Any, Optional


class AppError(Exception):
    """
    Application Base Exception

    Base class for all custom exceptions, containing error message, type, and code.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "app_error",
        code: str = "internal_error",
        details: Optional[dict[str, Any]] = None,
        status_code: int = 500,
    ):
        """
        Initialize exception

        Args:
            message: Error message
            error_type: Error type
            code: Error code
            details: Extra error details
            status_code: HTTP status code
        """
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.code = code
        self.details = details or {}
        self.status_code = status_code

    def to_envelope(self, status_code: Optional[int] = None) -> dict[str, Any]:
        """
        Convert to the response envelope format (for API response)

        Args:
            status_code: Overrides the exception's own status code

        Returns:
            dict: {"status": ..., "errors": [...], "data": None}
        """
        return {
            "status": status_code or self.status_code,
            "errors": [self.message],
            "data": None,
        }


class BindError(AppError):
    """
    Request Binding Error

    Raised when path, query or body parameters cannot be bound into a request object.
    """

    def __init__(
        self,
        message: str = "Invalid request payload",
        code: str = "bind_error",
        details: Optional[dict[str, Any]] = None,
        status_code: int = 400,
    ):
        super().__init__(
            message=message,
            error_type="bind_error",
            code=code,
            details=details,
            status_code=status_code,
        )


class NotFoundError(AppError):
    """
    Resource Not Found Error

    Raised when a keyed lookup matches no live record.
    """

    def __init__(
        self,
        message: str = "record not found",
        code: str = "not_found",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="not_found_error",
            code=code,
            details=details,
            status_code=404,
        )


class PersistenceError(AppError):
    """
    Persistence Error

    Raised for any other storage failure: connectivity, constraint violations, unknown columns.
    """

    def __init__(
        self,
        message: str = "Storage error",
        code: str = "persistence_error",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="persistence_error",
            code=code,
            details=details,
            status_code=500,
        )
