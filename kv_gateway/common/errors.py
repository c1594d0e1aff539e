"""
Error Definitions

Defines custom exception classes used in the application for unified error handling.
Every error is reported to clients as plain text prefixed with "Error: ".
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

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to dictionary format (for logging and debugging)

        Returns:
            dict: Error information dictionary
        """
        result = {
            "error": {
                "message": self.message,
                "type": self.error_type,
                "code": self.code,
            }
        }
        if self.details:
            result["error"]["details"] = self.details
        return result

    def to_text(self) -> str:
        """
        Convert to the plain text body returned to clients

        Returns:
            str: "Error: <message>"
        """
        return f"Error: {self.message}"


class ValidationError(AppError):
    """
    Request Validation Error

    Raised when the request body or path does not have the expected shape.
    Always raised before any store call is issued.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        code: str = "validation_error",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="validation_error",
            code=code,
            details=details,
            status_code=400,
        )


class StoreError(AppError):
    """
    Key-Value Store Error

    Raised when the underlying store operation fails (connection, timeout, protocol or command error).
    """

    def __init__(
        self,
        message: str = "Store error",
        code: str = "store_error",
        details: Optional[dict[str, Any]] = None,
        status_code: int = 502,
    ):
        super().__init__(
            message=message,
            error_type="store_error",
            code=code,
            details=details,
            status_code=status_code,
        )
