"""
Error Definitions

Defines the exception classes raised by content generators.
"""

from typing import Any, Optional


class AdapterError(Exception):
    """
    Adapter Base Exception

    Base class for all custom exceptions, containing error message, type, and code.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "adapter_error",
        code: str = "internal_error",
        details: Optional[dict[str, Any]] = None,
    ):
        """
        Initialize exception

        Args:
            message: Error message
            error_type: Error type
            code: Error code
            details: Extra error details
        """
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.code = code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to dictionary format

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


class ConfigurationError(AdapterError):
    """
    Configuration Error

    Raised at construction time when a required credential is missing
    or the selected auth method cannot be served. No request is attempted.
    """

    def __init__(
        self,
        message: str = "Invalid configuration",
        code: str = "missing_credential",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="configuration_error",
            code=code,
            details=details,
        )


class TransportError(AdapterError):
    """
    Transport Error

    Raised when the backend answers with a non-2xx status, or when the
    connection fails before or while a streaming body is read.
    """

    def __init__(
        self,
        message: str = "Transport error",
        status_code: Optional[int] = None,
        status_text: Optional[str] = None,
        code: str = "transport_error",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="transport_error",
            code=code,
            details=details,
        )
        self.status_code = status_code
        self.status_text = status_text

    @classmethod
    def from_status(
        cls,
        status_code: int,
        status_text: str,
        api_name: str = "Portkey API",
    ) -> "TransportError":
        """
        Build an error for a non-2xx response

        Args:
            status_code: HTTP status code
            status_text: HTTP reason phrase
            api_name: Prefix naming the failing API

        Returns:
            TransportError: Error carrying the status code and text
        """
        return cls(
            message=f"{api_name} error: {status_code} {status_text}".rstrip(),
            status_code=status_code,
            status_text=status_text,
            code="upstream_status",
        )

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.status_code is not None:
            result["error"]["status_code"] = self.status_code
        return result
