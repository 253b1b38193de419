"""Custom exceptions for Sonos Gateway with proper HTTP status codes."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error responses."""

    GATEWAY_ERROR = "GATEWAY_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Configuration errors
    CONFIG_ERROR = "CONFIG_ERROR"
    CONFIG_MISSING = "CONFIG_MISSING"


class GatewayException(Exception):
    """Base exception for gateway errors with HTTP status code support.

    The Sonos operations themselves never raise; these exceptions cover
    application wiring problems surfaced through the HTTP layer.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.GATEWAY_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize gateway exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class ConfigurationException(GatewayException):
    """Configuration errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)
