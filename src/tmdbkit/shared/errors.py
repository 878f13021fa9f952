"""tmdbkit Error Handling Module

This module defines the error taxonomy for tmdbkit, providing structured
error classes with context information.

The error hierarchy follows these principles:
- One Source of Truth: All error codes are defined in ErrorCode enum
- Structured Context: ErrorContext provides additional information
- Single Origin: Only the API client raises these errors at runtime
- Proper Exception Chaining: Original exceptions are preserved
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Union

from tmdbkit.shared.constants import HTTPStatusCodes

# Type alias for primitive context values (str, int, float, bool only)
PrimitiveContextValue = Union[str, int, float, bool]

# Keys removed from safe_dict output by default
SAFE_DICT_MASK_KEYS: tuple[str, ...] = ("api_key",)

# Caller-initiated aborts surface as the event loop's own cancellation signal.
CancellationError = asyncio.CancelledError


class ErrorCode(str, Enum):
    """Error codes for tmdbkit.

    This enum serves as the single source of truth for all error codes
    used throughout the library.
    """

    # Transport Errors
    NETWORK_ERROR = "NETWORK_ERROR"
    API_TIMEOUT = "API_TIMEOUT"

    # HTTP Status Errors
    HTTP_ERROR = "HTTP_ERROR"
    API_AUTHENTICATION_FAILED = "API_AUTHENTICATION_FAILED"
    API_RESOURCE_NOT_FOUND = "API_RESOURCE_NOT_FOUND"
    API_RATE_LIMIT = "API_RATE_LIMIT"
    API_SERVER_ERROR = "API_SERVER_ERROR"

    # Response Errors
    DECODING_ERROR = "DECODING_ERROR"
    INVALID_JSON = "INVALID_JSON"

    # Configuration Errors
    CONFIG_ERROR = "CONFIG_ERROR"
    MISSING_CREDENTIALS = "MISSING_CREDENTIALS"


def _coerce_primitives(value: Any | None) -> dict[str, PrimitiveContextValue] | None:
    """Coerce additional_data values to primitives.

    Args:
        value: Input dictionary or None

    Returns:
        Dictionary with primitive values only, or None

    Raises:
        TypeError: If value is not a dict or contains unconvertible types
    """
    if value is None:
        return None

    if not isinstance(value, dict):
        error_msg = f"additional_data must be dict, got {type(value).__name__}"
        raise TypeError(error_msg)

    coerced: dict[str, PrimitiveContextValue] = {}
    for key, val in value.items():
        if isinstance(val, (str, int, float, bool)):
            coerced[key] = val
        elif isinstance(val, Enum):
            coerced[key] = val.value
        elif isinstance(val, Decimal):
            coerced[key] = float(val)
        else:
            error_msg = (
                f"Cannot coerce {type(val).__name__} to primitive type. "
                f"Only str, int, float, bool, Enum, Decimal are allowed."
            )
            raise TypeError(error_msg)

    return coerced


@dataclass(frozen=True)
class ErrorContext:
    """Context information for errors.

    Only primitive types (str, int, float, bool) are allowed in
    additional_data so that contexts serialize safely into log records.

    Attributes:
        operation: Optional operation name that caused the error
        url: Optional request URL (without query string)
        method: Optional HTTP method
        additional_data: Optional dict with primitive values only
    """

    operation: str | None = None
    url: str | None = None
    method: str | None = None
    additional_data: dict[str, PrimitiveContextValue] | None = None

    def __post_init__(self) -> None:
        """Post-initialization validation and coercion."""
        if self.additional_data is not None:
            coerced = _coerce_primitives(self.additional_data)
            object.__setattr__(self, "additional_data", coerced)

    def safe_dict(self, *, mask_keys: tuple[str, ...] | None = None) -> dict[str, Any]:
        """Export context as dict with sensitive keys removed.

        Args:
            mask_keys: Keys to drop from additional_data. Defaults to
                SAFE_DICT_MASK_KEYS.

        Returns:
            Dictionary with set fields and a guaranteed additional_data key.

        Example:
            >>> ErrorContext(operation="movie_details").safe_dict()
            {'operation': 'movie_details', 'additional_data': {}}
        """
        if mask_keys is None:
            mask_keys = SAFE_DICT_MASK_KEYS

        data: dict[str, Any] = {}
        if self.operation is not None:
            data["operation"] = self.operation
        if self.url is not None:
            data["url"] = self.url
        if self.method is not None:
            data["method"] = self.method

        data["additional_data"] = {
            key: val
            for key, val in (self.additional_data or {}).items()
            if key not in mask_keys
        }
        return data


class TMDbError(Exception):
    """Base exception class for all tmdbkit errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContext | None = None,
        original_error: BaseException | None = None,
    ) -> None:
        """Initialize TMDbError.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            context: Additional context information
            original_error: Original exception that caused this error
        """
        self.code = code
        self.message = message
        self.context = context or ErrorContext()
        self.original_error = original_error
        super().__init__(f"{code.value}: {message}")

    def __str__(self) -> str:
        """Return string representation of the error."""
        return f"{self.code.value}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging.

        Returns:
            Dictionary representation of the error with code, message,
            masked context, and original_error (if present)
        """
        return {
            "code": self.code.value,
            "message": self.message,
            "context": self.context.safe_dict(),
            "original_error": str(self.original_error) if self.original_error else None,
        }


class NetworkError(TMDbError):
    """Transport-level failure.

    Raised when the request never produced an HTTP response: connection
    refused, DNS failure, dropped connection, or timeout.
    """


class HTTPError(TMDbError):
    """Non-2xx HTTP response.

    Attributes:
        status_code: HTTP status code returned by the server
        body: Raw response body as text
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        status_code: int,
        body: str = "",
        context: ErrorContext | None = None,
        original_error: BaseException | None = None,
    ) -> None:
        super().__init__(code, message, context, original_error)
        self.status_code = status_code
        self.body = body

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["status_code"] = self.status_code
        data["body"] = self.body
        return data


class DecodingError(TMDbError):
    """Successful response whose body does not match the expected model.

    Attributes:
        type_name: Name of the model the body was decoded into
        validation_errors: Field-level errors when the failure came from pydantic
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        type_name: str,
        context: ErrorContext | None = None,
        original_error: BaseException | None = None,
        validation_errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(code, message, context, original_error)
        self.type_name = type_name
        self.validation_errors = validation_errors or []

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["type_name"] = self.type_name
        return data


class ConfigurationError(TMDbError):
    """Invalid or incomplete client configuration."""


# Convenience functions for common error scenarios
def create_network_error(
    message: str,
    url: str | None = None,
    method: str | None = None,
    original_error: BaseException | None = None,
    *,
    timeout: bool = False,
) -> NetworkError:
    """Create a transport error with context."""
    context = ErrorContext(operation="api_request", url=url, method=method)
    code = ErrorCode.API_TIMEOUT if timeout else ErrorCode.NETWORK_ERROR
    return NetworkError(code, message, context, original_error)


def _code_for_status(status_code: int) -> ErrorCode:
    if status_code == HTTPStatusCodes.UNAUTHORIZED:
        return ErrorCode.API_AUTHENTICATION_FAILED
    if status_code == HTTPStatusCodes.NOT_FOUND:
        return ErrorCode.API_RESOURCE_NOT_FOUND
    if status_code == HTTPStatusCodes.TOO_MANY_REQUESTS:
        return ErrorCode.API_RATE_LIMIT
    if status_code >= HTTPStatusCodes.INTERNAL_SERVER_ERROR:
        return ErrorCode.API_SERVER_ERROR
    return ErrorCode.HTTP_ERROR


def create_http_error(
    status_code: int,
    body: str,
    url: str | None = None,
    method: str | None = None,
) -> HTTPError:
    """Create an HTTP status error with context."""
    context = ErrorContext(
        operation="api_request",
        url=url,
        method=method,
        additional_data={"status_code": status_code},
    )
    return HTTPError(
        _code_for_status(status_code),
        f"Request failed with HTTP status {status_code}",
        status_code=status_code,
        body=body,
        context=context,
    )


def create_decoding_error(
    type_name: str,
    url: str | None = None,
    original_error: BaseException | None = None,
    validation_errors: list[dict[str, Any]] | None = None,
    *,
    invalid_json: bool = False,
) -> DecodingError:
    """Create a decoding error with context."""
    additional_data: dict[str, PrimitiveContextValue] = {
        "type_name": type_name,
        "validation_error_count": len(validation_errors) if validation_errors else 0,
    }
    context = ErrorContext(
        operation="decode_response",
        url=url,
        additional_data=additional_data,
    )
    code = ErrorCode.INVALID_JSON if invalid_json else ErrorCode.DECODING_ERROR
    return DecodingError(
        code,
        f"Failed to decode response as {type_name}",
        type_name=type_name,
        context=context,
        original_error=original_error,
        validation_errors=validation_errors,
    )


def create_config_error(
    message: str,
    config_key: str | None = None,
    original_error: BaseException | None = None,
    *,
    code: ErrorCode = ErrorCode.CONFIG_ERROR,
) -> ConfigurationError:
    """Create a configuration error with context."""
    additional_data: dict[str, PrimitiveContextValue] | None = (
        {"config_key": config_key} if config_key else None
    )
    context = ErrorContext(operation="configuration", additional_data=additional_data)
    return ConfigurationError(code, message, context, original_error)


__all__ = [
    "SAFE_DICT_MASK_KEYS",
    "CancellationError",
    "ConfigurationError",
    "DecodingError",
    "ErrorCode",
    "ErrorContext",
    "HTTPError",
    "NetworkError",
    "PrimitiveContextValue",
    "TMDbError",
    "create_config_error",
    "create_decoding_error",
    "create_http_error",
    "create_network_error",
]
