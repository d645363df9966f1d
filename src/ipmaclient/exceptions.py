"""Centralized error definitions for the IPMA client."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

import httpx
import pydantic

from ipmaclient.error_codes import ErrorCode


logger = logging.getLogger(__name__)

@dataclass(eq=False)
class IPMAError(Exception):
    """Base exception for all IPMA client errors."""
    message: str
    code: ErrorCode
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (Code: {self.code.value}, Details: {self.details})"
        return f"{self.message} (Code: {self.code.value})"

    @property
    def cause(self) -> BaseException | None:
        """Upstream exception this error was raised from, if any."""
        return self.__cause__

class NetworkError(IPMAError):
    """No response was received from the API."""
    def __init__(self, message: str = "Network error occurred", details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.NETWORK_ERROR, details)

class NotFoundError(IPMAError):
    """Resource or location could not be found."""
    def __init__(self, message: str = "Resource not found", details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.NOT_FOUND, details)

class InvalidResponseError(IPMAError):
    """API answered with an error status or an unreadable body."""
    def __init__(self, message: str, status_code: int | None = None, details: dict[str, Any] | None = None):
        details = dict(details or {})
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(message, ErrorCode.INVALID_RESPONSE, details or None)
        self.status_code = status_code

class ValidationError(IPMAError):
    """Response body does not match the declared schema."""
    def __init__(self, message: str = "Invalid data received from API", details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.VALIDATION_ERROR, details)

class ConfigError(IPMAError):
    """Configuration error."""
    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.CONFIG_INVALID, details)

@contextmanager
def handle_errors(operation: str) -> Iterator[None]:
    """Normalize transport and schema failures into the client taxonomy.

    Errors that are already an ``IPMAError`` pass through unchanged. The
    original exception is chained as the cause of the normalized one.

    Args:
        operation: Human readable name of the failing operation

    Raises:
        NetworkError: No response received
        NotFoundError: HTTP 404
        InvalidResponseError: Any other non-2xx status
        ValidationError: Schema validation failed
    """
    try:
        yield
    except IPMAError:
        raise
    except httpx.HTTPStatusError as e:
        status = e.response.status_code
        logger.warning(f"{operation} failed with HTTP {status}")
        if status == 404:
            raise NotFoundError(details={"operation": operation, "url": str(e.request.url)}) from e
        raise InvalidResponseError(
            f"API error: HTTP {status}",
            status_code=status,
            details={"operation": operation}
        ) from e
    except httpx.RequestError as e:
        logger.warning(f"{operation} failed without response: {e!r}")
        raise NetworkError(details={"operation": operation}) from e
    except pydantic.ValidationError as e:
        logger.warning(f"{operation} returned data failing validation ({e.error_count()} errors)")
        raise ValidationError(
            details={"operation": operation, "errors": e.error_count()}
        ) from e
