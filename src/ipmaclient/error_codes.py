"""Error codes for the IPMA client."""

from enum import Enum

class ErrorCode(Enum):
    """Enumeration of all possible error codes."""
    # Transport Errors
    NETWORK_ERROR = "NETWORK_ERROR"
    NOT_FOUND = "NOT_FOUND"
    INVALID_RESPONSE = "INVALID_RESPONSE"

    # Data Errors
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Configuration Errors
    CONFIG_INVALID = "CONFIG_INVALID"
