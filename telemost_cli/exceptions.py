"""
Exceptions for Telemost CLI.

All errors raised by the library derive from TelemostError, so callers
can catch a single type at their boundary.
"""

from typing import Optional, Dict, Any


class TelemostError(Exception):
    """Base exception for Telemost CLI errors."""

    default_message = "Telemost error"

    def __init__(self, message: Optional[str] = None, details: Optional[str] = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


class ConfigError(TelemostError):
    """Configuration could not be loaded or saved."""

    default_message = "Invalid configuration"


# ========== Precondition errors (raised before any request is sent) ==========

class PreconditionError(TelemostError):
    """A required argument is missing or empty."""


class EmptyTokenError(PreconditionError):
    default_message = "token is empty"


class EmptyIDError(PreconditionError):
    default_message = "conference ID is empty"


class MissingConferenceError(PreconditionError):
    default_message = "conference settings are not set"


class EmptyCohostsError(PreconditionError):
    default_message = "cohosts list is empty"


class ValidationError(TelemostError):
    """Conference settings failed local validation."""

    default_message = "Invalid conference settings"


# ========== API errors ==========

class APIError(TelemostError):
    """Request to the API failed."""

    default_message = "API request failed"

    def __init__(
        self,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        response_data: Optional[Dict[str, Any]] = None,
        details: Optional[str] = None
    ):
        super().__init__(message, details=details)
        self.status_code = status_code
        self.response_data = response_data or {}


class TransportError(APIError):
    """Request could not be delivered (connection, DNS, timeout)."""


class ServiceError(APIError):
    """API answered with an error envelope."""

    def __init__(
        self,
        code: str,
        description: str,
        status_code: Optional[int] = None,
        response_data: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            f"API returned error: {description} ({code})",
            status_code=status_code,
            response_data=response_data
        )
        self.code = code
        self.description = description


class UnexpectedStatusError(APIError):
    """API answered with an error status and no readable envelope."""


class DecodeError(APIError):
    """Successful response body could not be decoded."""
