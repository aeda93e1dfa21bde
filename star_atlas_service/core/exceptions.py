"""
Custom exception classes for the application.
Provides structured error handling across all modules.
"""

from typing import Any, Optional, Dict


class StarAtlasServiceException(Exception):
    """Base exception class for the Star Atlas blockchain service."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(StarAtlasServiceException):
    """Raised when there's a configuration error."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "CONFIGURATION_ERROR", details)


class TransportError(StarAtlasServiceException):
    """Raised when an RPC or HTTP call to an external service fails."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "TRANSPORT_ERROR", details)


class SchemaError(StarAtlasServiceException):
    """Raised when a required field is absent from an external payload."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "SCHEMA_ERROR", details)


class ProfileResolutionError(StarAtlasServiceException):
    """Raised when a profile resolution stage could not complete."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, "PROFILE_RESOLUTION_ERROR", details)


class InvalidProgramIdError(ConfigurationError):
    """Raised when the configured player profile program id is malformed."""

    def __init__(self, program_id: str, reason: str):
        super().__init__(
            f"Invalid player profile program ID {program_id!r}: {reason}",
            {"program_id": program_id, "reason": reason}
        )


class CatalogUnavailableError(TransportError):
    """Raised when the crew catalog API cannot be reached or answers with an error."""

    def __init__(self, message: str, url: str, status: Optional[int] = None):
        super().__init__(message, {"url": url, "status": status})
        self.status = status


class CatalogMalformedError(SchemaError):
    """Raised when the crew catalog API returns an unusable body."""

    def __init__(self, message: str, url: str):
        super().__init__(message, {"url": url})
