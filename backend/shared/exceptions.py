"""
Base exception classes for the Profile Sync backend.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the application.
"""

from typing import Optional, Any


class ProfileSyncError(Exception):
    """
    Base exception for all Profile Sync errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(ProfileSyncError):
    """One or more required settings are absent."""

    def __init__(self, missing: list[str]):
        super().__init__(
            f"Missing {missing[0]}",
            code="MISSING_CONFIGURATION",
            details={"missing": list(missing)},
        )
        self.missing = list(missing)


class NotFoundError(ProfileSyncError):
    """Resource not found."""

    pass


class ValidationError(ProfileSyncError):
    """Input validation failed."""

    pass


class ExternalServiceError(ProfileSyncError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
