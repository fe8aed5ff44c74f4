"""
Accounts module exceptions.
"""

from shared.exceptions import (
    ProfileSyncError,
    ValidationError,
    ExternalServiceError,
)


class MissingUserIdError(ValidationError):
    """Raised when a delete request carries no userId."""

    def __init__(self):
        super().__init__("Missing userId", code="MISSING_USER_ID")


class IdentityStoreUnavailableError(ExternalServiceError):
    """Raised when the connectivity check against the identity store fails."""

    def __init__(self, reason: str):
        super().__init__(
            f"Identity store connection failed: {reason}",
            service="supabase_auth",
            code="IDENTITY_STORE_UNAVAILABLE",
            details={"reason": reason},
        )


class SuspiciousEmptyResultError(ProfileSyncError):
    """
    Raised when the identity listing returns no accounts at all.

    An empty listing usually means the service key cannot read users.
    Proceeding would classify every profile as an orphan.
    """

    def __init__(self):
        super().__init__(
            "Got 0 auth users - service key may lack permission to list users",
            code="SUSPICIOUS_EMPTY_RESULT",
        )
