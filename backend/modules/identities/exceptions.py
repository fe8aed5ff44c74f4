"""
Identity module exceptions.
"""

from typing import Optional

from shared.exceptions import ExternalServiceError

IDENTITY_SERVICE = "supabase_auth"


class IdentityStoreError(ExternalServiceError):
    """Raised when the Supabase Auth admin API returns an error."""

    def __init__(self, operation: str, message: str, status: Optional[int] = None):
        super().__init__(
            message,
            service=IDENTITY_SERVICE,
            code="IDENTITY_STORE_ERROR",
            details={"operation": operation, "status": status},
        )
        self.status = status
