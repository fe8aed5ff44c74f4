"""
Profile module exceptions.
"""

from typing import Optional

from shared.exceptions import ExternalServiceError

PROFILE_SERVICE = "supabase_db"


class ProfileStoreError(ExternalServiceError):
    """Raised when PostgREST rejects a request against the profiles table."""

    def __init__(
        self,
        operation: str,
        table: str,
        message: str,
        original_code: Optional[str] = None,
    ):
        super().__init__(
            message,
            service=PROFILE_SERVICE,
            code="PROFILE_STORE_ERROR",
            details={
                "operation": operation,
                "table": table,
                "original_code": original_code,
            },
        )
