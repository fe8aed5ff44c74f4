"""
Identity module interface.

The accounts module depends on IIdentityStore, not the Supabase
implementation. This enables testing with in-memory fakes.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.repository import DeleteResult
from .models import IdentityRecord


@runtime_checkable
class IIdentityStore(Protocol):
    """Contract for list/get/delete over identity records."""

    def check_connection(self) -> None:
        """
        Issue one minimal listing call.

        Raises:
            ExternalServiceError: If the store cannot be reached
        """
        ...

    def list_page(self, offset: int, limit: int) -> list[IdentityRecord]:
        """
        List one page of identities.

        Args:
            offset: Number of records to skip
            limit: Maximum number of records to return

        Returns:
            Up to `limit` identities; fewer means the end of the data
        """
        ...

    def get(self, user_id: str) -> Optional[IdentityRecord]:
        """Get one identity, or None if it doesn't exist."""
        ...

    def delete(self, user_id: str) -> DeleteResult:
        """
        Delete one identity.

        Returns:
            DELETED, or NOT_FOUND if it was already absent

        Raises:
            ExternalServiceError: For any other failure
        """
        ...
