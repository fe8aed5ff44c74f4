"""
Profile module interface.

The accounts module depends on IProfileStore, not the Supabase
implementation.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.repository import DeleteResult
from .models import ProfileDocument


@runtime_checkable
class IProfileStore(Protocol):
    """Contract for list/get/create/delete over profile documents."""

    def list_page(self, offset: int, limit: int) -> list[ProfileDocument]:
        """
        List one page of profiles.

        Args:
            offset: Number of rows to skip
            limit: Maximum number of rows to return

        Returns:
            Up to `limit` profiles; fewer means the end of the data
        """
        ...

    def get(self, profile_id: str) -> Optional[ProfileDocument]:
        """Get one profile, or None if it doesn't exist."""
        ...

    def create(self, profile: ProfileDocument) -> ProfileDocument:
        """
        Insert a profile.

        Raises:
            ExternalServiceError: If the insert fails
        """
        ...

    def delete(self, profile_id: str) -> DeleteResult:
        """
        Delete one profile.

        Returns:
            DELETED, or NOT_FOUND if no row matched

        Raises:
            ExternalServiceError: For any other failure
        """
        ...
