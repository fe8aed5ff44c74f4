"""
Base repository class for store access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and the translation of SDK failures.
"""

from enum import Enum
from typing import TypeVar, Generic
from supabase import Client


T = TypeVar("T")


class DeleteResult(str, Enum):
    """
    Outcome of a delete call against a store.

    Stores return NOT_FOUND when the target is already absent. Any other
    failure is raised as ExternalServiceError.
    """

    DELETED = "deleted"
    NOT_FOUND = "not_found"


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for store operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class ProfileRepository(BaseRepository[ProfileDocument]):
            def get(self, profile_id: str) -> Optional[ProfileDocument]:
                result = self._table().select("*").eq("id", profile_id).execute()
                if not result.data:
                    return None
                return ProfileDocument.from_row(result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for store operations.
        """
        self._db = db
