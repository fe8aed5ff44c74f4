"""
Profile repository for the profiles table.

Encapsulates all PostgREST queries and row mapping for profile documents.
The table lives in the schema the Supabase client was created with.
"""

from typing import Optional

from supabase import Client, PostgrestAPIError

from shared.repository import BaseRepository, DeleteResult
from .exceptions import ProfileStoreError
from .models import ProfileDocument

# Postgres invalid_text_representation, e.g. a non-UUID value for a uuid column.
INVALID_TEXT_REPRESENTATION = "22P02"


class ProfileRepository(BaseRepository[ProfileDocument]):
    """
    Repository for profile documents.

    Listing is ordered by id so that offset pages stay stable across calls.
    """

    def __init__(self, db: Client, table: str) -> None:
        super().__init__(db)
        self._table_name = table

    def _table(self):
        return self._db.table(self._table_name)

    def _error(self, operation: str, error: PostgrestAPIError) -> ProfileStoreError:
        return ProfileStoreError(
            operation,
            self._table_name,
            error.message or str(error),
            original_code=error.code,
        )

    def list_page(self, offset: int, limit: int) -> list[ProfileDocument]:
        try:
            result = (
                self._table()
                .select("*")
                .order("id")
                .range(offset, offset + limit - 1)
                .execute()
            )
        except PostgrestAPIError as e:
            raise self._error("list", e) from e

        return [ProfileDocument.from_row(row) for row in result.data]

    def get(self, profile_id: str) -> Optional[ProfileDocument]:
        try:
            result = self._table().select("*").eq("id", profile_id).execute()
        except PostgrestAPIError as e:
            if e.code == INVALID_TEXT_REPRESENTATION:
                return None
            raise self._error("get", e) from e

        if not result.data:
            return None
        return ProfileDocument.from_row(result.data[0])

    def create(self, profile: ProfileDocument) -> ProfileDocument:
        try:
            result = self._table().insert(profile.to_row()).execute()
        except PostgrestAPIError as e:
            raise self._error("create", e) from e

        if not result.data:
            return profile
        return ProfileDocument.from_row(result.data[0])

    def delete(self, profile_id: str) -> DeleteResult:
        try:
            result = self._table().delete().eq("id", profile_id).execute()
        except PostgrestAPIError as e:
            # An id the column type cannot hold matches no row.
            if e.code == INVALID_TEXT_REPRESENTATION:
                return DeleteResult.NOT_FOUND
            raise self._error("delete", e) from e

        # PostgREST returns the deleted rows; none means nothing matched.
        if not result.data:
            return DeleteResult.NOT_FOUND
        return DeleteResult.DELETED
