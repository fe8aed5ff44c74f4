"""
Identity repository over the Supabase Auth admin API.

Requires a client built with the service role key.
"""

import logging
import uuid
from typing import Optional

from supabase import AuthError

from shared.repository import BaseRepository, DeleteResult
from .exceptions import IdentityStoreError
from .models import IdentityRecord

logger = logging.getLogger(__name__)


class SupabaseIdentityRepository(BaseRepository[IdentityRecord]):
    """
    Repository for identity records.

    The admin API pages by 1-based page number, so offsets must be
    multiples of the limit.
    """

    def check_connection(self) -> None:
        """Issue a one-record listing to confirm the admin API is reachable."""
        self.list_page(0, 1)

    def list_page(self, offset: int, limit: int) -> list[IdentityRecord]:
        if limit < 1 or offset % limit:
            raise ValueError(f"offset {offset} is not a multiple of limit {limit}")

        page = offset // limit + 1
        try:
            users = self._db.auth.admin.list_users(page=page, per_page=limit)
        except AuthError as e:
            raise IdentityStoreError("list", e.message, _status_of(e)) from e

        return [IdentityRecord.from_auth_user(user) for user in users]

    def get(self, user_id: str) -> Optional[IdentityRecord]:
        if not _is_uuid(user_id):
            return None

        try:
            response = self._db.auth.admin.get_user_by_id(user_id)
        except AuthError as e:
            if _status_of(e) == 404:
                return None
            raise IdentityStoreError("get", e.message, _status_of(e)) from e

        if response is None or response.user is None:
            return None
        return IdentityRecord.from_auth_user(response.user)

    def delete(self, user_id: str) -> DeleteResult:
        # Auth user ids are UUIDs, so any other id cannot exist.
        if not _is_uuid(user_id):
            logger.info(f"Identity id {user_id!r} is not a UUID, treating as absent")
            return DeleteResult.NOT_FOUND

        try:
            self._db.auth.admin.delete_user(user_id)
        except AuthError as e:
            if _status_of(e) == 404:
                return DeleteResult.NOT_FOUND
            raise IdentityStoreError("delete", e.message, _status_of(e)) from e

        return DeleteResult.DELETED


def _is_uuid(value: str) -> bool:
    try:
        uuid.UUID(str(value))
    except ValueError:
        return False
    return True


def _status_of(error: AuthError) -> Optional[int]:
    # Only AuthApiError carries an HTTP status.
    return getattr(error, "status", None)
