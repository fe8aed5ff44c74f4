"""
Accounts module data models.

Outcomes are built fresh per invocation and serialized with camelCase
keys for HTTP responses.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from shared.models import CamelModel


class DeletionStatus(str, Enum):
    """Classified outcome of one delete attempt."""

    DELETED = "deleted"
    ALREADY_ABSENT = "already_absent"
    FAILED = "failed"


class StoreDeletion(BaseModel):
    """Outcome of deleting one record from one store."""

    status: DeletionStatus
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        """Deleted and already-absent both count as success."""
        return self.status != DeletionStatus.FAILED


class DeletionOutcome(BaseModel):
    """Per-store outcomes of deleting one account."""

    user_id: str
    identity: StoreDeletion
    profile: StoreDeletion

    @property
    def success(self) -> bool:
        return self.identity.succeeded and self.profile.succeeded

    def to_response(self) -> dict:
        """Build the HTTP response body."""
        return {
            "success": self.success,
            "authDeleted": self.identity.succeeded,
            "dbDeleted": self.profile.succeeded,
            "authError": self.identity.error,
            "dbError": self.profile.error,
            "userId": self.user_id,
        }


class DeleteAccountRequest(CamelModel):
    """Body of a delete request. Every field is optional at parse time."""

    user_id: Optional[str] = None

    @field_validator("user_id", mode="before")
    @classmethod
    def coerce_numeric_id(cls, value):
        # Numeric ids are accepted and normalized to their string form.
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class BulkOperation(str, Enum):
    """Corrective operations applied during reconciliation."""

    DELETE_ORPHAN = "delete_orphan"
    CREATE_MISSING = "create_missing"


class ItemFailure(CamelModel):
    """One record that a bulk step could not correct."""

    operation: BulkOperation
    id: str
    error: str


class ReconciliationOutcome(CamelModel):
    """
    Summary of one reconciliation pass.

    success stays True once the pass gets past the safety guard.
    Per-item failures are reported in `failures` instead.
    """

    success: bool = True
    auth_users: int = 0
    db_documents: int = 0
    orphans_found: int = 0
    missing_found: int = 0
    orphans_deleted: int = 0
    missing_created: int = 0
    failures: list[ItemFailure] = Field(default_factory=list)
    dry_run: bool = False
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def to_response(self) -> dict:
        """Build the HTTP response body."""
        return self.model_dump(mode="json", by_alias=True)
