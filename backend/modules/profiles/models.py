"""
Profile module data models.

ProfileDocument mirrors one row of the profiles table. Column names are
snake_case; the row id is the owning identity's id.
"""

from datetime import datetime, timezone
from typing import Any, Optional
from pydantic import BaseModel, Field

from modules.identities.models import IdentityRecord

DEFAULT_NAME = "Unknown"
DEFAULT_PLAN = "free"
DEFAULT_STATUS = "active"


class ProfileDocument(BaseModel):
    """One row of the profiles table."""

    id: str = Field(..., description="Row ID, same as the identity ID")
    user_id: Optional[str] = Field(None, description="Owning identity ID")
    email: Optional[str] = Field(None, description="Email copied from the identity")
    name: str = Field(default=DEFAULT_NAME, description="Display name")
    plan: str = Field(default=DEFAULT_PLAN, description="Subscription plan")
    status: str = Field(default=DEFAULT_STATUS, description="Account status")
    last_active: Optional[datetime] = Field(None, description="Last activity time")

    # Feature access flags
    has_journal_access: bool = False
    has_strategies_access: bool = False
    has_bot_access: bool = False
    has_analytics_access: bool = False

    model_config = {"extra": "ignore"}

    @classmethod
    def for_identity(
        cls,
        identity: IdentityRecord,
        now: Optional[datetime] = None,
    ) -> "ProfileDocument":
        """
        Build the default profile for an identity that has none.

        Args:
            identity: The identity the profile belongs to
            now: Creation timestamp (defaults to the current UTC time)

        Returns:
            ProfileDocument keyed by the identity's ID with default fields
        """
        return cls(
            id=identity.id,
            user_id=identity.id,
            email=identity.email,
            name=identity.name or DEFAULT_NAME,
            last_active=now or datetime.now(timezone.utc),
        )

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "ProfileDocument":
        """Map a table row, tolerating rows that lack optional columns."""
        data = {key: value for key, value in row.items() if value is not None}
        data["id"] = str(row["id"])
        return cls(**data)

    def to_row(self) -> dict[str, Any]:
        """Serialize for insertion into the profiles table."""
        return self.model_dump(mode="json")
