"""
Identity module data models.
"""

from typing import Any, Optional
from pydantic import BaseModel, Field


class IdentityRecord(BaseModel):
    """
    One account in the Supabase Auth identity store.

    The id is the primary key shared with the profiles table.
    """

    id: str = Field(..., description="User ID (UUID from Supabase Auth)")
    email: Optional[str] = Field(None, description="Email, absent for phone-only accounts")
    name: Optional[str] = Field(None, description="Display name from user metadata")

    model_config = {"frozen": True}

    @classmethod
    def from_auth_user(cls, user: Any) -> "IdentityRecord":
        """Map a Supabase Auth User object to an IdentityRecord."""
        metadata = getattr(user, "user_metadata", None) or {}
        name = metadata.get("name") or metadata.get("full_name")
        return cls(id=str(user.id), email=user.email, name=name)
