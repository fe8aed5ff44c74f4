"""
Profiles module.

Access to the profiles table, one row per account keyed by the identity ID.

Public API:
- IProfileStore: Interface for profile store access
- ProfileDocument: One profiles row, with the defaults for new accounts
- ProfileRepository: PostgREST implementation
"""

from .interfaces import IProfileStore
from .models import ProfileDocument
from .exceptions import ProfileStoreError
from .repository import ProfileRepository

__all__ = [
    # Interface
    "IProfileStore",
    # Models
    "ProfileDocument",
    # Exceptions
    "ProfileStoreError",
    # Implementation
    "ProfileRepository",
]
