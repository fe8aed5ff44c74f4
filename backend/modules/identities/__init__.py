"""
Identities module.

Read and delete access to Supabase Auth accounts. Identities are never
created here.

Public API:
- IIdentityStore: Interface for identity store access
- IdentityRecord: One authenticated account
- SupabaseIdentityRepository: Admin API implementation
"""

from .interfaces import IIdentityStore
from .models import IdentityRecord
from .exceptions import IdentityStoreError
from .repository import SupabaseIdentityRepository

__all__ = [
    # Interface
    "IIdentityStore",
    # Models
    "IdentityRecord",
    # Exceptions
    "IdentityStoreError",
    # Implementation
    "SupabaseIdentityRepository",
]
