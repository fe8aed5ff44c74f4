"""
Accounts module.

Keeps the profiles table in step with Supabase Auth: deletes single
accounts from both stores and runs full reconciliation passes.

Public API:
- IAccountService: Interface for account operations
- AccountService / create_account_service: Implementation and factory
- DeletionOutcome, ReconciliationOutcome: Per-invocation results
- Accounts exceptions: MissingUserIdError, IdentityStoreUnavailableError,
  SuspiciousEmptyResultError
"""

from .interfaces import IAccountService, AccountServiceFactory
from .models import (
    BulkOperation,
    DeleteAccountRequest,
    DeletionOutcome,
    DeletionStatus,
    ItemFailure,
    ReconciliationOutcome,
    StoreDeletion,
)
from .exceptions import (
    MissingUserIdError,
    IdentityStoreUnavailableError,
    SuspiciousEmptyResultError,
)
from .pagination import PAGE_SIZE, collect_all
from .service import AccountService, attempt_delete, classify, create_account_service

__all__ = [
    # Interface
    "IAccountService",
    "AccountServiceFactory",
    # Models
    "BulkOperation",
    "DeleteAccountRequest",
    "DeletionOutcome",
    "DeletionStatus",
    "ItemFailure",
    "ReconciliationOutcome",
    "StoreDeletion",
    # Exceptions
    "MissingUserIdError",
    "IdentityStoreUnavailableError",
    "SuspiciousEmptyResultError",
    # Implementation
    "PAGE_SIZE",
    "collect_all",
    "AccountService",
    "attempt_delete",
    "classify",
    "create_account_service",
]
