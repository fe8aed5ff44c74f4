"""
Accounts module interface.

Route handlers depend on IAccountService and obtain instances through a
factory taking Settings, so tests can swap in services backed by fakes.
"""

from typing import Callable, Protocol, runtime_checkable

from shared.config import Settings
from .models import DeletionOutcome, ReconciliationOutcome


@runtime_checkable
class IAccountService(Protocol):
    """Contract for account deletion and identity/profile reconciliation."""

    async def delete_account(self, user_id: str) -> DeletionOutcome:
        """
        Delete an account's identity and profile, independently.

        Already-absent records count as deleted.

        Args:
            user_id: Identity ID, also the profile row ID

        Returns:
            DeletionOutcome with one classified result per store

        Raises:
            MissingUserIdError: If user_id is empty
        """
        ...

    async def reconcile(self, dry_run: bool = False) -> ReconciliationOutcome:
        """
        Run one reconciliation pass.

        Args:
            dry_run: Classify only, without deleting or creating profiles

        Returns:
            ReconciliationOutcome with counts and per-item failures

        Raises:
            IdentityStoreUnavailableError: If the connectivity check fails
            SuspiciousEmptyResultError: If no identities were listed
        """
        ...


AccountServiceFactory = Callable[[Settings], IAccountService]
