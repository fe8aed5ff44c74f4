"""
Account service implementation.

Deletes single accounts across both stores and reconciles the profiles
table against Supabase Auth. All store calls are made one at a time, in
order; nothing is kept between invocations.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from shared.config import Settings
from shared.database import create_supabase_client, log_environment
from shared.repository import DeleteResult
from modules.identities import IIdentityStore, IdentityRecord, SupabaseIdentityRepository
from modules.profiles import IProfileStore, ProfileDocument, ProfileRepository

from .interfaces import IAccountService
from .models import (
    BulkOperation,
    DeletionOutcome,
    DeletionStatus,
    ItemFailure,
    ReconciliationOutcome,
    StoreDeletion,
)
from .exceptions import (
    IdentityStoreUnavailableError,
    MissingUserIdError,
    SuspiciousEmptyResultError,
)
from .pagination import PAGE_SIZE, collect_all

logger = logging.getLogger(__name__)


def attempt_delete(
    store: str,
    delete: Callable[[str], DeleteResult],
    record_id: str,
) -> StoreDeletion:
    """
    Call a store's delete and classify the result.

    NOT_FOUND becomes ALREADY_ABSENT so repeated deletes stay successful.
    Any raised error becomes FAILED with its message; it is not re-raised.
    """
    try:
        result = delete(record_id)
    except Exception as e:
        logger.error(f"Failed to delete {store} record {record_id}: {e}")
        return StoreDeletion(status=DeletionStatus.FAILED, error=str(e))

    if result == DeleteResult.NOT_FOUND:
        logger.info(f"{store} record already deleted: {record_id}")
        return StoreDeletion(status=DeletionStatus.ALREADY_ABSENT)

    logger.info(f"Deleted {store} record: {record_id}")
    return StoreDeletion(status=DeletionStatus.DELETED)


class AccountService(IAccountService):
    """
    Account service over an identity store and a profile store.

    Implements IAccountService. Reconciliation reads both stores once,
    then applies corrections best-effort: a failing item is recorded and
    the pass moves on to the next one.
    """

    def __init__(
        self,
        identities: IIdentityStore,
        profiles: IProfileStore,
        page_size: int = PAGE_SIZE,
    ):
        self._identities = identities
        self._profiles = profiles
        self._page_size = page_size

    async def delete_account(self, user_id: str) -> DeletionOutcome:
        """Delete the identity, then the profile, regardless of the first result."""
        if not user_id:
            raise MissingUserIdError()

        logger.info(f"Delete request for user: {user_id}")

        identity = attempt_delete("auth", self._identities.delete, user_id)
        profile = attempt_delete("profile", self._profiles.delete, user_id)

        return DeletionOutcome(user_id=user_id, identity=identity, profile=profile)

    async def reconcile(self, dry_run: bool = False) -> ReconciliationOutcome:
        logger.info("Starting user sync...")

        try:
            self._identities.check_connection()
        except Exception as e:
            logger.error(f"Cannot connect to Auth API: {e}")
            raise IdentityStoreUnavailableError(str(e)) from e
        logger.info("Auth API connected")

        logger.info("Fetching all auth users...")
        identities = collect_all(
            self._identities.list_page, self._page_size, label="users"
        )
        logger.info(f"Total auth users: {len(identities)}")

        if not identities:
            logger.warning("SAFETY GUARD: Got 0 auth users - aborting")
            raise SuspiciousEmptyResultError()

        logger.info("Fetching all profile documents...")
        profiles = collect_all(
            self._profiles.list_page, self._page_size, label="documents"
        )
        logger.info(f"Total profile documents: {len(profiles)}")

        orphans, missing = classify(identities, profiles)
        logger.info(f"Found {len(orphans)} orphaned documents")
        logger.info(f"Found {len(missing)} missing users")

        outcome = ReconciliationOutcome(
            auth_users=len(identities),
            db_documents=len(profiles),
            orphans_found=len(orphans),
            missing_found=len(missing),
            dry_run=dry_run,
        )

        if dry_run:
            logger.info("Dry run - no changes applied")
            return outcome

        outcome.orphans_deleted = self._delete_orphans(orphans, outcome.failures)
        outcome.missing_created = self._create_missing(missing, outcome.failures)
        outcome.timestamp = datetime.now(timezone.utc)

        logger.info("SYNC COMPLETED")
        logger.info(f"Auth users: {outcome.auth_users}")
        logger.info(f"Profile documents: {outcome.db_documents}")
        logger.info(f"Orphans deleted: {outcome.orphans_deleted}")
        logger.info(f"Missing created: {outcome.missing_created}")
        if outcome.failures:
            logger.warning(f"Items not corrected: {len(outcome.failures)}")

        return outcome

    def _delete_orphans(
        self,
        orphans: list[ProfileDocument],
        failures: list[ItemFailure],
    ) -> int:
        deleted = 0
        for profile in orphans:
            try:
                result = self._profiles.delete(profile.id)
            except Exception as e:
                logger.error(f"Failed to delete {profile.id}: {e}")
                failures.append(
                    ItemFailure(
                        operation=BulkOperation.DELETE_ORPHAN,
                        id=profile.id,
                        error=str(e),
                    )
                )
                continue

            if result == DeleteResult.NOT_FOUND:
                logger.info(f"Orphan already gone: {profile.id}")
            else:
                logger.info(f"Deleted orphan: {profile.email or profile.id}")
            deleted += 1
        return deleted

    def _create_missing(
        self,
        missing: list[IdentityRecord],
        failures: list[ItemFailure],
    ) -> int:
        created = 0
        for identity in missing:
            try:
                self._profiles.create(ProfileDocument.for_identity(identity))
            except Exception as e:
                logger.error(f"Failed to create for {identity.email or identity.id}: {e}")
                failures.append(
                    ItemFailure(
                        operation=BulkOperation.CREATE_MISSING,
                        id=identity.id,
                        error=str(e),
                    )
                )
                continue

            logger.info(f"Created: {identity.email or identity.id}")
            created += 1
        return created


def classify(
    identities: list[IdentityRecord],
    profiles: list[ProfileDocument],
) -> tuple[list[ProfileDocument], list[IdentityRecord]]:
    """
    Split two snapshots into orphaned profiles and identities missing a profile.

    Returns:
        Tuple of (orphans, missing), each in listing order
    """
    identity_ids = {identity.id for identity in identities}
    profile_ids = {profile.id for profile in profiles}

    orphans = [profile for profile in profiles if profile.id not in identity_ids]
    missing = [identity for identity in identities if identity.id not in profile_ids]
    return orphans, missing


def create_account_service(
    settings: Settings,
    page_size: Optional[int] = None,
) -> AccountService:
    """
    Build an AccountService backed by a fresh Supabase client.

    Raises:
        ConfigurationError: If any Supabase setting is missing. Nothing
            is contacted in that case.
    """
    log_environment(settings)
    client = create_supabase_client(settings)

    return AccountService(
        identities=SupabaseIdentityRepository(client),
        profiles=ProfileRepository(client, settings.supabase_profiles_table),
        page_size=page_size or PAGE_SIZE,
    )
