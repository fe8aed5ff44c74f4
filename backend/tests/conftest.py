"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
explicit Settings objects and in-memory identity/profile stores that record
every call made against them.
"""

import pytest
from typing import Optional

from shared.config import Settings, get_settings
from shared.exceptions import ExternalServiceError
from shared.repository import DeleteResult
from modules.identities.models import IdentityRecord
from modules.profiles.models import ProfileDocument


def make_settings(**overrides) -> Settings:
    """
    Create Settings with every Supabase value present.

    The .env file is ignored and explicit values win over the environment,
    so tests don't depend on the machine they run on.
    """
    values = {
        "supabase_url": "https://test.supabase.co",
        "supabase_project_id": "test-project",
        "supabase_service_role_key": "test-service-key",
        "supabase_db_schema": "public",
        "supabase_profiles_table": "profiles",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def make_identities(*ids: str) -> list[IdentityRecord]:
    """Create identities with an email derived from each ID."""
    return [IdentityRecord(id=i, email=f"{i}@example.com", name=f"User {i}") for i in ids]


def make_profiles(*ids: str) -> list[ProfileDocument]:
    """Create profiles with an email derived from each ID."""
    return [ProfileDocument(id=i, user_id=i, email=f"{i}@example.com") for i in ids]


class InMemoryIdentityStore:
    """Identity store backed by a list, recording every call."""

    def __init__(self, records: Optional[list[IdentityRecord]] = None):
        self.records = list(records or [])
        self.list_calls: list[tuple[int, int]] = []
        self.delete_calls: list[str] = []
        self.connection_error: Optional[Exception] = None
        self.delete_errors: dict[str, Exception] = {}

    def check_connection(self) -> None:
        if self.connection_error is not None:
            raise self.connection_error

    def list_page(self, offset: int, limit: int) -> list[IdentityRecord]:
        self.list_calls.append((offset, limit))
        return self.records[offset:offset + limit]

    def get(self, user_id: str) -> Optional[IdentityRecord]:
        return next((r for r in self.records if r.id == user_id), None)

    def delete(self, user_id: str) -> DeleteResult:
        self.delete_calls.append(user_id)
        if user_id in self.delete_errors:
            raise self.delete_errors[user_id]
        record = self.get(user_id)
        if record is None:
            return DeleteResult.NOT_FOUND
        self.records.remove(record)
        return DeleteResult.DELETED


class InMemoryProfileStore:
    """Profile store backed by an insertion-ordered dict, recording every call."""

    def __init__(self, profiles: Optional[list[ProfileDocument]] = None):
        self.profiles = {p.id: p for p in profiles or []}
        self.list_calls: list[tuple[int, int]] = []
        self.delete_calls: list[str] = []
        self.create_calls: list[ProfileDocument] = []
        self.delete_errors: dict[str, Exception] = {}
        self.create_errors: dict[str, Exception] = {}
        self.list_error: Optional[Exception] = None

    @property
    def ids(self) -> set[str]:
        return set(self.profiles)

    def list_page(self, offset: int, limit: int) -> list[ProfileDocument]:
        self.list_calls.append((offset, limit))
        if self.list_error is not None:
            raise self.list_error
        return list(self.profiles.values())[offset:offset + limit]

    def get(self, profile_id: str) -> Optional[ProfileDocument]:
        return self.profiles.get(profile_id)

    def create(self, profile: ProfileDocument) -> ProfileDocument:
        self.create_calls.append(profile)
        if profile.id in self.create_errors:
            raise self.create_errors[profile.id]
        self.profiles[profile.id] = profile
        return profile

    def delete(self, profile_id: str) -> DeleteResult:
        self.delete_calls.append(profile_id)
        if profile_id in self.delete_errors:
            raise self.delete_errors[profile_id]
        if self.profiles.pop(profile_id, None) is None:
            return DeleteResult.NOT_FOUND
        return DeleteResult.DELETED


def store_error(message: str = "boom") -> ExternalServiceError:
    """Create a store failure as raised by the repositories."""
    return ExternalServiceError(message, service="test")


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Clear the cached settings before and after each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Provide complete Supabase settings."""
    return make_settings()


@pytest.fixture
def identity_store() -> InMemoryIdentityStore:
    """Provide an empty identity store."""
    return InMemoryIdentityStore()


@pytest.fixture
def profile_store() -> InMemoryProfileStore:
    """Provide an empty profile store."""
    return InMemoryProfileStore()
