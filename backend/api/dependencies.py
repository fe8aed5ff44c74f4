"""
Dependency injection setup for FastAPI.

Route handlers receive the settings and a factory that builds an account
service from them. Services are built per request and never cached, so
each invocation opens its own Supabase client.

Tests override get_account_service_factory (and optionally get_settings)
through app.dependency_overrides.
"""

from typing import TYPE_CHECKING

from shared.config import Settings, get_settings as _load_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.accounts.interfaces import AccountServiceFactory


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_settings() -> Settings:
    """FastAPI dependency for the process settings."""
    return _load_settings()


def get_account_service_factory() -> "AccountServiceFactory":
    """FastAPI dependency for the account service factory."""
    from modules.accounts.service import create_account_service
    return create_account_service
