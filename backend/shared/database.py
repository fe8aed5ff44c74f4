"""
Database client factory for Supabase.

Every invocation builds its own service-role client from an explicit
Settings object. Clients are never cached between invocations.
"""

import logging

from supabase import create_client, Client, ClientOptions

from .config import Settings

logger = logging.getLogger(__name__)


def create_supabase_client(settings: Settings) -> Client:
    """
    Create a Supabase client with the service role key (bypasses RLS).

    The client talks to the Auth admin API and to the configured schema,
    which holds the profiles table.

    Args:
        settings: Settings with every Supabase value present

    Returns:
        Supabase client configured with the service role key

    Raises:
        ConfigurationError: If any Supabase setting is missing
    """
    settings.require_supabase()

    logger.debug(
        f"Creating Supabase client for project {settings.supabase_project_id} "
        f"(schema {settings.supabase_db_schema})"
    )
    return create_client(
        settings.supabase_url,
        settings.supabase_service_role_key,
        options=ClientOptions(schema=settings.supabase_db_schema),
    )


def log_environment(settings: Settings) -> None:
    """Log which Supabase settings are present, without revealing the key."""
    key = settings.supabase_service_role_key
    logger.info("=== ENVIRONMENT CHECK ===")
    logger.info(f"Endpoint: {settings.supabase_url or 'MISSING'}")
    logger.info(f"Project ID: {settings.supabase_project_id or 'MISSING'}")
    logger.info(f"Service key exists: {bool(key)}")
    logger.info(f"Service key length: {len(key)}")
    logger.info(f"Database schema: {settings.supabase_db_schema or 'MISSING'}")
    logger.info(f"Profiles table: {settings.supabase_profiles_table or 'MISSING'}")
