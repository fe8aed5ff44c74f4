"""
Centralized configuration for the Profile Sync backend.

All settings are loaded from environment variables with sensible defaults.
Supabase settings have no defaults: they are required and validated before
any call to the identity or document store.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError


# Checked in this order; the first missing one is reported.
REQUIRED_SUPABASE_SETTINGS = (
    "supabase_url",
    "supabase_project_id",
    "supabase_service_role_key",
    "supabase_db_schema",
    "supabase_profiles_table",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Profile Sync API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # Supabase
    supabase_url: str = ""
    supabase_project_id: str = ""
    supabase_service_role_key: str = ""
    supabase_db_schema: str = ""
    supabase_profiles_table: str = ""

    def missing_settings(self) -> list[str]:
        """Return the environment variable names of unset Supabase settings."""
        return [
            name.upper()
            for name in REQUIRED_SUPABASE_SETTINGS
            if not getattr(self, name)
        ]

    def require_supabase(self) -> None:
        """
        Ensure every Supabase setting is present.

        Raises:
            ConfigurationError: naming the first missing setting
        """
        missing = self.missing_settings()
        if missing:
            raise ConfigurationError(missing)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
