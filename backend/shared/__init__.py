"""
Shared infrastructure for Profile Sync backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- repository: Base repository and the DeleteResult store outcome

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import create_supabase_client, log_environment
from .exceptions import (
    ProfileSyncError,
    ConfigurationError,
    NotFoundError,
    ValidationError,
    ExternalServiceError,
)
from .models import CamelModel
from .repository import BaseRepository, DeleteResult

__all__ = [
    "Settings",
    "get_settings",
    "create_supabase_client",
    "log_environment",
    "ProfileSyncError",
    "ConfigurationError",
    "NotFoundError",
    "ValidationError",
    "ExternalServiceError",
    "CamelModel",
    "BaseRepository",
    "DeleteResult",
]
