"""
Profile Sync API package.

Provides the FastAPI application for account deletion and
identity/profile reconciliation.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
