"""Tests for shared/exceptions.py."""

import pytest

from shared.exceptions import (
    ProfileSyncError,
    ConfigurationError,
    NotFoundError,
    ValidationError,
    ExternalServiceError,
)


class TestProfileSyncError:
    def test_message(self):
        """ProfileSyncError should store message."""
        error = ProfileSyncError("Test error")
        assert error.message == "Test error"
        assert str(error) == "Test error"

    def test_default_code(self):
        """ProfileSyncError should default code to class name."""
        error = ProfileSyncError("Test error")
        assert error.code == "ProfileSyncError"

    def test_custom_code_and_details(self):
        """ProfileSyncError should accept custom code and details."""
        error = ProfileSyncError("Test error", code="CUSTOM", details={"key": "value"})
        assert error.code == "CUSTOM"
        assert error.details == {"key": "value"}

    def test_to_dict(self):
        """ProfileSyncError should convert to dict."""
        error = ProfileSyncError("Test error", code="TEST_ERROR", details={"key": "value"})
        result = error.to_dict()

        assert result["error"] == "TEST_ERROR"
        assert result["message"] == "Test error"
        assert result["details"]["key"] == "value"

    def test_to_dict_minimal(self):
        """ProfileSyncError.to_dict should work with minimal args."""
        result = ProfileSyncError("Test error").to_dict()

        assert result["error"] == "ProfileSyncError"
        assert result["details"] == {}


class TestConfigurationError:
    def test_names_first_missing_setting(self):
        """ConfigurationError should name the first missing setting."""
        error = ConfigurationError(["SUPABASE_URL", "SUPABASE_DB_SCHEMA"])

        assert isinstance(error, ProfileSyncError)
        assert error.message == "Missing SUPABASE_URL"
        assert error.code == "MISSING_CONFIGURATION"
        assert error.details["missing"] == ["SUPABASE_URL", "SUPABASE_DB_SCHEMA"]


class TestSubclasses:
    @pytest.mark.parametrize("cls", [NotFoundError, ValidationError])
    def test_inherit_base(self, cls):
        """Subclasses should inherit from ProfileSyncError and default their code."""
        error = cls("Something")
        assert isinstance(error, ProfileSyncError)
        assert error.code == cls.__name__


class TestExternalServiceError:
    def test_stores_service(self):
        """ExternalServiceError should store the service name in details."""
        error = ExternalServiceError("Timeout", service="supabase_auth")

        assert error.service == "supabase_auth"
        assert error.details["service"] == "supabase_auth"

    def test_keeps_existing_details(self):
        """ExternalServiceError should merge service into given details."""
        error = ExternalServiceError(
            "Bad request", service="supabase_db", details={"table": "profiles"}
        )
        assert error.details == {"table": "profiles", "service": "supabase_db"}
