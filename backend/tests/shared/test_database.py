"""Tests for shared/database.py."""

import logging

import pytest
from unittest.mock import patch, MagicMock

from shared.database import create_supabase_client, log_environment
from shared.exceptions import ConfigurationError
from tests.conftest import make_settings


class TestCreateSupabaseClient:
    @patch("shared.database.ClientOptions")
    @patch("shared.database.create_client")
    def test_creates_client_with_service_key_and_schema(self, mock_create, mock_options):
        """Should create client with the service role key and configured schema."""
        mock_create.return_value = MagicMock()
        settings = make_settings(supabase_db_schema="app")

        client = create_supabase_client(settings)

        mock_options.assert_called_once_with(schema="app")
        mock_create.assert_called_once_with(
            "https://test.supabase.co",
            "test-service-key",
            options=mock_options.return_value,
        )
        assert client is mock_create.return_value

    @patch("shared.database.create_client")
    def test_creates_new_client_per_call(self, mock_create):
        """Should not cache clients between invocations."""
        mock_create.side_effect = [MagicMock(), MagicMock()]
        settings = make_settings()

        client1 = create_supabase_client(settings)
        client2 = create_supabase_client(settings)

        assert mock_create.call_count == 2
        assert client1 is not client2

    @patch("shared.database.create_client")
    def test_raises_without_config(self, mock_create):
        """Should raise before creating a client if configuration is missing."""
        settings = make_settings(supabase_service_role_key="")

        with pytest.raises(ConfigurationError) as exc_info:
            create_supabase_client(settings)

        assert exc_info.value.missing == ["SUPABASE_SERVICE_ROLE_KEY"]
        mock_create.assert_not_called()


class TestLogEnvironment:
    def test_never_logs_the_key(self, caplog):
        """Should log presence and length of the key, not its value."""
        settings = make_settings(supabase_service_role_key="super-secret")

        with caplog.at_level(logging.INFO, logger="shared.database"):
            log_environment(settings)

        assert "super-secret" not in caplog.text
        assert "Service key exists: True" in caplog.text
        assert "Service key length: 12" in caplog.text

    def test_marks_missing_values(self, caplog):
        """Should mark absent settings as MISSING."""
        settings = make_settings(supabase_url="", supabase_profiles_table="")

        with caplog.at_level(logging.INFO, logger="shared.database"):
            log_environment(settings)

        assert "Endpoint: MISSING" in caplog.text
        assert "Profiles table: MISSING" in caplog.text
