# =============================================================================
# tests/test_users.py - User Store Tests
# =============================================================================
# The Supabase client is mocked; no network access is needed.
#
# Run with: pytest tests/test_users.py -v
# =============================================================================

from unittest.mock import MagicMock, patch

import pytest

from app.exceptions import UserStoreUnavailableError
from core.services.user_service import UserService
from lib.supabase_client import SupabaseClient, SupabaseClientError


def _mock_client(rows):
    """Build a client whose table().select().execute() returns rows."""
    client = MagicMock()
    client.table.return_value.select.return_value.execute.return_value.data = rows
    client.table.return_value.select.return_value.limit.return_value.execute.return_value.data = rows[:1]
    return client


class TestSupabaseClient:
    """Tests for the store wrapper."""

    def test_get_client_is_cached(self):
        with patch("lib.supabase_client.create_client") as create:
            create.return_value = MagicMock()

            first = SupabaseClient.get_client()
            second = SupabaseClient.get_client()

        assert first is second
        create.assert_called_once_with(
            "https://test-project.supabase.co",
            "test-service-key",
        )

    def test_client_init_failure(self):
        with patch("lib.supabase_client.create_client", side_effect=ValueError("bad url")):
            with pytest.raises(SupabaseClientError) as exc_info:
                SupabaseClient.get_client()

        assert exc_info.value.code == "CLIENT_INIT_FAILED"
        assert "Suggestion:" in str(exc_info.value)

    def test_fetch_users_reads_configured_table(self, sample_user_rows):
        client = _mock_client(sample_user_rows)

        with patch("lib.supabase_client.create_client", return_value=client):
            rows = SupabaseClient.fetch_users()

        client.table.assert_called_with("users")
        client.table.return_value.select.assert_called_with("*")
        assert rows == sample_user_rows

    def test_fetch_users_empty_table(self):
        client = _mock_client([])
        client.table.return_value.select.return_value.execute.return_value.data = None

        with patch("lib.supabase_client.create_client", return_value=client):
            assert SupabaseClient.fetch_users() == []

    def test_fetch_users_query_failure(self):
        client = MagicMock()
        client.table.return_value.select.return_value.execute.side_effect = RuntimeError("timeout")

        with patch("lib.supabase_client.create_client", return_value=client):
            with pytest.raises(SupabaseClientError) as exc_info:
                SupabaseClient.fetch_users()

        assert exc_info.value.code == "FETCH_USERS_FAILED"
        assert exc_info.value.details == {"table": "users"}


class TestUserService:
    """Tests for UserService."""

    def test_rows_returned_unmodified(self, sample_user_rows):
        with patch("core.services.user_service.SupabaseClient") as mock:
            mock.fetch_users.return_value = sample_user_rows

            assert UserService.list_users() is sample_user_rows

    def test_store_error_becomes_unavailable(self):
        with patch("core.services.user_service.SupabaseClient") as mock:
            mock.fetch_users.side_effect = SupabaseClientError("connection refused")

            with pytest.raises(UserStoreUnavailableError) as exc_info:
                UserService.list_users()

        assert exc_info.value.status_code == 503
        assert exc_info.value.to_dict()["code"] == "USER_STORE_UNAVAILABLE"


class TestUsersEndpoint:
    """Tests for GET /users."""

    def test_list_users(self, client, sample_user_rows):
        with patch("lib.supabase_client.create_client", return_value=_mock_client(sample_user_rows)):
            response = client.get("/users")

        assert response.status_code == 200
        assert response.json() == sample_user_rows

    def test_store_down_is_503(self, client):
        with patch("lib.supabase_client.create_client", side_effect=ValueError("no network")):
            response = client.get("/users")

        assert response.status_code == 503
        body = response.json()
        assert body["code"] == "USER_STORE_UNAVAILABLE"
        assert "suggestion" in body

    def test_readiness_reports_store(self, client, sample_user_rows):
        with patch("lib.supabase_client.create_client", return_value=_mock_client(sample_user_rows)):
            response = client.get("/health/ready")

        assert response.json()["status"] == "ready"
        assert response.json()["checks"]["user_store"] == "healthy"

    def test_readiness_degraded_when_store_down(self, client):
        with patch("lib.supabase_client.create_client", side_effect=ValueError("no network")):
            response = client.get("/health/ready")

        assert response.status_code == 200
        assert response.json()["status"] == "degraded"
        assert response.json()["checks"]["user_store"].startswith("unhealthy")
