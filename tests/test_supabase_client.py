# =============================================================================
# tests/test_supabase_client.py - Supabase Wrapper Tests
# =============================================================================
# Tests use a mocked Supabase client to check the queries that are built
# and how failures are wrapped, without any network calls.
# =============================================================================

from unittest.mock import MagicMock, patch

import pytest

from lib.supabase_client import NIL_UUID, SupabaseClient, SupabaseClientError

USER_ID = "550e8400-e29b-41d4-a716-446655440000"


@pytest.fixture
def mock_client(monkeypatch):
    """A MagicMock standing in for the supabase Client singleton."""
    client = MagicMock()
    monkeypatch.setattr(SupabaseClient, "_instance", client)
    return client


def _query(mock_client):
    """The builder returned by client.table(...); every filter returns itself."""
    query = mock_client.table.return_value
    for method in ("select", "insert", "delete", "eq", "neq", "gte", "lte", "limit"):
        getattr(query, method).return_value = query
    return query


class TestGetClient:
    """Tests for singleton creation."""

    def test_creates_client_once(self, monkeypatch):
        """create_client is called on first use only."""
        monkeypatch.setattr(SupabaseClient, "_instance", None)

        with patch("lib.supabase_client.create_client") as create:
            create.return_value = MagicMock()
            first = SupabaseClient.get_client()
            second = SupabaseClient.get_client()

        create.assert_called_once_with("https://test-project.supabase.co", "test-service-key")
        assert first is second

    def test_creation_failure(self, monkeypatch):
        """Creation errors are wrapped with a configuration hint."""
        monkeypatch.setattr(SupabaseClient, "_instance", None)

        with patch("lib.supabase_client.create_client", side_effect=ValueError("bad url")):
            with pytest.raises(SupabaseClientError) as exc_info:
                SupabaseClient.get_client()

        assert exc_info.value.code == "CLIENT_INIT_FAILED"
        assert "SUPABASE_URL" in exc_info.value.suggestion


class TestFetchExercises:
    """Tests for the exercise log query."""

    def test_builds_range_query(self, mock_client):
        """Filters on user, inclusive date range and limit."""
        query = _query(mock_client)
        query.execute.return_value = MagicMock(data=[{"description": "run", "duration": 30, "date": "2023-02-01"}])

        rows = SupabaseClient.fetch_exercises(USER_ID, "2023-01-15", "2023-02-15", limit=2)

        mock_client.table.assert_called_once_with("exercises")
        query.select.assert_called_once_with("description, duration, date")
        query.eq.assert_called_once_with("user_id", USER_ID)
        query.gte.assert_called_once_with("date", "2023-01-15")
        query.lte.assert_called_once_with("date", "2023-02-15")
        query.limit.assert_called_once_with(2)
        assert rows[0]["date"] == "2023-02-01"

    def test_no_limit(self, mock_client):
        """Without a limit no limit is sent to the store."""
        query = _query(mock_client)
        query.execute.return_value = MagicMock(data=None)

        rows = SupabaseClient.fetch_exercises(USER_ID, "1970-01-01", "2023-12-31")

        query.limit.assert_not_called()
        assert rows == []

    def test_query_failure(self, mock_client):
        """Store errors become SupabaseClientError with context."""
        query = _query(mock_client)
        query.execute.side_effect = RuntimeError("timeout")

        with pytest.raises(SupabaseClientError) as exc_info:
            SupabaseClient.fetch_exercises(USER_ID, "1970-01-01", "2023-12-31", limit=5)

        assert exc_info.value.code == "FETCH_EXERCISES_FAILED"
        assert exc_info.value.details["limit"] == 5


class TestUsers:
    """Tests for user queries."""

    def test_fetch_user_found(self, mock_client):
        query = _query(mock_client)
        query.execute.return_value = MagicMock(data=[{"id": USER_ID, "username": "alice"}])

        user = SupabaseClient.fetch_user(USER_ID)

        query.eq.assert_called_once_with("id", USER_ID)
        assert user == {"id": USER_ID, "username": "alice"}

    def test_fetch_user_missing(self, mock_client):
        query = _query(mock_client)
        query.execute.return_value = MagicMock(data=[])

        assert SupabaseClient.fetch_user(USER_ID) is None

    def test_fetch_user_malformed_id_skips_query(self, mock_client):
        """Non-UUID ids never reach the store."""
        assert SupabaseClient.fetch_user("not-a-uuid") is None
        mock_client.table.assert_not_called()

    @pytest.mark.parametrize(
        "user_id",
        [
            f"urn:uuid:{USER_ID}",
            f"{{{USER_ID}}}",
            USER_ID.replace("-", ""),
        ],
    )
    def test_fetch_user_non_canonical_id_skips_query(self, mock_client, user_id):
        """Only the hyphenated form Postgres accepts is sent to the store."""
        assert SupabaseClient.fetch_user(user_id) is None
        mock_client.table.assert_not_called()

    def test_fetch_user_uppercase_id(self, mock_client):
        query = _query(mock_client)
        query.execute.return_value = MagicMock(data=[{"id": USER_ID, "username": "alice"}])

        assert SupabaseClient.fetch_user(USER_ID.upper()) == {"id": USER_ID, "username": "alice"}

    def test_insert_user_no_data(self, mock_client):
        """An insert that returns nothing is an error."""
        query = _query(mock_client)
        query.execute.return_value = MagicMock(data=[])

        with pytest.raises(SupabaseClientError) as exc_info:
            SupabaseClient.insert_user("alice")

        assert exc_info.value.code == "INSERT_NO_DATA"

    def test_delete_all_users_filters_on_nil_uuid(self, mock_client):
        """Bulk delete sends a filter that matches every row."""
        query = _query(mock_client)
        query.execute.return_value = MagicMock(data=[{}, {}], count=2)

        deleted = SupabaseClient.delete_all_users()

        query.delete.assert_called_once_with(count="exact")
        query.neq.assert_called_once_with("id", NIL_UUID)
        assert deleted == 2

    def test_delete_count_falls_back_to_rows(self, mock_client):
        query = _query(mock_client)
        query.execute.return_value = MagicMock(data=[{}, {}, {}], count=None)

        assert SupabaseClient.delete_all_exercises() == 3


class TestCheckTable:
    """Tests for table checks."""

    def test_check_failure_points_at_migration(self, mock_client):
        query = _query(mock_client)
        query.execute.side_effect = RuntimeError("relation does not exist")

        with pytest.raises(SupabaseClientError) as exc_info:
            SupabaseClient.check_table("users")

        assert exc_info.value.code == "TABLE_UNAVAILABLE"
        assert "migrations" in exc_info.value.suggestion
