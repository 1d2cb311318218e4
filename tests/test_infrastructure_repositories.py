"""
Tests for the Supabase repository implementations.

These tests verify that the Supabase repositories issue the expected query
builder calls, satisfy the protocol interfaces, and wrap client failures in
PersistenceError. The Supabase client is replaced by a MagicMock chain.
"""
import pytest
from datetime import date
from typing import Any, List, Optional
from unittest.mock import MagicMock, Mock

from application.exceptions import NotFoundError, PersistenceError

# All tests in this module are pure logic tests with mocks - mark as unit
pytestmark = pytest.mark.unit

CHAIN_METHODS = ("select", "eq", "gte", "lte", "order", "limit", "is_", "upsert", "update", "insert")


def mock_client(*results: Optional[List[Any]], error: Optional[Exception] = None):
    """
    Build a Supabase client mock whose query builder chains return itself.

    Each positional argument is the ``data`` of one successive execute() call.
    """
    builder = MagicMock()
    for method in CHAIN_METHODS:
        getattr(builder, method).return_value = builder
    if error is not None:
        builder.execute.side_effect = error
    else:
        builder.execute.side_effect = [Mock(data=data) for data in results]
    client = MagicMock()
    client.table.return_value = builder
    return client, builder


# ============================================================================
# Imports and protocol compliance
# ============================================================================

class TestRepositoryImports:
    """Test that all repository classes can be imported."""

    def test_import_from_infrastructure_package(self):
        from infrastructure import (
            SupabaseJournalRepository,
            SupabaseProgramRepository,
            SupabaseDailyWorkoutRepository,
        )
        assert all([
            SupabaseJournalRepository,
            SupabaseProgramRepository,
            SupabaseDailyWorkoutRepository,
        ])


class TestProtocolCompliance:
    """Test that implementations match their Protocol interfaces."""

    @pytest.mark.parametrize(
        "impl_path,methods",
        [
            (
                "infrastructure.db.journal_repository.SupabaseJournalRepository",
                ["find_or_create", "get_by_date", "list_range", "update_items"],
            ),
            (
                "infrastructure.db.program_repository.SupabaseProgramRepository",
                ["get_by_id", "get_current_for_user", "get_template", "list_templates",
                 "assign_to_user", "update_workouts"],
            ),
            (
                "infrastructure.db.daily_workout_repository.SupabaseDailyWorkoutRepository",
                ["get_for_user", "save_for_user"],
            ),
        ],
    )
    def test_has_required_methods(self, impl_path, methods):
        import importlib

        module_name, class_name = impl_path.rsplit(".", 1)
        impl = getattr(importlib.import_module(module_name), class_name)
        for method in methods:
            assert hasattr(impl, method), f"Missing method: {method}"


# ============================================================================
# Journal repository
# ============================================================================

class TestSupabaseJournalRepository:
    """Test SupabaseJournalRepository query building."""

    def test_default_table(self):
        from infrastructure.db.journal_repository import SupabaseJournalRepository

        client, _ = mock_client()
        repo = SupabaseJournalRepository(client)
        assert repo._client is client
        assert repo._table == "calendar"

    def test_find_or_create_upserts_then_reads(self):
        from infrastructure.db.journal_repository import SupabaseJournalRepository

        row = {"id": "e1", "user_id": "u1", "date": "2024-03-01", "workouts": [], "foods": []}
        client, builder = mock_client([], [row])
        repo = SupabaseJournalRepository(client, table="journal")

        result = repo.find_or_create("u1", date(2024, 3, 1))

        assert result == row
        client.table.assert_called_with("journal")
        builder.upsert.assert_called_once_with(
            {"user_id": "u1", "date": "2024-03-01", "workouts": [], "foods": []},
            on_conflict="user_id,date",
            ignore_duplicates=True,
        )
        builder.eq.assert_any_call("date", "2024-03-01")

    def test_find_or_create_missing_row_is_persistence_error(self):
        from infrastructure.db.journal_repository import SupabaseJournalRepository

        client, _ = mock_client([], [])
        with pytest.raises(PersistenceError):
            SupabaseJournalRepository(client).find_or_create("u1", date(2024, 3, 1))

    def test_list_range_filters_inclusive_bounds(self):
        from infrastructure.db.journal_repository import SupabaseJournalRepository

        client, builder = mock_client([{"id": "e1"}])
        rows = SupabaseJournalRepository(client).list_range("u1", date(2024, 3, 1), date(2024, 3, 31))

        assert rows == [{"id": "e1"}]
        builder.gte.assert_called_once_with("date", "2024-03-01")
        builder.lte.assert_called_once_with("date", "2024-03-31")
        builder.order.assert_called_once_with("date")

    def test_get_by_date_returns_none_when_absent(self):
        from infrastructure.db.journal_repository import SupabaseJournalRepository

        client, _ = mock_client([])
        assert SupabaseJournalRepository(client).get_by_date("u1", date(2024, 3, 1)) is None

    def test_update_items_only_sends_given_lists(self):
        from infrastructure.db.journal_repository import SupabaseJournalRepository

        client, builder = mock_client([{"id": "e1", "foods": [{"id": "f1"}]}])
        SupabaseJournalRepository(client).update_items("e1", "u1", foods=[{"id": "f1"}])

        builder.update.assert_called_once_with({"foods": [{"id": "f1"}]})
        builder.eq.assert_any_call("id", "e1")
        builder.eq.assert_any_call("user_id", "u1")

    def test_update_items_no_match_is_not_found(self):
        from infrastructure.db.journal_repository import SupabaseJournalRepository

        client, _ = mock_client([])
        with pytest.raises(NotFoundError):
            SupabaseJournalRepository(client).update_items("e1", "u1", workouts=[])

    def test_client_errors_are_wrapped(self):
        from infrastructure.db.journal_repository import SupabaseJournalRepository

        original = RuntimeError("connection reset")
        client, _ = mock_client(error=original)
        with pytest.raises(PersistenceError) as exc_info:
            SupabaseJournalRepository(client).list_range("u1", date(2024, 3, 1), date(2024, 3, 2))
        assert exc_info.value.__cause__ is original


# ============================================================================
# Program repository
# ============================================================================

class TestSupabaseProgramRepository:
    """Test SupabaseProgramRepository query building."""

    def test_get_template_requires_null_owner(self):
        from infrastructure.db.program_repository import SupabaseProgramRepository

        client, builder = mock_client([{"id": "tpl-1", "user_id": None}])
        result = SupabaseProgramRepository(client).get_template("tpl-1")

        assert result["id"] == "tpl-1"
        builder.is_.assert_called_once_with("user_id", "null")
        client.table.assert_called_with("training_programs")

    def test_list_templates(self):
        from infrastructure.db.program_repository import SupabaseProgramRepository

        client, builder = mock_client(None)
        assert SupabaseProgramRepository(client).list_templates() == []
        builder.is_.assert_called_once_with("user_id", "null")

    def test_assign_to_user_upserts_on_user(self):
        from infrastructure.db.program_repository import SupabaseProgramRepository

        client, builder = mock_client([{"id": "p1", "user_id": "u1"}])
        result = SupabaseProgramRepository(client).assign_to_user("u1", {"name": "Block"})

        assert result == {"id": "p1", "user_id": "u1"}
        builder.upsert.assert_called_once_with({"name": "Block", "user_id": "u1"}, on_conflict="user_id")

    def test_update_workouts_missing_program(self):
        from infrastructure.db.program_repository import SupabaseProgramRepository

        client, _ = mock_client([])
        with pytest.raises(NotFoundError):
            SupabaseProgramRepository(client).update_workouts("missing", [])

    def test_get_current_for_user_wraps_errors(self):
        from infrastructure.db.program_repository import SupabaseProgramRepository

        client, _ = mock_client(error=ConnectionError("down"))
        with pytest.raises(PersistenceError):
            SupabaseProgramRepository(client).get_current_for_user("u1")


# ============================================================================
# Daily workout repository
# ============================================================================

class TestSupabaseDailyWorkoutRepository:
    """Test SupabaseDailyWorkoutRepository query building."""

    def test_save_for_user_upserts(self):
        from infrastructure.db.daily_workout_repository import SupabaseDailyWorkoutRepository

        stored = {"id": "d1", "user_id": "u1", "name": "Mobility", "exercises": [{"name": "Plank"}]}
        client, builder = mock_client([stored])
        result = SupabaseDailyWorkoutRepository(client).save_for_user(
            "u1", exercises=[{"name": "Plank"}], name="Mobility"
        )

        assert result == stored
        builder.upsert.assert_called_once_with(
            {"user_id": "u1", "exercises": [{"name": "Plank"}], "name": "Mobility"},
            on_conflict="user_id",
        )

    def test_get_for_user_absent(self):
        from infrastructure.db.daily_workout_repository import SupabaseDailyWorkoutRepository

        client, _ = mock_client([])
        assert SupabaseDailyWorkoutRepository(client).get_for_user("u1") is None
