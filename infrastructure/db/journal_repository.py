"""
Supabase Journal Repository Implementation.

Implements the JournalRepository protocol against the calendar table:

    calendar(id uuid pk, user_id text, date date, workouts jsonb default '[]',
             foods jsonb default '[]', created_at timestamptz,
             unique (user_id, date))

find_or_create relies on the (user_id, date) unique constraint: the insert
is an upsert with ON CONFLICT DO NOTHING, followed by a read, so concurrent
first writes for the same day converge on a single row.
"""
import logging
from datetime import date
from typing import Any, Dict, List, Optional

from supabase import Client

from application.exceptions import NotFoundError, PersistenceError

logger = logging.getLogger(__name__)


class SupabaseJournalRepository:
    """
    Supabase-backed journal repository.

    Every client failure is re-raised as PersistenceError with the
    original exception chained.
    """

    def __init__(self, client: Client, table: str = "calendar"):
        """
        Initialize repository with Supabase client.

        Args:
            client: Authenticated Supabase client
            table: Name of the journal table
        """
        self._client = client
        self._table = table

    def find_or_create(self, user_id: str, entry_date: date) -> Dict[str, Any]:
        try:
            (
                self._client.table(self._table)
                .upsert(
                    {"user_id": user_id, "date": entry_date.isoformat(), "workouts": [], "foods": []},
                    on_conflict="user_id,date",
                    ignore_duplicates=True,
                )
                .execute()
            )
            row = self._select_one(user_id, entry_date)
            if row is None:
                raise PersistenceError(
                    f"Journal row for {user_id} on {entry_date} missing after upsert"
                )
            return row
        except Exception as e:
            if isinstance(e, PersistenceError):
                raise
            logger.error(f"Error finding or creating journal entry for {user_id} on {entry_date}: {e}")
            raise PersistenceError(f"Journal find_or_create failed: {e}") from e

    def get_by_date(self, user_id: str, entry_date: date) -> Optional[Dict[str, Any]]:
        try:
            return self._select_one(user_id, entry_date)
        except Exception as e:
            logger.error(f"Error getting journal entry for {user_id} on {entry_date}: {e}")
            raise PersistenceError(f"Journal lookup failed: {e}") from e

    def list_range(self, user_id: str, start: date, end: date) -> List[Dict[str, Any]]:
        try:
            response = (
                self._client.table(self._table)
                .select("*")
                .eq("user_id", user_id)
                .gte("date", start.isoformat())
                .lte("date", end.isoformat())
                .order("date")
                .execute()
            )
            return response.data or []
        except Exception as e:
            logger.error(f"Error listing journal for {user_id} ({start}..{end}): {e}")
            raise PersistenceError(f"Journal range query failed: {e}") from e

    def update_items(
        self,
        entry_id: str,
        user_id: str,
        *,
        workouts: Optional[List[Dict[str, Any]]] = None,
        foods: Optional[List[Dict[str, Any]]] = None,
    ) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if workouts is not None:
            data["workouts"] = workouts
        if foods is not None:
            data["foods"] = foods

        try:
            response = (
                self._client.table(self._table)
                .update(data)
                .eq("id", entry_id)
                .eq("user_id", user_id)
                .execute()
            )
        except Exception as e:
            logger.error(f"Error updating journal entry {entry_id}: {e}")
            raise PersistenceError(f"Journal update failed: {e}") from e

        if not response.data:
            raise NotFoundError(f"Journal entry {entry_id} not found")
        return response.data[0]

    def _select_one(self, user_id: str, entry_date: date) -> Optional[Dict[str, Any]]:
        response = (
            self._client.table(self._table)
            .select("*")
            .eq("user_id", user_id)
            .eq("date", entry_date.isoformat())
            .limit(1)
            .execute()
        )
        return response.data[0] if response.data else None
