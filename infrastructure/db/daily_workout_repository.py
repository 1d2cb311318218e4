"""
Supabase Daily Workout Repository Implementation.

One row per user in the daily_workouts table (unique user_id).
"""
import logging
from typing import Any, Dict, List, Optional

from supabase import Client

from application.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class SupabaseDailyWorkoutRepository:
    """Supabase-backed daily workout plan repository."""

    def __init__(self, client: Client, table: str = "daily_workouts"):
        self._client = client
        self._table = table

    def get_for_user(self, user_id: str) -> Optional[Dict[str, Any]]:
        try:
            response = (
                self._client.table(self._table)
                .select("*")
                .eq("user_id", user_id)
                .limit(1)
                .execute()
            )
            return response.data[0] if response.data else None
        except Exception as e:
            logger.error(f"Error getting daily workout for {user_id}: {e}")
            raise PersistenceError(f"Daily workout lookup failed: {e}") from e

    def save_for_user(
        self,
        user_id: str,
        *,
        exercises: List[Any],
        name: Optional[str] = None,
    ) -> Dict[str, Any]:
        row = {"user_id": user_id, "exercises": exercises, "name": name}
        try:
            response = (
                self._client.table(self._table)
                .upsert(row, on_conflict="user_id")
                .execute()
            )
        except Exception as e:
            logger.error(f"Error saving daily workout for {user_id}: {e}")
            raise PersistenceError(f"Daily workout save failed: {e}") from e

        if not response.data:
            raise PersistenceError(f"Daily workout save for {user_id} returned no data")
        return response.data[0]
