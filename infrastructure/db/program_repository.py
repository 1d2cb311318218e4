"""
Supabase Program Repository Implementation.

Implements the ProgramRepository protocol against the training_programs
table. Catalog templates are rows with user_id NULL; a unique constraint on
user_id (NULLs excluded) keeps one current program per user, and
assign_to_user upserts on it.
"""
import logging
from typing import Any, Dict, List, Optional

from supabase import Client

from application.exceptions import NotFoundError, PersistenceError

logger = logging.getLogger(__name__)


class SupabaseProgramRepository:
    """Supabase-backed training program repository."""

    def __init__(self, client: Client, table: str = "training_programs"):
        """
        Initialize repository with Supabase client.

        Args:
            client: Authenticated Supabase client
            table: Name of the programs table
        """
        self._client = client
        self._table = table

    def get_by_id(self, program_id: str) -> Optional[Dict[str, Any]]:
        try:
            response = (
                self._client.table(self._table)
                .select("*")
                .eq("id", program_id)
                .limit(1)
                .execute()
            )
            return response.data[0] if response.data else None
        except Exception as e:
            logger.error(f"Error getting program {program_id}: {e}")
            raise PersistenceError(f"Program lookup failed: {e}") from e

    def get_current_for_user(self, user_id: str) -> Optional[Dict[str, Any]]:
        try:
            response = (
                self._client.table(self._table)
                .select("*")
                .eq("user_id", user_id)
                .order("created_at", desc=True)
                .limit(1)
                .execute()
            )
            return response.data[0] if response.data else None
        except Exception as e:
            logger.error(f"Error getting current program for {user_id}: {e}")
            raise PersistenceError(f"Program lookup failed: {e}") from e

    def get_template(self, template_id: str) -> Optional[Dict[str, Any]]:
        try:
            response = (
                self._client.table(self._table)
                .select("*")
                .eq("id", template_id)
                .is_("user_id", "null")
                .limit(1)
                .execute()
            )
            return response.data[0] if response.data else None
        except Exception as e:
            logger.error(f"Error getting program template {template_id}: {e}")
            raise PersistenceError(f"Template lookup failed: {e}") from e

    def list_templates(self) -> List[Dict[str, Any]]:
        try:
            response = (
                self._client.table(self._table)
                .select("*")
                .is_("user_id", "null")
                .order("name")
                .execute()
            )
            return response.data or []
        except Exception as e:
            logger.error(f"Error listing program templates: {e}")
            raise PersistenceError(f"Template listing failed: {e}") from e

    def assign_to_user(self, user_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        row = {**data, "user_id": user_id}
        try:
            response = (
                self._client.table(self._table)
                .upsert(row, on_conflict="user_id")
                .execute()
            )
        except Exception as e:
            logger.error(f"Error assigning program to {user_id}: {e}")
            raise PersistenceError(f"Program assignment failed: {e}") from e

        if not response.data:
            raise PersistenceError(f"Program assignment for {user_id} returned no data")
        return response.data[0]

    def update_workouts(self, program_id: str, workouts: Any) -> Dict[str, Any]:
        try:
            response = (
                self._client.table(self._table)
                .update({"workouts": workouts})
                .eq("id", program_id)
                .execute()
            )
        except Exception as e:
            logger.error(f"Error updating workouts of program {program_id}: {e}")
            raise PersistenceError(f"Program update failed: {e}") from e

        if not response.data:
            raise NotFoundError(f"Program {program_id} not found")
        return response.data[0]
