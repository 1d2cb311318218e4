"""
Journal Repository Interface (Port).

This module defines the abstract interface for per-user, per-day journal
("calendar") persistence. Each row holds a user's workouts and foods for one
calendar date; (user_id, date) is unique.
"""
from datetime import date
from typing import Any, Dict, List, Optional, Protocol


class JournalRepository(Protocol):
    """
    Abstract interface for journal entry persistence.

    Rows are dictionaries with the columns:
    id, user_id, date (ISO string), workouts (list), foods (list), created_at.

    Implementations raise application.exceptions.PersistenceError when the
    storage layer fails.
    """

    def find_or_create(self, user_id: str, entry_date: date) -> Dict[str, Any]:
        """
        Return the row for (user_id, entry_date), creating an empty one if absent.

        Must be atomic: two concurrent calls for the same pair yield one row.

        Args:
            user_id: Owner of the journal
            entry_date: Calendar day

        Returns:
            The existing or newly created row (workouts/foods empty when new)
        """
        ...

    def get_by_date(self, user_id: str, entry_date: date) -> Optional[Dict[str, Any]]:
        """
        Get the row for one day.

        Returns:
            Row dictionary or None if the user logged nothing that day
        """
        ...

    def list_range(self, user_id: str, start: date, end: date) -> List[Dict[str, Any]]:
        """
        Get all rows with start <= date <= end, ordered by date ascending.

        Args:
            user_id: Owner of the journal
            start: Inclusive lower bound
            end: Inclusive upper bound

        Returns:
            List of row dictionaries (possibly empty)
        """
        ...

    def update_items(
        self,
        entry_id: str,
        user_id: str,
        *,
        workouts: Optional[List[Dict[str, Any]]] = None,
        foods: Optional[List[Dict[str, Any]]] = None,
    ) -> Dict[str, Any]:
        """
        Replace the workouts and/or foods lists of one row.

        The update is conditional on the row belonging to user_id.
        Lists passed as None are left untouched.

        Returns:
            The updated row

        Raises:
            NotFoundError: If no row matches entry_id and user_id
        """
        ...
