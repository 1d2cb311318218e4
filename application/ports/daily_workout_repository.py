"""
Daily workout repository port (interface).

Each user has at most one daily workout plan: a flat list of exercises
the user repeats day to day.
"""

from typing import Any, Dict, List, Optional, Protocol


class DailyWorkoutRepository(Protocol):
    """Repository interface for daily workout plans."""

    def get_for_user(self, user_id: str) -> Optional[Dict[str, Any]]:
        """
        Get the user's current daily workout plan.

        Returns:
            Plan dictionary (id, user_id, name, exercises, created_at) or None
        """
        ...

    def save_for_user(
        self,
        user_id: str,
        *,
        exercises: List[Any],
        name: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Create or replace the user's daily workout plan.

        Args:
            user_id: The user's ID
            exercises: Ordered list of exercise objects
            name: Optional display name

        Returns:
            The stored plan dictionary
        """
        ...
