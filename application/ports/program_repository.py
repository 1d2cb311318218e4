"""
Program repository port (interface).

This Protocol defines the contract for training program persistence.
Catalog templates are rows with a NULL user_id; a user owns at most one
program (their current program). Infrastructure implementations
(e.g., Supabase) must satisfy this interface.
"""

from typing import Any, Dict, List, Optional, Protocol


class ProgramRepository(Protocol):
    """
    Repository interface for training program persistence.

    All methods work with dictionaries for flexibility.
    The application layer converts rows to domain.models.ProgramDocument.
    """

    def get_by_id(self, program_id: str) -> Optional[Dict[str, Any]]:
        """
        Get a program (template or user-owned) by its ID.

        Args:
            program_id: The program's UUID as string

        Returns:
            Program dictionary if found, None otherwise
        """
        ...

    def get_current_for_user(self, user_id: str) -> Optional[Dict[str, Any]]:
        """
        Get the program currently assigned to a user.

        Args:
            user_id: The user's ID

        Returns:
            Program dictionary, or None if the user has not chosen one
        """
        ...

    def get_template(self, template_id: str) -> Optional[Dict[str, Any]]:
        """
        Get a catalog template (a program with no owning user).

        Returns:
            Program dictionary, or None if absent or owned by a user
        """
        ...

    def list_templates(self) -> List[Dict[str, Any]]:
        """
        List all catalog templates.

        Returns:
            List of program dictionaries
        """
        ...

    def assign_to_user(self, user_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Store a program as the user's single current program.

        Replaces any program previously assigned to the user.

        Args:
            user_id: The user's ID
            data: Program columns (name, description, duration, workouts)

        Returns:
            The stored program dictionary
        """
        ...

    def update_workouts(self, program_id: str, workouts: Any) -> Dict[str, Any]:
        """
        Replace the full week/day/exercise structure of a program.

        Args:
            program_id: The program's UUID as string
            workouts: The complete new structure

        Returns:
            Updated program dictionary

        Raises:
            NotFoundError: If the program does not exist
        """
        ...
