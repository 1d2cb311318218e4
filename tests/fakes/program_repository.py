"""
Fake Program Repository for testing.

In-memory implementation of ProgramRepository. Templates are rows with
user_id None; assign_to_user keeps one program per user, replacing any
previous one.
"""
from typing import Optional, List, Dict, Any
from datetime import datetime, timezone
import uuid
import copy

from application.exceptions import NotFoundError


class FakeProgramRepository:
    """
    In-memory fake implementation of ProgramRepository for testing.

    Usage:
        repo = FakeProgramRepository()
        repo.seed([{"id": "tpl-1", "user_id": None, "name": "Starter", "workouts": [...]}])
    """

    def __init__(self):
        """Initialize with empty storage."""
        self._programs: Dict[str, Dict[str, Any]] = {}
        self.read_count = 0
        self.update_count = 0

    def reset(self) -> None:
        """Clear all stored programs and counters."""
        self._programs.clear()
        self.read_count = 0
        self.update_count = 0

    def seed(self, programs: List[Dict[str, Any]]) -> None:
        """
        Seed the repository with test data.

        Args:
            programs: List of program dicts. 'user_id' None marks a template.
        """
        for program in programs:
            program_id = program.get("id") or str(uuid.uuid4())
            self._programs[program_id] = {
                "user_id": None,
                "created_at": datetime.now(timezone.utc).isoformat(),
                **copy.deepcopy(program),
                "id": program_id,
            }

    def get_all(self) -> List[Dict[str, Any]]:
        """Get all stored programs (test helper)."""
        return [copy.deepcopy(p) for p in self._programs.values()]

    # =========================================================================
    # ProgramRepository Protocol Methods
    # =========================================================================

    def get_by_id(self, program_id: str) -> Optional[Dict[str, Any]]:
        self.read_count += 1
        program = self._programs.get(program_id)
        return copy.deepcopy(program) if program else None

    def get_current_for_user(self, user_id: str) -> Optional[Dict[str, Any]]:
        self.read_count += 1
        for program in self._programs.values():
            if program.get("user_id") == user_id:
                return copy.deepcopy(program)
        return None

    def get_template(self, template_id: str) -> Optional[Dict[str, Any]]:
        program = self._programs.get(template_id)
        if program is None or program.get("user_id") is not None:
            return None
        return copy.deepcopy(program)

    def list_templates(self) -> List[Dict[str, Any]]:
        templates = [p for p in self._programs.values() if p.get("user_id") is None]
        templates.sort(key=lambda p: p.get("name") or "")
        return [copy.deepcopy(p) for p in templates]

    def assign_to_user(self, user_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        existing = next(
            (p for p in self._programs.values() if p.get("user_id") == user_id),
            None,
        )
        program_id = existing["id"] if existing else str(uuid.uuid4())
        self._programs[program_id] = {
            "created_at": datetime.now(timezone.utc).isoformat(),
            **copy.deepcopy(data),
            "id": program_id,
            "user_id": user_id,
        }
        return copy.deepcopy(self._programs[program_id])

    def update_workouts(self, program_id: str, workouts: Any) -> Dict[str, Any]:
        program = self._programs.get(program_id)
        if program is None:
            raise NotFoundError(f"Program {program_id} not found")
        program["workouts"] = copy.deepcopy(workouts)
        self.update_count += 1
        return copy.deepcopy(program)
