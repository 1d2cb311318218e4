"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeJournalRepository, create_program_repo

    # Direct instantiation
    repo = FakeJournalRepository()
    repo.seed([{"user_id": "user1", "date": "2024-03-01"}])

    # Factory function with a pre-populated template
    repo = create_program_repo(template_id="tpl-1")
"""
from typing import Any, Dict, List, Optional

from tests.fakes.daily_workout_repository import FakeDailyWorkoutRepository
from tests.fakes.journal_repository import FakeJournalRepository
from tests.fakes.program_repository import FakeProgramRepository


# =============================================================================
# Factory Functions
# =============================================================================


def sample_weeks() -> List[Dict[str, Any]]:
    """
    Two-week program structure used across tests.

    Week 0 / day 1 holds Squat (position 0) and Bench (position 1), matching
    the synthetic key w:0-1-1 for Bench.
    """
    return [
        {
            "weekIndex": 0,
            "days": [
                {"dayIndex": 0, "workouts": [{"name": "Row", "sets": 3}]},
                {
                    "dayIndex": 1,
                    "workouts": [
                        {"name": "Squat", "sets": 5, "reps": 5},
                        {"name": "Bench", "sets": 5, "reps": 5, "weight": 60},
                    ],
                },
            ],
        },
        {
            "weekIndex": 1,
            "days": [
                {"dayIndex": 0, "workouts": [{"name": "Deadlift", "sets": 1, "reps": 5}]},
            ],
        },
    ]


def create_program_repo(
    *,
    template_id: str = "tpl-1",
    user_id: Optional[str] = None,
    program_id: str = "prog-1",
) -> FakeProgramRepository:
    """
    Create a FakeProgramRepository holding one catalog template and,
    when user_id is given, a current program for that user.
    """
    repo = FakeProgramRepository()
    repo.seed([{
        "id": template_id,
        "user_id": None,
        "name": "Starter Strength",
        "description": "Two-week starter block",
        "duration": 2,
        "workouts": sample_weeks(),
    }])
    if user_id is not None:
        repo.seed([{
            "id": program_id,
            "user_id": user_id,
            "name": "Starter Strength",
            "duration": 2,
            "workouts": sample_weeks(),
        }])
    return repo


__all__ = [
    # Fakes
    "FakeJournalRepository",
    "FakeProgramRepository",
    "FakeDailyWorkoutRepository",
    # Factories
    "create_program_repo",
    "sample_weeks",
]
