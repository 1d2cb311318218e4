"""
Repository Interfaces (Ports) for the fitness journal core.

This package defines abstract interfaces that decouple the use cases from
infrastructure (database). Implementations are provided in the
infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the use cases need)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import JournalRepository

    class JournalService:
        def __init__(self, journal_repo: JournalRepository):
            self.journal_repo = journal_repo
"""

# Journal (calendar) persistence
from application.ports.journal_repository import JournalRepository

# Training programs
from application.ports.program_repository import ProgramRepository

# Daily workout plans
from application.ports.daily_workout_repository import DailyWorkoutRepository

__all__ = [
    "JournalRepository",
    "ProgramRepository",
    "DailyWorkoutRepository",
]
