"""
Domain models for the fitness journal core.

These models are independent of infrastructure concerns (database, API):
- JournalEntry: one user's workouts and foods for one calendar day
- WorkoutRecord / FoodRecord: items appended to a journal entry
- ProgramDocument: a multi-week training program (template or user-owned)
- DailyWorkoutPlan: a user's current daily workout

Usage:
    >>> from domain.models import JournalEntry, WorkoutRecord

    >>> record = WorkoutRecord.from_payload({"id": "w1", "source": "daily", "title": "Legs"})
    >>> record.extra
    {'title': 'Legs'}
"""

from domain.models.journal import (
    FoodRecord,
    JournalEntry,
    JournalItem,
    JournalItemKind,
    JournalRecord,
    WorkoutRecord,
    WorkoutSource,
    record_class,
    to_calendar_date,
)
from domain.models.program import DailyWorkoutPlan, ProgramDocument

__all__ = [
    # Journal
    "JournalEntry",
    "JournalItem",
    "JournalRecord",
    "WorkoutRecord",
    "FoodRecord",
    "record_class",
    "to_calendar_date",
    # Programs
    "ProgramDocument",
    "DailyWorkoutPlan",
    # Enums
    "JournalItemKind",
    "WorkoutSource",
]
