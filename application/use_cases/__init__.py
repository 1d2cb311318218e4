"""
Application Use Cases for the fitness journal core.

This package contains application-level use cases that orchestrate domain
logic and coordinate between ports/adapters:
- AppendToJournalUseCase: upsert/dedup of workouts and foods per day
- RemoveFromJournalUseCase: delete single items from a day
- CompleteExerciseUseCase: mark a program exercise done and log it
- QueryJournalUseCase: range queries with filtering and enrichment
- ChooseProgramUseCase: copy a catalog template to a user

Dependencies are injected via constructors for testability. Failures are
raised as the typed errors in application.exceptions.

Usage:
    from application.use_cases import AppendToJournalUseCase

    append = AppendToJournalUseCase(journal_repo=journal_repo)
    entry = append.append_food("user-123", "2024-03-01", {"name": "Oats", "calories": 300})
"""

from application.use_cases.append_to_journal import AppendToJournalUseCase
from application.use_cases.choose_program import ChooseProgramUseCase
from application.use_cases.complete_exercise import (
    CompleteExerciseResult,
    CompleteExerciseUseCase,
    build_correlation_id,
)
from application.use_cases.program_access import load_user_program
from application.use_cases.query_journal import (
    JournalSelector,
    QueryJournalUseCase,
    QueryOptions,
)
from application.use_cases.remove_from_journal import RemoveFromJournalUseCase

__all__ = [
    "AppendToJournalUseCase",
    "RemoveFromJournalUseCase",
    "CompleteExerciseUseCase",
    "CompleteExerciseResult",
    "build_correlation_id",
    "QueryJournalUseCase",
    "JournalSelector",
    "QueryOptions",
    "ChooseProgramUseCase",
    "load_user_program",
]
