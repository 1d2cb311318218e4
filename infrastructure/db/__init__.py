"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository interfaces
defined in application.ports. These implementations can be injected into use cases
and routers for clean separation of concerns and testability.

Usage:
    from supabase import create_client
    from infrastructure.db import (
        SupabaseJournalRepository,
        SupabaseProgramRepository,
        SupabaseDailyWorkoutRepository,
    )

    # Create Supabase client
    client = create_client(SUPABASE_URL, SUPABASE_KEY)

    # Instantiate repositories with injected client
    journal_repo = SupabaseJournalRepository(client)
    program_repo = SupabaseProgramRepository(client, table="training_programs")
    daily_repo = SupabaseDailyWorkoutRepository(client)
"""

from infrastructure.db.daily_workout_repository import SupabaseDailyWorkoutRepository
from infrastructure.db.journal_repository import SupabaseJournalRepository
from infrastructure.db.program_repository import SupabaseProgramRepository

__all__ = [
    # Per-day journal (calendar)
    "SupabaseJournalRepository",

    # Training programs and catalog templates
    "SupabaseProgramRepository",

    # Daily workout plans
    "SupabaseDailyWorkoutRepository",
]
