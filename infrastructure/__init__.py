"""
Infrastructure Layer for the fitness journal API.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
"""

# Re-export database repositories for convenient access
from infrastructure.db import (
    SupabaseDailyWorkoutRepository,
    SupabaseJournalRepository,
    SupabaseProgramRepository,
)

__all__ = [
    "SupabaseJournalRepository",
    "SupabaseProgramRepository",
    "SupabaseDailyWorkoutRepository",
]
