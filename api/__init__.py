"""
API package for the Fitness Journal API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
- schemas/: Request models
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_journal_repo,
    get_program_repo,
    get_daily_workout_repo,
    get_append_to_journal_use_case,
    get_remove_from_journal_use_case,
    get_query_journal_use_case,
    get_complete_exercise_use_case,
    get_choose_program_use_case,
    get_current_user,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_journal_repo",
    "get_program_repo",
    "get_daily_workout_repo",
    # Use cases
    "get_append_to_journal_use_case",
    "get_remove_from_journal_use_case",
    "get_query_journal_use_case",
    "get_complete_exercise_use_case",
    "get_choose_program_use_case",
    # Identity
    "get_current_user",
]
