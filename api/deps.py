"""
FastAPI Dependency Providers for the Fitness Journal API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- Repository providers create new instances per-request, with table names
  taken from settings
- Use case providers wire repositories into use cases
- The acting user is taken from the X-User-Id header

Usage in routers:
    from api.deps import get_current_user, get_query_journal_use_case

    @router.get("/calendar")
    def read_calendar(
        user_id: str = Depends(get_current_user),
        use_case: QueryJournalUseCase = Depends(get_query_journal_use_case),
    ):
        return use_case.execute(user_id)

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_journal_repo] = lambda: FakeJournalRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header, HTTPException
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import (
    DailyWorkoutRepository,
    JournalRepository,
    ProgramRepository,
)
from application.use_cases import (
    AppendToJournalUseCase,
    ChooseProgramUseCase,
    CompleteExerciseUseCase,
    QueryJournalUseCase,
    RemoveFromJournalUseCase,
)

# Concrete implementations
from infrastructure import (
    SupabaseDailyWorkoutRepository,
    SupabaseJournalRepository,
    SupabaseProgramRepository,
)

from backend.settings import Settings, get_settings as _get_settings


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_journal_repo(
    client: Client = Depends(get_supabase_client_required),
    settings: Settings = Depends(get_settings),
) -> JournalRepository:
    """
    Get JournalRepository implementation.

    Returns a SupabaseJournalRepository bound to the configured calendar table.
    The return type is the Protocol to enable easy faking.
    """
    return SupabaseJournalRepository(client, table=settings.calendar_table)


def get_program_repo(
    client: Client = Depends(get_supabase_client_required),
    settings: Settings = Depends(get_settings),
) -> ProgramRepository:
    """Get ProgramRepository implementation."""
    return SupabaseProgramRepository(client, table=settings.programs_table)


def get_daily_workout_repo(
    client: Client = Depends(get_supabase_client_required),
    settings: Settings = Depends(get_settings),
) -> DailyWorkoutRepository:
    """Get DailyWorkoutRepository implementation."""
    return SupabaseDailyWorkoutRepository(client, table=settings.daily_workouts_table)


# =============================================================================
# Use Case Providers
# =============================================================================


def get_append_to_journal_use_case(
    journal_repo: JournalRepository = Depends(get_journal_repo),
) -> AppendToJournalUseCase:
    """Get an AppendToJournalUseCase instance (duplicates are ignored)."""
    return AppendToJournalUseCase(journal_repo=journal_repo)


def get_remove_from_journal_use_case(
    journal_repo: JournalRepository = Depends(get_journal_repo),
) -> RemoveFromJournalUseCase:
    """Get a RemoveFromJournalUseCase instance."""
    return RemoveFromJournalUseCase(journal_repo=journal_repo)


def get_query_journal_use_case(
    journal_repo: JournalRepository = Depends(get_journal_repo),
    program_repo: ProgramRepository = Depends(get_program_repo),
    daily_workout_repo: DailyWorkoutRepository = Depends(get_daily_workout_repo),
) -> QueryJournalUseCase:
    """Get a QueryJournalUseCase instance."""
    return QueryJournalUseCase(
        journal_repo=journal_repo,
        program_repo=program_repo,
        daily_workout_repo=daily_workout_repo,
    )


def get_complete_exercise_use_case(
    program_repo: ProgramRepository = Depends(get_program_repo),
    append_to_journal: AppendToJournalUseCase = Depends(get_append_to_journal_use_case),
) -> CompleteExerciseUseCase:
    """Get a CompleteExerciseUseCase instance."""
    return CompleteExerciseUseCase(
        program_repo=program_repo,
        append_to_journal=append_to_journal,
    )


def get_choose_program_use_case(
    program_repo: ProgramRepository = Depends(get_program_repo),
) -> ChooseProgramUseCase:
    """Get a ChooseProgramUseCase instance."""
    return ChooseProgramUseCase(program_repo=program_repo)


# =============================================================================
# Identity Provider
# =============================================================================


def get_current_user(
    x_user_id: Optional[str] = Header(None, alias="X-User-Id"),
) -> str:
    """
    Get the acting user ID from the X-User-Id header.

    Authentication happens upstream; this service trusts the header.

    Raises:
        HTTPException: 401 if the header is missing or blank
    """
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=401, detail="Missing X-User-Id header")
    return x_user_id.strip()


# =============================================================================
# Exports
# =============================================================================

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
