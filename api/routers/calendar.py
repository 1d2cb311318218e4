"""
Calendar router for the per-day fitness journal.

This router contains endpoints for:
- GET /calendar - Query journal days with filtering and enrichment
- POST /calendar/workouts, /calendar/foods - Append an item to a day
- DELETE /calendar/{date}/workouts/{item_id}, /calendar/{date}/foods/{item_id}
  - Remove an item from a day

Appends are idempotent: an item whose externalId (or id, when either side has
no externalId) already exists on that day is ignored.
"""

import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import ValidationError

from api.deps import (
    get_append_to_journal_use_case,
    get_current_user,
    get_query_journal_use_case,
    get_remove_from_journal_use_case,
)
from api.schemas import AppendItemRequest
from application.exceptions import (
    DuplicateEntryError,
    InvalidSelectorError,
    NotFoundError,
    PersistenceError,
)
from application.use_cases import (
    AppendToJournalUseCase,
    JournalSelector,
    QueryJournalUseCase,
    QueryOptions,
    RemoveFromJournalUseCase,
)
from domain.models import JournalItemKind

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/calendar",
    tags=["Calendar"],
)


# =============================================================================
# Query
# =============================================================================


@router.get("")
def read_calendar(
    entry_date: Optional[date] = Query(None, alias="date"),
    from_date: Optional[date] = Query(None, alias="from"),
    to_date: Optional[date] = Query(None, alias="to"),
    month: Optional[int] = Query(None),
    year: Optional[int] = Query(None),
    only_completed: bool = Query(False),
    include: Optional[str] = Query(None, description="Comma list of program, daily, flags"),
    user_id: str = Depends(get_current_user),
    use_case: QueryJournalUseCase = Depends(get_query_journal_use_case),
):
    """
    Return the caller's journal days, ascending by date.

    Selector priority: date > from/to > month/year > current month.
    """
    try:
        selector = JournalSelector(
            entry_date=entry_date,
            from_date=from_date,
            to_date=to_date,
            month=month,
            year=year,
        )
        options = QueryOptions(
            only_completed=only_completed,
            include=QueryOptions.parse_include(include),
        )
        return use_case.execute(user_id, selector, options)
    except InvalidSelectorError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except PersistenceError as e:
        logger.error(f"Calendar query failed for {user_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to read calendar")


# =============================================================================
# Append
# =============================================================================


def _append(
    kind: JournalItemKind,
    request: AppendItemRequest,
    user_id: str,
    use_case: AppendToJournalUseCase,
):
    try:
        entry = use_case.execute(user_id, request.entry_date, request.item, kind)
        return entry.to_payload()
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False))
    except DuplicateEntryError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PersistenceError as e:
        logger.error(f"Calendar append failed for {user_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update calendar")


@router.post("/workouts")
def append_workout(
    request: AppendItemRequest,
    user_id: str = Depends(get_current_user),
    use_case: AppendToJournalUseCase = Depends(get_append_to_journal_use_case),
):
    """Append a workout to a journal day, creating the day if needed."""
    return _append(JournalItemKind.WORKOUT, request, user_id, use_case)


@router.post("/foods")
def append_food(
    request: AppendItemRequest,
    user_id: str = Depends(get_current_user),
    use_case: AppendToJournalUseCase = Depends(get_append_to_journal_use_case),
):
    """Append a food to a journal day, creating the day if needed."""
    return _append(JournalItemKind.FOOD, request, user_id, use_case)


# =============================================================================
# Remove
# =============================================================================


def _remove(
    kind: JournalItemKind,
    entry_date: date,
    item_id: str,
    user_id: str,
    use_case: RemoveFromJournalUseCase,
):
    try:
        return use_case.execute(user_id, entry_date, item_id, kind).to_payload()
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PersistenceError as e:
        logger.error(f"Calendar removal failed for {user_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update calendar")


@router.delete("/{entry_date}/workouts/{item_id}")
def remove_workout(
    entry_date: date,
    item_id: str,
    user_id: str = Depends(get_current_user),
    use_case: RemoveFromJournalUseCase = Depends(get_remove_from_journal_use_case),
):
    """Remove one workout (by id) from a journal day."""
    return _remove(JournalItemKind.WORKOUT, entry_date, item_id, user_id, use_case)


@router.delete("/{entry_date}/foods/{item_id}")
def remove_food(
    entry_date: date,
    item_id: str,
    user_id: str = Depends(get_current_user),
    use_case: RemoveFromJournalUseCase = Depends(get_remove_from_journal_use_case),
):
    """Remove one food (by id) from a journal day."""
    return _remove(JournalItemKind.FOOD, entry_date, item_id, user_id, use_case)
