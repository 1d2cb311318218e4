"""
Daily workout router.

Each user has one daily workout plan, a flat list of exercises:
- GET /daily-workout - Read the caller's plan
- PUT /daily-workout - Create or replace the caller's plan
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.deps import get_current_user, get_daily_workout_repo
from api.schemas import SaveDailyWorkoutRequest
from application.exceptions import PersistenceError
from application.ports import DailyWorkoutRepository
from domain.models import DailyWorkoutPlan

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/daily-workout",
    tags=["Daily Workout"],
)


@router.get("")
def get_daily_workout(
    user_id: str = Depends(get_current_user),
    daily_repo: DailyWorkoutRepository = Depends(get_daily_workout_repo),
):
    """Return the caller's daily workout plan."""
    try:
        row = daily_repo.get_for_user(user_id)
    except PersistenceError as e:
        logger.error(f"Reading daily workout failed for {user_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to read daily workout")

    if row is None:
        raise HTTPException(status_code=404, detail="Daily workout not found")
    return DailyWorkoutPlan.from_row(row).to_payload()


@router.put("")
def save_daily_workout(
    request: SaveDailyWorkoutRequest,
    user_id: str = Depends(get_current_user),
    daily_repo: DailyWorkoutRepository = Depends(get_daily_workout_repo),
):
    """Create or replace the caller's daily workout plan."""
    try:
        row = daily_repo.save_for_user(user_id, exercises=request.exercises, name=request.name)
    except PersistenceError as e:
        logger.error(f"Saving daily workout failed for {user_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to save daily workout")

    logger.info(f"Saved daily workout for {user_id} ({len(request.exercises)} exercises)")
    return DailyWorkoutPlan.from_row(row).to_payload()
