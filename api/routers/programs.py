"""
Programs router for training program choice and progress.

This router provides:
- GET /programs/templates - List catalog templates
- GET /programs/current - The caller's current program
- POST /programs/choose - Copy a template into the caller's current program
- POST /programs/locate - Resolve an exercise address
- POST /programs/complete - Complete an exercise and log it to the calendar
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.deps import (
    get_choose_program_use_case,
    get_complete_exercise_use_case,
    get_current_user,
    get_program_repo,
)
from api.schemas import (
    ChooseProgramRequest,
    CompleteExerciseRequest,
    ExerciseAddressRequest,
)
from application.exceptions import (
    NotFoundError,
    PersistenceError,
)
from application.ports import ProgramRepository
from application.use_cases import (
    ChooseProgramUseCase,
    CompleteExerciseUseCase,
    load_user_program,
)
from domain.program_locator import locate_exercise

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/programs",
    tags=["Programs"],
)


@router.get("/templates")
def list_templates(
    user_id: str = Depends(get_current_user),
    use_case: ChooseProgramUseCase = Depends(get_choose_program_use_case),
):
    """List catalog program templates."""
    try:
        return [t.to_payload() for t in use_case.list_templates()]
    except PersistenceError as e:
        logger.error(f"Listing program templates failed: {e}")
        raise HTTPException(status_code=500, detail="Failed to list programs")


@router.get("/current")
def get_current_program(
    user_id: str = Depends(get_current_user),
    use_case: ChooseProgramUseCase = Depends(get_choose_program_use_case),
):
    """Return the caller's current program."""
    try:
        return use_case.get_current(user_id).to_payload()
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PersistenceError as e:
        logger.error(f"Reading current program failed for {user_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to read program")


@router.post("/choose")
def choose_program(
    request: ChooseProgramRequest,
    user_id: str = Depends(get_current_user),
    use_case: ChooseProgramUseCase = Depends(get_choose_program_use_case),
):
    """Replace the caller's current program with a copy of a template."""
    try:
        return use_case.execute(user_id, request.template_id).to_payload()
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PersistenceError as e:
        logger.error(f"Choosing program {request.template_id} failed for {user_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to choose program")


@router.post("/locate")
def locate(
    request: ExerciseAddressRequest,
    user_id: str = Depends(get_current_user),
    program_repo: ProgramRepository = Depends(get_program_repo),
):
    """
    Resolve an exercise by indices or synthetic key.

    Returns the canonical address (workoutId re-encoded from the resolved
    indices) together with the exercise itself.
    """
    try:
        program = load_user_program(program_repo, user_id, request.program_id)
        located = locate_exercise(
            program.workouts,
            week_index=request.week_index,
            day_index=request.day_index,
            workout_index=request.workout_index,
            workout_id=request.workout_id,
        )
        return {"programId": program.id, **located.location(), "exercise": located.exercise}
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PersistenceError as e:
        logger.error(f"Locating exercise failed for {user_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to read program")


@router.post("/complete")
def complete_exercise(
    request: CompleteExerciseRequest,
    user_id: str = Depends(get_current_user),
    use_case: CompleteExerciseUseCase = Depends(get_complete_exercise_use_case),
):
    """
    Mark a program exercise completed and log it to the calendar.

    Replaying the same completion for the same day leaves a single calendar
    workout (dedup by its correlation id).
    """
    try:
        result = use_case.execute(
            user_id,
            request.program_id,
            week_index=request.week_index,
            day_index=request.day_index,
            workout_index=request.workout_index,
            workout_id=request.workout_id,
            completion_notes=request.completion_notes,
            effective_date=request.effective_date,
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PersistenceError as e:
        logger.error(f"Completing exercise failed for {user_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to complete exercise")

    return {
        "program": result.program.to_payload(),
        "exercise": result.exercise,
        "workoutId": result.workout_id,
        "externalId": result.external_id,
        "calendar": result.journal_entry.to_payload(),
    }
