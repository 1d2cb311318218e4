"""
Pydantic models for the programs and daily workout API.

Index fields are left untyped: the program locator validates them and
reports bad values as a missing exercise.
"""

from datetime import date
from typing import Any, List, Optional

from pydantic import BaseModel, Field


class ChooseProgramRequest(BaseModel):
    """Copy a catalog template into the caller's current program."""
    template_id: str = Field(..., alias="templateId")

    model_config = {"populate_by_name": True}


class ExerciseAddressRequest(BaseModel):
    """Address of one exercise: explicit indices, a synthetic key, or both."""
    program_id: Optional[str] = Field(None, alias="programId", description="Defaults to the current program")
    week_index: Any = Field(None, alias="weekIndex")
    day_index: Any = Field(None, alias="dayIndex")
    workout_index: Any = Field(None, alias="workoutIndex")
    workout_id: Optional[str] = Field(None, alias="workoutId", description="Synthetic key w:<week>-<day>-<position>")

    model_config = {"populate_by_name": True}


class CompleteExerciseRequest(ExerciseAddressRequest):
    """Mark an exercise completed and log it to the journal."""
    completion_notes: Optional[str] = Field(None, alias="completionNotes")
    effective_date: Optional[date] = Field(None, alias="date", description="Defaults to today")


class SaveDailyWorkoutRequest(BaseModel):
    """Replace the caller's daily workout plan."""
    name: Optional[str] = None
    exercises: List[Any] = Field(default_factory=list)
