"""
Pydantic schemas for API requests.

Organized by feature/domain:
- journal: Calendar append requests
- programs: Program choice, exercise addressing and daily workout requests
"""

from api.schemas.journal import AppendItemRequest
from api.schemas.programs import (
    ChooseProgramRequest,
    CompleteExerciseRequest,
    ExerciseAddressRequest,
    SaveDailyWorkoutRequest,
)

__all__ = [
    "AppendItemRequest",
    "ChooseProgramRequest",
    "CompleteExerciseRequest",
    "ExerciseAddressRequest",
    "SaveDailyWorkoutRequest",
]
