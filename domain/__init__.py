"""
Domain layer for the fitness journal core.

Pure logic with no I/O:
- models: journal entries, journal items, programs, daily plans
- workout_keys: the ``w:<week>-<day>-<workout>`` synthetic key codec
- program_locator: resolves one exercise inside a program structure
- exceptions: typed errors shared with the outer layers
"""

from domain.exceptions import (
    DomainError,
    ExerciseNotFoundError,
    InvalidWorkoutKeyError,
    NotFoundError,
)
from domain.models import (
    DailyWorkoutPlan,
    FoodRecord,
    JournalEntry,
    JournalItemKind,
    ProgramDocument,
    WorkoutRecord,
    WorkoutSource,
)
from domain.program_locator import LocatedExercise, locate_exercise
from domain.workout_keys import (
    decode_workout_key,
    encode_workout_key,
    try_decode_workout_key,
)

__all__ = [
    "DomainError",
    "ExerciseNotFoundError",
    "InvalidWorkoutKeyError",
    "NotFoundError",
    "DailyWorkoutPlan",
    "FoodRecord",
    "JournalEntry",
    "JournalItemKind",
    "ProgramDocument",
    "WorkoutRecord",
    "WorkoutSource",
    "LocatedExercise",
    "locate_exercise",
    "decode_workout_key",
    "encode_workout_key",
    "try_decode_workout_key",
]
