"""
Program locator.

Finds a single exercise inside the nested week -> day -> exercise structure
of a program document:

    [
        {"weekIndex": 0, "days": [
            {"dayIndex": 1, "workouts": [{"name": "Squats"}, ...]},
        ]},
        ...
    ]

Weeks and days are matched by the value of their ``weekIndex`` /
``dayIndex`` field (the first match wins), exercises by position. The
returned week and day are the very dicts found in the structure, so callers
can mutate them in place.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from domain.exceptions import ExerciseNotFoundError
from domain.workout_keys import encode_workout_key, try_decode_workout_key


@dataclass
class LocatedExercise:
    """An exercise resolved inside a program structure."""
    week: Dict[str, Any]
    day: Dict[str, Any]
    exercise: Any
    week_index: int
    day_index: int
    workout_index: int
    workout_id: str

    @property
    def exercises(self) -> List[Any]:
        """The day's exercise list that owns the located exercise."""
        return self.day["workouts"]

    def location(self) -> Dict[str, Any]:
        """Location metadata in the JSON shape stored on journal records."""
        return {
            "workoutId": self.workout_id,
            "weekIndex": self.week_index,
            "dayIndex": self.day_index,
            "workoutIndex": self.workout_index,
        }


def _as_int(value: Any) -> Optional[int]:
    """Coerce index-like values ("2", 2.0) to int; None when not an integer."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _find_by_value(items: Sequence[Any], field: str, wanted: int) -> Optional[Dict[str, Any]]:
    for item in items:
        if isinstance(item, dict) and _as_int(item.get(field)) == wanted:
            return item
    return None


def locate_exercise(
    weeks: Any,
    *,
    week_index: Any = None,
    day_index: Any = None,
    workout_index: Any = None,
    workout_id: Optional[str] = None,
) -> LocatedExercise:
    """
    Locate an exercise inside a program's ``workouts`` structure.

    A decodable ``workout_id`` takes precedence over the explicit indices.
    A malformed ``workout_id`` is ignored and the explicit indices are used.

    Args:
        weeks: The program's list of week objects
        week_index: Value of the week's ``weekIndex``
        day_index: Value of the day's ``dayIndex``
        workout_index: Position of the exercise inside the day
        workout_id: Synthetic key ``w:<week>-<day>-<workout>``

    Returns:
        LocatedExercise with references into ``weeks`` and the canonical key

    Raises:
        ExerciseNotFoundError: If any level of the path is missing
    """
    decoded = try_decode_workout_key(workout_id)
    if decoded is not None:
        week_index, day_index, workout_index = decoded

    week_value = _as_int(week_index)
    day_value = _as_int(day_index)
    position = _as_int(workout_index)
    if week_value is None or day_value is None or position is None:
        raise ExerciseNotFoundError(reason="weekIndex, dayIndex and workoutIndex are required")

    if not _is_sequence(weeks):
        raise ExerciseNotFoundError(reason="program has no weeks")

    week = _find_by_value(weeks, "weekIndex", week_value)
    if week is None:
        raise ExerciseNotFoundError(reason=f"week {week_value} not found")

    days = week.get("days")
    if not _is_sequence(days):
        raise ExerciseNotFoundError(reason=f"week {week_value} has no days")

    day = _find_by_value(days, "dayIndex", day_value)
    if day is None:
        raise ExerciseNotFoundError(reason=f"day {day_value} not found in week {week_value}")

    exercises = day.get("workouts")
    if not _is_sequence(exercises):
        raise ExerciseNotFoundError(reason=f"day {day_value} has no workouts")

    if position < 0 or position >= len(exercises):
        raise ExerciseNotFoundError(reason=f"workout {position} out of range")

    return LocatedExercise(
        week=week,
        day=day,
        exercise=exercises[position],
        week_index=week_value,
        day_index=day_value,
        workout_index=position,
        workout_id=encode_workout_key(week_value, day_value, position),
    )
