"""
Synthetic workout keys.

A program exercise is addressed by the triple (weekIndex, dayIndex,
workoutIndex). The triple is flattened into a compact string key of the
form ``w:<week>-<day>-<workout>`` which serves as the stable cross-reference
between a program exercise and the journal workout logged for it.

Examples:
    >>> encode_workout_key(0, 1, 0)
    'w:0-1-0'
    >>> decode_workout_key("w:0-1-0")
    (0, 1, 0)
"""

import re
from typing import Optional, Tuple

from domain.exceptions import InvalidWorkoutKeyError

WORKOUT_KEY_PREFIX = "w:"

# Components may be negative, so "-" is both separator and sign.
_KEY_PATTERN = re.compile(r"w:(-?\d+)-(-?\d+)-(-?\d+)", re.ASCII)


def encode_workout_key(week_index: int, day_index: int, workout_index: int) -> str:
    """Format a (week, day, workout) triple as a synthetic key."""
    return f"{WORKOUT_KEY_PREFIX}{int(week_index)}-{int(day_index)}-{int(workout_index)}"


def decode_workout_key(key: str) -> Tuple[int, int, int]:
    """
    Parse a synthetic key back into its (week, day, workout) triple.

    Args:
        key: Key produced by encode_workout_key()

    Returns:
        Tuple of (week_index, day_index, workout_index)

    Raises:
        InvalidWorkoutKeyError: If the key is not a string, lacks the ``w:``
            prefix, or does not hold exactly three integer components
    """
    if not isinstance(key, str):
        raise InvalidWorkoutKeyError(key)

    match = _KEY_PATTERN.fullmatch(key)
    if match is None:
        raise InvalidWorkoutKeyError(key)

    week, day, workout = (int(part) for part in match.groups())
    return week, day, workout


def try_decode_workout_key(key: Optional[str]) -> Optional[Tuple[int, int, int]]:
    """Like decode_workout_key() but returns None for missing or malformed keys."""
    if key is None:
        return None
    try:
        return decode_workout_key(key)
    except InvalidWorkoutKeyError:
        return None
