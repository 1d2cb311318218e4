"""
Domain exceptions for the fitness journal core.

These exceptions are raised by pure domain logic (key codec, program
locator) and re-exported by application.exceptions for the outer layers.
"""


class DomainError(Exception):
    """Base class for all errors raised by the journal core."""

    pass


class InvalidWorkoutKeyError(DomainError, ValueError):
    """A synthetic workout key could not be decoded.

    Valid keys look like ``w:<weekIndex>-<dayIndex>-<workoutIndex>``.
    """

    def __init__(self, key: object):
        super().__init__(f"Invalid workout key: {key!r}")
        self.key = key


class NotFoundError(DomainError, LookupError):
    """A program, journal entry or journal item does not exist."""

    pass


class ExerciseNotFoundError(NotFoundError):
    """No exercise lives at the requested week/day/position."""

    def __init__(self, message: str = "Exercise not found", *, reason: str = ""):
        super().__init__(message if not reason else f"{message}: {reason}")
        self.reason = reason
