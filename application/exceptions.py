"""
Application-layer exceptions.

These exceptions are used across application and infrastructure layers.
Domain errors are re-exported so callers have one import location.
"""

from typing import Optional

from domain.exceptions import (
    DomainError,
    ExerciseNotFoundError,
    InvalidWorkoutKeyError,
    NotFoundError,
)


class PersistenceError(DomainError):
    """Opaque failure from the storage layer.

    Raised by repository adapters, wrapping the underlying client error.
    Use cases neither interpret nor retry it.
    """

    pass


class DuplicateEntryError(DomainError):
    """An appended journal item matched an existing one.

    Only raised when the append use case runs with on_duplicate="raise";
    the default policy absorbs duplicates silently.
    """

    def __init__(self, item_id: str, external_id: Optional[str] = None):
        key = external_id or item_id
        super().__init__(f"Journal item already exists: {key}")
        self.item_id = item_id
        self.external_id = external_id


class InvalidSelectorError(DomainError, ValueError):
    """A journal query selector or include option is malformed."""

    pass


__all__ = [
    "DomainError",
    "DuplicateEntryError",
    "ExerciseNotFoundError",
    "InvalidSelectorError",
    "InvalidWorkoutKeyError",
    "NotFoundError",
    "PersistenceError",
]
