"""
CompleteExercise Use Case (program progress tracker).

Marks one exercise of a user's training program as completed and logs the
completion to the user's journal.

Workflow:
1. Fetch the program and deep-copy its week structure
2. Locate the exercise (explicit indices or synthetic key)
3. Merge the completion fields into the exercise, keeping all other fields
4. Persist the full week structure
5. Derive the journal correlation id from program, key and date
6. Append a "program" workout to the journal through AppendToJournalUseCase

Replays of the same completion overwrite the completion fields on the
program (last write wins) while the journal append is absorbed by the
dedup rule, since the correlation id is identical.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Callable, Dict, Mapping, Optional, Union

from application.ports import ProgramRepository
from application.use_cases.append_to_journal import AppendToJournalUseCase
from application.use_cases.program_access import load_user_program
from domain.exceptions import ExerciseNotFoundError
from domain.models import (
    JournalEntry,
    ProgramDocument,
    WorkoutRecord,
    WorkoutSource,
    to_calendar_date,
)
from domain.program_locator import locate_exercise

logger = logging.getLogger(__name__)

COMPLETION_FIELDS = ("completed", "lastCompletedAt", "lastCompletedDate", "completionNotes")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def build_correlation_id(program_id: str, workout_key: str, effective_date: date) -> str:
    """Journal externalId for a program exercise completed on a given day."""
    return f"program:{program_id}:workout:{workout_key}:date:{effective_date.isoformat()}"


@dataclass
class CompleteExerciseResult:
    """Result of the CompleteExercise use case execution."""

    program: ProgramDocument
    exercise: Dict[str, Any]
    workout_id: str
    external_id: str
    journal_entry: JournalEntry


class CompleteExerciseUseCase:
    """
    Use case for completing a program exercise.

    Usage:
        >>> use_case = CompleteExerciseUseCase(program_repo=repo, append_to_journal=append)
        >>> result = use_case.execute("user-1", workout_id="w:0-1-0", effective_date="2024-03-02")
        >>> result.external_id
        'program:<id>:workout:w:0-1-0:date:2024-03-02'
    """

    def __init__(
        self,
        program_repo: ProgramRepository,
        append_to_journal: AppendToJournalUseCase,
        *,
        clock: Callable[[], datetime] = _utc_now,
        today: Callable[[], date] = date.today,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            program_repo: Repository for program persistence
            append_to_journal: Journal upsert/dedup engine
            clock: Source of completion timestamps
            today: Source of the default effective date (server local date)
        """
        self._program_repo = program_repo
        self._append = append_to_journal
        self._clock = clock
        self._today = today

    def execute(
        self,
        user_id: str,
        program_id: Optional[str] = None,
        *,
        week_index: Any = None,
        day_index: Any = None,
        workout_index: Any = None,
        workout_id: Optional[str] = None,
        completion_notes: Optional[str] = None,
        effective_date: Union[date, str, None] = None,
    ) -> CompleteExerciseResult:
        """
        Complete one exercise and log it.

        Args:
            user_id: The acting user
            program_id: Program to update; None means the user's current program
            week_index: Value of the target week's weekIndex
            day_index: Value of the target day's dayIndex
            workout_index: Position of the exercise within the day
            workout_id: Synthetic key; overrides the indices when decodable
            completion_notes: Notes to store; None keeps the previous notes
            effective_date: Day the exercise was done; defaults to today

        Returns:
            CompleteExerciseResult with the updated program and journal entry

        Raises:
            NotFoundError: If the program or the exercise does not exist
            PersistenceError: If a repository fails
        """
        program = load_user_program(self._program_repo, user_id, program_id)
        day = to_calendar_date(effective_date) if effective_date is not None else self._today()

        weeks = program.copy_workouts()
        located = locate_exercise(
            weeks,
            week_index=week_index,
            day_index=day_index,
            workout_index=workout_index,
            workout_id=workout_id,
        )
        if not isinstance(located.exercise, Mapping):
            raise ExerciseNotFoundError(reason=f"{located.workout_id} is not an exercise object")

        completed_at = self._clock().isoformat()
        previous = dict(located.exercise)
        exercise = {
            **previous,
            "completed": True,
            "lastCompletedAt": completed_at,
            "lastCompletedDate": day.isoformat(),
            "completionNotes": (
                completion_notes if completion_notes is not None else previous.get("completionNotes")
            ),
        }
        located.exercises[located.workout_index] = exercise

        updated = ProgramDocument.from_row(self._program_repo.update_workouts(program.id, weeks))
        logger.info(f"Completed {located.workout_id} of program {program.id} for user {user_id}")

        external_id = build_correlation_id(program.id, located.workout_id, day)
        record = WorkoutRecord(
            external_id=external_id,
            source=WorkoutSource.PROGRAM,
            program_meta={"programId": program.id, **located.location()},
            completed=True,
            completed_at=completed_at,
        )
        if completion_notes is not None:
            record.notes = completion_notes
        if previous.get("name"):
            record.extra["name"] = previous["name"]

        entry = self._append.append_workout(user_id, day, record)

        return CompleteExerciseResult(
            program=updated,
            exercise=exercise,
            workout_id=located.workout_id,
            external_id=external_id,
            journal_entry=entry,
        )
