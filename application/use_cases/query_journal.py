"""
QueryJournal Use Case (journal query/enrichment view).

Read-only view over a user's journal entries:
- selects a day, an inclusive range, a month, or the current month
- optionally keeps only completed workouts
- optionally decorates workouts with the user's program / daily plan
  identity and adds per-day flags

The program and daily plan are fetched at most once per query. Flags are
always computed from the unfiltered entry so that only_completed never
changes them.
"""

import calendar
import logging
from dataclasses import dataclass, field
from datetime import MAXYEAR, MINYEAR, date
from typing import Any, Callable, Dict, FrozenSet, Iterable, List, Optional, Tuple, Union

from application.exceptions import InvalidSelectorError
from application.ports import DailyWorkoutRepository, JournalRepository, ProgramRepository
from domain.models import (
    DailyWorkoutPlan,
    JournalEntry,
    ProgramDocument,
    WorkoutRecord,
    WorkoutSource,
)

logger = logging.getLogger(__name__)

INCLUDE_PROGRAM = "program"
INCLUDE_DAILY = "daily"
INCLUDE_FLAGS = "flags"
VALID_INCLUDES = frozenset({INCLUDE_PROGRAM, INCLUDE_DAILY, INCLUDE_FLAGS})


def month_bounds(year: int, month: int) -> Tuple[date, date]:
    """First and last calendar day of a month."""
    if not 1 <= month <= 12:
        raise InvalidSelectorError(f"Month must be between 1 and 12, got {month}")
    if not MINYEAR <= year <= MAXYEAR:
        raise InvalidSelectorError(f"Year must be between {MINYEAR} and {MAXYEAR}, got {year}")
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


@dataclass
class JournalSelector:
    """
    Which days to return, resolved in priority order:
    entry_date > [from_date, to_date] > (month, year) > current month.
    """

    entry_date: Optional[date] = None
    from_date: Optional[date] = None
    to_date: Optional[date] = None
    month: Optional[int] = None
    year: Optional[int] = None

    def resolve(self, today: date) -> Tuple[date, date]:
        """
        Resolve to an inclusive (start, end) pair.

        Args:
            today: Server local date, used for the defaults

        Raises:
            InvalidSelectorError: For half-open or inverted ranges, bad months
                or years, and a year given without a month
        """
        if self.entry_date is not None:
            return self.entry_date, self.entry_date

        if self.from_date is not None or self.to_date is not None:
            if self.from_date is None or self.to_date is None:
                raise InvalidSelectorError("Both from and to are required for a range")
            if self.from_date > self.to_date:
                raise InvalidSelectorError("Range start is after range end")
            return self.from_date, self.to_date

        if self.month is None and self.year is not None:
            raise InvalidSelectorError("A year requires a month")

        if self.month is not None:
            return month_bounds(self.year if self.year is not None else today.year, self.month)

        return month_bounds(today.year, today.month)


@dataclass
class QueryOptions:
    """Filtering and enrichment switches for a journal query."""

    only_completed: bool = False
    include: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        self.include = frozenset(self.include)
        unknown = self.include - VALID_INCLUDES
        if unknown:
            raise InvalidSelectorError(
                f"Unknown include option(s): {', '.join(sorted(unknown))}. "
                f"Must be any of: {', '.join(sorted(VALID_INCLUDES))}"
            )

    @staticmethod
    def parse_include(raw: Union[str, Iterable[str], None]) -> FrozenSet[str]:
        """Parse "program,flags" (or a list of such strings) into a set."""
        if raw is None:
            return frozenset()
        parts = [raw] if isinstance(raw, str) else list(raw)
        names = set()
        for part in parts:
            names.update(p.strip().lower() for p in part.split(",") if p.strip())
        return frozenset(names)


def compute_flags(entry: JournalEntry) -> Dict[str, bool]:
    """Per-day flags over the full (unfiltered) entry."""
    sources = {w.source for w in entry.workouts}
    return {
        "hasDaily": WorkoutSource.DAILY in sources,
        "hasProgram": WorkoutSource.PROGRAM in sources,
        "hasFood": len(entry.foods) > 0,
    }


class QueryJournalUseCase:
    """
    Use case for reading a user's journal with optional enrichment.

    Usage:
        >>> use_case = QueryJournalUseCase(journal_repo, program_repo, daily_repo)
        >>> entries = use_case.execute(
        ...     "user-1",
        ...     JournalSelector(month=3, year=2024),
        ...     QueryOptions(include={"flags"}),
        ... )
    """

    def __init__(
        self,
        journal_repo: JournalRepository,
        program_repo: ProgramRepository,
        daily_workout_repo: DailyWorkoutRepository,
        *,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._journal_repo = journal_repo
        self._program_repo = program_repo
        self._daily_workout_repo = daily_workout_repo
        self._today = today

    def execute(
        self,
        user_id: str,
        selector: Optional[JournalSelector] = None,
        options: Optional[QueryOptions] = None,
    ) -> List[Dict[str, Any]]:
        """
        Return the selected journal entries, ascending by date.

        Args:
            user_id: Owner of the journal
            selector: Which days; defaults to the current month
            options: Filtering and enrichment; defaults to none

        Returns:
            List of entry payloads (JSON-serializable dicts)

        Raises:
            InvalidSelectorError: If the selector cannot be resolved
            PersistenceError: If a repository fails
        """
        selector = selector or JournalSelector()
        options = options or QueryOptions()

        start, end = selector.resolve(self._today())
        rows = self._journal_repo.list_range(user_id, start, end)
        entries = sorted((JournalEntry.from_row(r) for r in rows), key=lambda e: e.entry_date)
        logger.debug(f"Journal query for user {user_id}: {start}..{end} -> {len(entries)} entries")

        program = None
        if INCLUDE_PROGRAM in options.include:
            row = self._program_repo.get_current_for_user(user_id)
            program = ProgramDocument.from_row(row).summary() if row else None

        daily = None
        if INCLUDE_DAILY in options.include:
            row = self._daily_workout_repo.get_for_user(user_id)
            daily = DailyWorkoutPlan.from_row(row).summary() if row else None

        return [self._render(entry, options, program, daily) for entry in entries]

    def _render(
        self,
        entry: JournalEntry,
        options: QueryOptions,
        program: Optional[Dict[str, Any]],
        daily: Optional[Dict[str, Any]],
    ) -> Dict[str, Any]:
        flags = compute_flags(entry)

        workouts = entry.workouts
        if options.only_completed:
            workouts = [w for w in workouts if w.completed is True]

        payload = entry.to_payload()
        payload["workouts"] = [self._decorate(w, program, daily) for w in workouts]
        if INCLUDE_FLAGS in options.include:
            payload["flags"] = flags
        return payload

    @staticmethod
    def _decorate(
        workout: WorkoutRecord,
        program: Optional[Dict[str, Any]],
        daily: Optional[Dict[str, Any]],
    ) -> Dict[str, Any]:
        data = workout.to_payload()
        if program is not None and workout.source is WorkoutSource.PROGRAM:
            data["program"] = dict(program)
        if daily is not None and workout.source is WorkoutSource.DAILY:
            data["daily"] = dict(daily)
        return data
