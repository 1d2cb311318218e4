"""
AppendToJournal Use Case.

Merges a workout or food item into a user's journal for one calendar day.

Workflow:
1. Find-or-create the journal entry for (user, date) via repository
2. Assign an id to the item when the caller did not supply one
3. Dedup against existing items of the same kind (externalId, else id)
4. Append and persist with a single write, or return the entry unchanged

Replaying the same logical action (same externalId, or same id when there
is no externalId) never produces a second record.
"""

import logging
import uuid
from datetime import date
from typing import Any, Callable, Literal, Mapping, Union

from application.exceptions import DuplicateEntryError
from application.ports import JournalRepository
from domain.models import (
    JournalEntry,
    JournalItem,
    JournalItemKind,
    record_class,
    to_calendar_date,
)

logger = logging.getLogger(__name__)

DuplicatePolicy = Literal["ignore", "raise"]

ItemInput = Union[JournalItem, Mapping[str, Any]]


def _new_item_id() -> str:
    return str(uuid.uuid4())


class AppendToJournalUseCase:
    """
    Upsert/dedup engine for journal items.

    Dependencies are injected via constructor for testability.

    Usage:
        >>> use_case = AppendToJournalUseCase(journal_repo=repo)
        >>> entry = use_case.append_workout("user-1", "2024-03-01", {"id": "w1", "source": "daily"})
        >>> [w.id for w in entry.workouts]
        ['w1']
    """

    def __init__(
        self,
        journal_repo: JournalRepository,
        *,
        on_duplicate: DuplicatePolicy = "ignore",
        id_factory: Callable[[], str] = _new_item_id,
    ) -> None:
        """
        Initialize the use case.

        Args:
            journal_repo: Repository for journal persistence
            on_duplicate: "ignore" returns the entry unchanged when the item
                already exists; "raise" raises DuplicateEntryError instead
            id_factory: Generates ids for items that arrive without one
        """
        if on_duplicate not in ("ignore", "raise"):
            raise ValueError(f"Unknown duplicate policy: {on_duplicate}")
        self._journal_repo = journal_repo
        self._on_duplicate = on_duplicate
        self._id_factory = id_factory

    def execute(
        self,
        user_id: str,
        entry_date: Union[date, str],
        item: ItemInput,
        kind: Union[JournalItemKind, str],
    ) -> JournalEntry:
        """
        Append one item to the user's journal for entry_date.

        Args:
            user_id: Owner of the journal
            entry_date: Calendar day (date or ISO string)
            item: Item payload or model
            kind: "workout" or "food"

        Returns:
            The journal entry after the append. On a duplicate this is the
            current entry, which still holds the previously stored item.

        Raises:
            DuplicateEntryError: On a duplicate when on_duplicate="raise"
            PersistenceError: If the repository fails
        """
        kind = JournalItemKind(kind)
        day = to_calendar_date(entry_date)

        payload = item.to_payload() if isinstance(item, JournalItem) else dict(item)
        record = record_class(kind).from_payload(payload)
        if not record.id:
            record.id = self._id_factory()

        entry = JournalEntry.from_row(self._journal_repo.find_or_create(user_id, day))

        existing = next((i for i in entry.items(kind) if i.is_same_entry(record)), None)
        if existing is not None:
            logger.debug(
                f"Skipping duplicate {kind.value} {record.external_id or record.id} "
                f"for user {user_id} on {day}"
            )
            if self._on_duplicate == "raise":
                raise DuplicateEntryError(record.id, record.external_id)
            return entry

        items = entry.items_payload(kind) + [record.to_payload()]
        updated = self._journal_repo.update_items(
            entry.id,
            user_id,
            **{kind.field_name: items},
        )
        logger.info(f"Appended {kind.value} {record.id} to journal of user {user_id} on {day}")
        return JournalEntry.from_row(updated)

    def append_workout(
        self,
        user_id: str,
        entry_date: Union[date, str],
        workout: ItemInput,
    ) -> JournalEntry:
        """Append a workout record. See execute()."""
        return self.execute(user_id, entry_date, workout, JournalItemKind.WORKOUT)

    def append_food(
        self,
        user_id: str,
        entry_date: Union[date, str],
        food: ItemInput,
    ) -> JournalEntry:
        """Append a food record. See execute()."""
        return self.execute(user_id, entry_date, food, JournalItemKind.FOOD)
