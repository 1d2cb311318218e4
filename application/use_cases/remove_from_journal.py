"""
RemoveFromJournal Use Case.

Deletes individual workout or food items from a journal day. The journal
entry itself is never deleted, even when it ends up empty.
"""

import logging
from datetime import date
from typing import Union

from application.exceptions import NotFoundError
from application.ports import JournalRepository
from domain.models import JournalEntry, JournalItemKind, to_calendar_date

logger = logging.getLogger(__name__)


class RemoveFromJournalUseCase:
    """Remove one item (by id) from a user's journal day."""

    def __init__(self, journal_repo: JournalRepository) -> None:
        self._journal_repo = journal_repo

    def execute(
        self,
        user_id: str,
        entry_date: Union[date, str],
        item_id: str,
        kind: Union[JournalItemKind, str],
    ) -> JournalEntry:
        """
        Remove every item of the given kind whose id equals item_id.

        Raises:
            NotFoundError: If the day has no journal entry or no such item
            PersistenceError: If the repository fails
        """
        kind = JournalItemKind(kind)
        day = to_calendar_date(entry_date)

        row = self._journal_repo.get_by_date(user_id, day)
        if row is None:
            logger.warning(f"No journal entry for user {user_id} on {day}")
            raise NotFoundError(f"No journal entry on {day.isoformat()}")

        entry = JournalEntry.from_row(row)
        items = entry.items(kind)
        remaining = [i for i in items if i.id != item_id]
        if len(remaining) == len(items):
            raise NotFoundError(f"No {kind.value} {item_id} on {day.isoformat()}")

        updated = self._journal_repo.update_items(
            entry.id,
            user_id,
            **{kind.field_name: [i.to_payload() for i in remaining]},
        )
        logger.info(f"Removed {kind.value} {item_id} from journal of user {user_id} on {day}")
        return JournalEntry.from_row(updated)
