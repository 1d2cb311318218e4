"""
Journal (calendar) models.

A JournalEntry aggregates everything a user logged on one calendar day:
an ordered list of workouts and an ordered list of foods. Items are stored
as flat JSON objects; each model keeps a closed set of known fields plus
one open ``extra`` map so that caller-supplied metadata survives a round
trip without loosening the typed fields the dedup and enrichment logic
depend on.
"""

import datetime as dt
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Name of the open extension map on journal items.
_OPEN_FIELD = "extra"


def to_calendar_date(value: Union[dt.date, str]) -> dt.date:
    """
    Normalize a calendar day given as date, datetime or ISO string.

    Raises:
        ValueError: If a string is not an ISO date (YYYY-MM-DD...)
    """
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if isinstance(value, str):
        return dt.date.fromisoformat(value.strip()[:10])
    raise ValueError(f"Not a calendar date: {value!r}")


class WorkoutSource(str, Enum):
    """Where a journal workout came from."""
    MANUAL = "manual"
    DAILY = "daily"
    PROGRAM = "program"


class JournalItemKind(str, Enum):
    """Which list of a journal entry an item belongs to."""
    WORKOUT = "workout"
    FOOD = "food"

    @property
    def field_name(self) -> str:
        """Name of the JournalEntry list holding items of this kind."""
        return "workouts" if self is JournalItemKind.WORKOUT else "foods"


class JournalItem(BaseModel):
    """
    Base class for anything appended to a journal entry.

    Identity rules (see is_same_entry):
    - externalId is the semantic identity when both records carry one
    - otherwise records are compared by id
    """

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    external_id: Optional[str] = Field(default=None, alias="externalId")
    extra: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("id", "external_id", mode="before")
    @classmethod
    def _stringify_ids(cls, v: Any) -> Any:
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @classmethod
    def _known_keys(cls) -> Dict[str, str]:
        """Map payload keys (field names and aliases) to field names."""
        keys: Dict[str, str] = {}
        for name, info in cls.model_fields.items():
            if name == _OPEN_FIELD:
                continue
            keys[name] = name
            if info.alias:
                keys[info.alias] = name
        return keys

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "JournalItem":
        """
        Build an item from a flat JSON object.

        Known keys populate typed fields; every other key lands in ``extra``.
        """
        known = cls._known_keys()
        fields: Dict[str, Any] = {}
        extra: Dict[str, Any] = {}
        for key, value in payload.items():
            if key in known:
                fields[known[key]] = value
            else:
                extra[key] = value
        return cls(**fields, extra=extra)

    def to_payload(self) -> Dict[str, Any]:
        """
        Flatten back into the stored JSON shape (known fields win on collision).

        Only fields that were given are written, so explicit nulls survive and
        defaults such as source are not added to stored records.
        """
        data = self.model_dump(
            by_alias=True,
            exclude_unset=True,
            exclude={_OPEN_FIELD},
            mode="json",
        )
        return {**self.extra, **data}

    def is_same_entry(self, other: "JournalItem") -> bool:
        """Two-tier dedup test: externalId when both have one, else id."""
        if self.external_id and other.external_id:
            return self.external_id == other.external_id
        return self.id is not None and self.id == other.id


class WorkoutRecord(JournalItem):
    """A workout logged on a journal day."""

    source: WorkoutSource = WorkoutSource.MANUAL
    exercises: Optional[List[Any]] = None
    program_meta: Optional[Dict[str, Any]] = Field(default=None, alias="programMeta")
    # Raw stored value; only a literal true counts as completed.
    completed: Any = None
    completed_at: Optional[str] = Field(default=None, alias="completedAt")
    notes: Optional[str] = None


class FoodRecord(JournalItem):
    """A food entry; nutritional fields are free-form and live in ``extra``."""

    pass


JournalRecord = Union[WorkoutRecord, FoodRecord]


def record_class(kind: JournalItemKind) -> Type[JournalItem]:
    return WorkoutRecord if kind is JournalItemKind.WORKOUT else FoodRecord


class JournalEntry(BaseModel):
    """
    One user's journal for one calendar day.

    At most one entry exists per (user_id, entry_date); the persistence layer
    enforces this with a unique constraint.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    user_id: str = Field(..., alias="userId")
    entry_date: dt.date = Field(..., alias="date")
    workouts: List[WorkoutRecord] = Field(default_factory=list)
    foods: List[FoodRecord] = Field(default_factory=list)
    created_at: Optional[str] = Field(default=None, alias="createdAt")

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, v: Any) -> Any:
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "JournalEntry":
        """Build an entry from a database row (snake_case columns, JSON item lists)."""
        return cls(
            id=row.get("id"),
            user_id=row["user_id"],
            entry_date=row["date"],
            workouts=[WorkoutRecord.from_payload(w) for w in row.get("workouts") or []],
            foods=[FoodRecord.from_payload(f) for f in row.get("foods") or []],
            created_at=row.get("created_at"),
        )

    def items(self, kind: JournalItemKind) -> List[JournalRecord]:
        return self.workouts if kind is JournalItemKind.WORKOUT else self.foods

    def items_payload(self, kind: JournalItemKind) -> List[Dict[str, Any]]:
        return [item.to_payload() for item in self.items(kind)]

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to the JSON shape returned to callers."""
        payload: Dict[str, Any] = {
            "id": self.id,
            "userId": self.user_id,
            "date": self.entry_date.isoformat(),
            "workouts": self.items_payload(JournalItemKind.WORKOUT),
            "foods": self.items_payload(JournalItemKind.FOOD),
        }
        if self.created_at is not None:
            payload["createdAt"] = self.created_at
        return payload
