"""
Training program and daily workout plan models.

A program's ``workouts`` field is the nested week -> day -> exercise
structure addressed by domain.program_locator. It is kept as plain JSON
(lists and dicts) because exercises carry arbitrary fields and are updated
in place by the progress tracker.
"""

import copy
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProgramDocument(BaseModel):
    """
    A multi-week training program.

    Catalog templates have no owning user; a user's current program is a
    structural copy of a template with ``user_id`` set.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    user_id: Optional[str] = Field(default=None, alias="userId")
    name: str = ""
    description: Optional[str] = None
    duration: Optional[int] = Field(default=None, description="Duration in weeks")
    workouts: Any = Field(default_factory=list, description="Weeks -> days -> exercises")
    created_at: Optional[str] = Field(default=None, alias="createdAt")

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, v: Any) -> Any:
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("workouts", mode="before")
    @classmethod
    def _default_workouts(cls, v: Any) -> Any:
        return [] if v is None else v

    @property
    def is_template(self) -> bool:
        return self.user_id is None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "ProgramDocument":
        return cls(
            id=row.get("id"),
            user_id=row.get("user_id"),
            name=row.get("name") or "",
            description=row.get("description"),
            duration=row.get("duration"),
            workouts=row.get("workouts"),
            created_at=row.get("created_at"),
        )

    def copy_workouts(self) -> Any:
        """Deep copy of the week structure, safe to mutate."""
        return copy.deepcopy(self.workouts)

    def summary(self) -> Dict[str, Any]:
        """The {id, name} pair attached to journal workouts at read time."""
        return {"id": self.id, "name": self.name}

    def to_payload(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "userId": self.user_id,
            "name": self.name,
            "description": self.description,
            "duration": self.duration,
            "workouts": self.workouts,
            "createdAt": self.created_at,
        }


class DailyWorkoutPlan(BaseModel):
    """A user's current daily workout: a flat list of exercises."""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    user_id: str = Field(..., alias="userId")
    name: Optional[str] = None
    exercises: List[Any] = Field(default_factory=list)
    created_at: Optional[str] = Field(default=None, alias="createdAt")

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, v: Any) -> Any:
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "DailyWorkoutPlan":
        return cls(
            id=row.get("id"),
            user_id=row["user_id"],
            name=row.get("name"),
            exercises=row.get("exercises") or [],
            created_at=row.get("created_at"),
        )

    def summary(self) -> Dict[str, Any]:
        """The {id, name?} pair attached to daily journal workouts at read time."""
        result: Dict[str, Any] = {"id": self.id}
        if self.name:
            result["name"] = self.name
        return result

    def to_payload(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "userId": self.user_id,
            "name": self.name,
            "exercises": self.exercises,
            "createdAt": self.created_at,
        }
