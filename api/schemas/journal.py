"""
Pydantic models for the calendar (journal) API.
"""

from datetime import date
from typing import Any, Dict

from pydantic import BaseModel, Field


class AppendItemRequest(BaseModel):
    """Append one workout or food to the journal day `date`."""
    entry_date: date = Field(..., alias="date", description="Calendar day (YYYY-MM-DD)")
    item: Dict[str, Any] = Field(..., description="Flat item object; id/externalId drive dedup")

    model_config = {"populate_by_name": True}
