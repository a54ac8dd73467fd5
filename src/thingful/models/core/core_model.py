"""
CoreModel - Base model for all Thingful entities.

All entities (Users, Things, Reviews) inherit from CoreModel, which provides:
- Identity (serial integer id, assigned by the database)
- Creation timestamp (date_created)
- JSON timestamps in the same shape browsers produce with Date.toISOString()
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, field_serializer


def isoformat_utc(value: datetime) -> str:
    """
    Format a timestamp as `YYYY-MM-DDTHH:MM:SS.mmmZ`.

    Naive datetimes are taken to be UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


class CoreModel(BaseModel):
    """
    Base model for all Thingful entities.

    Note: ids come from SERIAL columns, so they are None until the row is inserted.
    """

    id: Optional[int] = Field(
        default=None,
        description="Database identifier (assigned on insert)",
    )
    date_created: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Entity creation timestamp",
    )

    @field_serializer("date_created")
    def _serialize_date_created(self, value: datetime) -> str:
        return isoformat_utc(value)
