"""
User - account that owns things and writes reviews.

Users are seeded (there is no registration endpoint). The password column
holds a bcrypt hash and never appears in a public view.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, field_serializer

from ..core import CoreModel, isoformat_utc


class User(CoreModel):
    """User row as stored in thingful_users."""

    user_name: str = Field(..., description="Unique login name")
    full_name: str = Field(..., description="Display name")
    nickname: Optional[str] = Field(default=None, description="Optional nickname")
    password: str = Field(..., description="bcrypt hash", repr=False)
    date_modified: Optional[datetime] = Field(
        default=None, description="Last profile update"
    )


class UserView(BaseModel):
    """Public shape of a user, embedded in thing and review views."""

    id: int
    user_name: str
    full_name: str
    nickname: Optional[str] = None
    date_created: datetime
    date_modified: Optional[datetime] = None

    @field_serializer("date_created")
    def _serialize_date_created(self, value: datetime) -> str:
        return isoformat_utc(value)

    @field_serializer("date_modified")
    def _serialize_date_modified(self, value: Optional[datetime]) -> Optional[str]:
        return isoformat_utc(value) if value else None

    @classmethod
    def from_row(cls, row: dict[str, Any], prefix: str = "user_") -> "UserView":
        """
        Build the view from a joined row.

        Joined queries alias user columns as `user_<column>` so they do not
        collide with the thing or review columns.
        """
        return cls(
            id=row[f"{prefix}id"],
            user_name=row[f"{prefix}user_name"],
            full_name=row[f"{prefix}full_name"],
            nickname=row.get(f"{prefix}nickname"),
            date_created=row[f"{prefix}date_created"],
            date_modified=row.get(f"{prefix}date_modified"),
        )
