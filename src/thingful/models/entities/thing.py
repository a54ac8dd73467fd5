"""
Thing - the listed, reviewable entity.

Review aggregates (count, average rating) are computed by the query that
loads the thing; they are never stored.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, field_serializer

from ..core import CoreModel, isoformat_utc
from .user import UserView
from ...utils.sanitize import sanitize


class Thing(CoreModel):
    """Thing row as stored in thingful_things."""

    title: str = Field(..., description="Thing title (user supplied, sanitized on read)")
    content: Optional[str] = Field(default=None, description="Description")
    image: Optional[str] = Field(default=None, description="Image URL")
    user_id: Optional[int] = Field(default=None, description="Owner (thingful_users.id)")


class ThingView(BaseModel):
    """Public, sanitized shape of a thing."""

    id: int
    title: str
    content: Optional[str] = None
    image: Optional[str] = None
    date_created: datetime
    number_of_reviews: int = 0
    average_review_rating: float = 0
    user: Optional[UserView] = None

    @field_serializer("date_created")
    def _serialize_date_created(self, value: datetime) -> str:
        return isoformat_utc(value)

    @field_serializer("average_review_rating")
    def _serialize_average_review_rating(self, value: float) -> float | int:
        # Whole numbers go out as integers: 0 for no reviews, 3 rather than 3.0
        return int(value) if value.is_integer() else value

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "ThingView":
        user = UserView.from_row(row) if row.get("user_id") is not None else None
        return cls(
            id=row["id"],
            title=sanitize(row["title"]),
            content=sanitize(row.get("content")),
            image=row.get("image"),
            date_created=row["date_created"],
            number_of_reviews=row.get("number_of_reviews") or 0,
            average_review_rating=row.get("average_review_rating") or 0,
            user=user,
        )
