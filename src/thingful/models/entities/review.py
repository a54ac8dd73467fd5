"""
Review - a rating plus text written by a user about a thing.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, StrictInt, field_serializer

from ..core import CoreModel, isoformat_utc
from .user import UserView
from ...utils.sanitize import sanitize

MIN_RATING = 1
MAX_RATING = 5


class Review(CoreModel):
    """Review row as stored in thingful_reviews."""

    text: str = Field(..., description="Review body (user supplied, sanitized on read)")
    rating: int = Field(..., ge=MIN_RATING, le=MAX_RATING, description="Star rating")
    thing_id: int = Field(..., description="Reviewed thing (thingful_things.id)")
    user_id: int = Field(..., description="Author (thingful_users.id)")


class ReviewCreateRequest(BaseModel):
    """Body of POST /api/reviews. Field order is the order missing fields are reported."""

    thing_id: StrictInt = Field(description="Thing being reviewed")
    rating: StrictInt = Field(
        ge=MIN_RATING,
        le=MAX_RATING,
        description=f"Rating: {MIN_RATING}-{MAX_RATING}",
    )
    text: str = Field(description="Review text")


class ReviewView(BaseModel):
    """Public, sanitized shape of a review with its author."""

    id: int
    rating: int
    text: str
    thing_id: int
    date_created: datetime
    user: UserView

    @field_serializer("date_created")
    def _serialize_date_created(self, value: datetime) -> str:
        return isoformat_utc(value)

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "ReviewView":
        return cls(
            id=row["id"],
            rating=row["rating"],
            text=sanitize(row["text"]),
            thing_id=row["thing_id"],
            date_created=row["date_created"],
            user=UserView.from_row(row),
        )
