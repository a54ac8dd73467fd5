"""
Thingful Entity Models

- Users: seeded accounts (bcrypt password hashes)
- Things: reviewable entities owned by a user
- Reviews: 1-5 star ratings with text, written by a user about a thing

Each entity has a storage model (CoreModel subclass) and a public view that
is sanitized and safe to return to clients.
"""

from .review import MAX_RATING, MIN_RATING, Review, ReviewCreateRequest, ReviewView
from .thing import Thing, ThingView
from .user import User, UserView

__all__ = [
    "User",
    "UserView",
    "Thing",
    "ThingView",
    "Review",
    "ReviewCreateRequest",
    "ReviewView",
    "MIN_RATING",
    "MAX_RATING",
]
