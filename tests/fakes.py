"""
In-memory stand-ins for the Postgres repositories.

They return rows in the same flat shape as the SQL (owner columns aliased
user_<column>, review aggregates precomputed), so the real views, sanitizer
and auth gate run unchanged on top of them.
"""

from datetime import datetime, timezone
from typing import Any

from thingful.auth import hash_password
from thingful.models.entities import Review


class InMemoryStore:
    """Tables as lists of dicts."""

    def __init__(self):
        self.users: list[dict] = []
        self.things: list[dict] = []
        self.reviews: list[dict] = []

    def seed_users(self, users: list[dict]) -> None:
        for user in users:
            self.users.append({**user, "password": hash_password(user["password"], rounds=4)})

    def seed(self, users: list[dict], things: list[dict], reviews: list[dict]) -> None:
        self.seed_users(users)
        self.things.extend(dict(thing) for thing in things)
        self.reviews.extend(dict(review) for review in reviews)

    def user_columns(self, user_id: int) -> dict[str, Any]:
        user = next((user for user in self.users if user["id"] == user_id), None)
        if user is None:
            return {"user_id": None}
        return {
            "user_id": user["id"],
            "user_user_name": user["user_name"],
            "user_full_name": user["full_name"],
            "user_nickname": user.get("nickname"),
            "user_date_created": user["date_created"],
            "user_date_modified": user.get("date_modified"),
        }

    def thing_row(self, thing: dict) -> dict[str, Any]:
        ratings = [review["rating"] for review in self.reviews if review["thing_id"] == thing["id"]]
        return {
            "id": thing["id"],
            "title": thing["title"],
            "content": thing.get("content"),
            "image": thing.get("image"),
            "date_created": thing["date_created"],
            "number_of_reviews": len(ratings),
            "average_review_rating": sum(ratings) / len(ratings) if ratings else 0,
            **self.user_columns(thing["user_id"]),
        }

    def review_row(self, review: dict) -> dict[str, Any]:
        return {
            "id": review["id"],
            "rating": review["rating"],
            "text": review["text"],
            "thing_id": review["thing_id"],
            "date_created": review["date_created"],
            **self.user_columns(review["user_id"]),
        }


class FakeUsersRepository:
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def get_by_user_name(self, user_name: str) -> dict | None:
        return next((dict(user) for user in self.store.users if user["user_name"] == user_name), None)


class FakeThingsRepository:
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def list_things(self) -> list[dict]:
        return [self.store.thing_row(thing) for thing in sorted(self.store.things, key=lambda t: t["id"])]

    async def get_thing(self, thing_id: int) -> dict | None:
        thing = next((thing for thing in self.store.things if thing["id"] == thing_id), None)
        return self.store.thing_row(thing) if thing else None

    async def get_reviews_for_thing(self, thing_id: int) -> list[dict]:
        reviews = [review for review in self.store.reviews if review["thing_id"] == thing_id]
        return [self.store.review_row(review) for review in sorted(reviews, key=lambda r: r["id"])]


class FakeReviewsRepository:
    def __init__(self, store: InMemoryStore):
        self.store = store

    async def insert_review(self, review: Review) -> dict:
        stored = {
            "id": max((r["id"] for r in self.store.reviews), default=0) + 1,
            "text": review.text,
            "rating": review.rating,
            "thing_id": review.thing_id,
            "user_id": review.user_id,
            "date_created": datetime.now(timezone.utc),
        }
        self.store.reviews.append(stored)
        return self.store.review_row(stored)

    async def get_review(self, review_id: int) -> dict | None:
        review = next((review for review in self.store.reviews if review["id"] == review_id), None)
        return self.store.review_row(review) if review else None
