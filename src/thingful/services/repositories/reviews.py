"""Repository for thingful_reviews."""

from typing import Any

from loguru import logger

from ...models.entities import Review
from ..postgres.service import PostgresService
from .things import REVIEW_SELECT, is_serial_id


class ReviewsRepository:
    """Create and read reviews."""

    table_name = "thingful_reviews"

    def __init__(self, db: PostgresService):
        self.db = db

    async def insert_review(self, review: Review) -> dict[str, Any]:
        """
        Insert a new review and return it joined with its author.

        The id and date_created come from the database defaults.
        """
        row = await self.db.fetchrow(
            f"""
            WITH rev AS (
                INSERT INTO {self.table_name} (text, rating, thing_id, user_id)
                VALUES ($1, $2, $3, $4)
                RETURNING *
            )
            SELECT
                rev.id,
                rev.rating,
                rev.text,
                rev.thing_id,
                rev.date_created,
                usr.id AS user_id,
                usr.user_name AS user_user_name,
                usr.full_name AS user_full_name,
                usr.nickname AS user_nickname,
                usr.date_created AS user_date_created,
                usr.date_modified AS user_date_modified
            FROM rev
            JOIN thingful_users AS usr ON usr.id = rev.user_id
            """,
            review.text,
            review.rating,
            review.thing_id,
            review.user_id,
        )
        logger.debug(f"Inserted review {row['id']} for thing {review.thing_id}")
        return row

    async def get_review(self, review_id: int) -> dict[str, Any] | None:
        """One review joined with its author, or None."""
        if not is_serial_id(review_id):
            return None
        return await self.db.fetchrow(f"{REVIEW_SELECT} WHERE rev.id = $1", review_id)

    async def insert_reviews(self, reviews: list[Review]) -> None:
        """Insert reviews with their ids (seeding)."""
        await self.db.execute_many(
            f"""
            INSERT INTO {self.table_name} (id, text, rating, date_created, thing_id, user_id)
            VALUES ($1, $2, $3, $4, $5, $6)
            """,
            [
                (review.id, review.text, review.rating, review.date_created, review.thing_id, review.user_id)
                for review in reviews
            ],
        )
        await self.db.execute(
            f"SELECT setval('{self.table_name}_id_seq', (SELECT MAX(id) FROM {self.table_name}))"
        )
        logger.debug(f"Inserted {len(reviews)} reviews")
