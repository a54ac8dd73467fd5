"""
Repository for thingful_things.

Every read joins the owner and aggregates the thing's reviews, so the rows
map directly onto ThingView.
"""

from typing import Any

from loguru import logger

from ...models.entities import Thing
from ..postgres.service import PostgresService

# User columns are aliased user_<column> (see UserView.from_row)
THING_SELECT = """
    SELECT
        thg.id,
        thg.title,
        thg.content,
        thg.image,
        thg.date_created,
        COUNT(rev.id) AS number_of_reviews,
        COALESCE(AVG(rev.rating::float8), 0) AS average_review_rating,
        usr.id AS user_id,
        usr.user_name AS user_user_name,
        usr.full_name AS user_full_name,
        usr.nickname AS user_nickname,
        usr.date_created AS user_date_created,
        usr.date_modified AS user_date_modified
    FROM thingful_things AS thg
    LEFT JOIN thingful_reviews AS rev ON rev.thing_id = thg.id
    LEFT JOIN thingful_users AS usr ON usr.id = thg.user_id
"""

THING_GROUP_BY = "GROUP BY thg.id, usr.id"

# SERIAL ids are int4. Values outside 1..SERIAL_MAX match no row, and asyncpg
# cannot encode the large ones
SERIAL_MAX = 2**31 - 1


def is_serial_id(value: int) -> bool:
    return 1 <= value <= SERIAL_MAX


REVIEW_SELECT = """
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
    FROM thingful_reviews AS rev
    JOIN thingful_users AS usr ON usr.id = rev.user_id
"""


class ThingsRepository:
    """Queries behind the things endpoints."""

    table_name = "thingful_things"

    def __init__(self, db: PostgresService):
        self.db = db

    async def list_things(self) -> list[dict[str, Any]]:
        """All things with owner and review aggregates, ordered by id."""
        return await self.db.fetch(f"{THING_SELECT} {THING_GROUP_BY} ORDER BY thg.id")

    async def get_thing(self, thing_id: int) -> dict[str, Any] | None:
        """One thing with owner and review aggregates, or None."""
        if not is_serial_id(thing_id):
            return None
        return await self.db.fetchrow(
            f"{THING_SELECT} WHERE thg.id = $1 {THING_GROUP_BY}",
            thing_id,
        )

    async def get_reviews_for_thing(self, thing_id: int) -> list[dict[str, Any]]:
        """Reviews for a thing joined with their authors, ordered by id."""
        if not is_serial_id(thing_id):
            return []
        return await self.db.fetch(
            f"{REVIEW_SELECT} WHERE rev.thing_id = $1 ORDER BY rev.id",
            thing_id,
        )

    async def insert_things(self, things: list[Thing]) -> None:
        """Insert things with their ids (seeding)."""
        await self.db.execute_many(
            f"""
            INSERT INTO {self.table_name} (id, title, content, image, date_created, user_id)
            VALUES ($1, $2, $3, $4, $5, $6)
            """,
            [
                (thing.id, thing.title, thing.content, thing.image, thing.date_created, thing.user_id)
                for thing in things
            ],
        )
        await self.db.execute(
            f"SELECT setval('{self.table_name}_id_seq', (SELECT MAX(id) FROM {self.table_name}))"
        )
        logger.debug(f"Inserted {len(things)} things")
