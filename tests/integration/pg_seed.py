"""
Seeding helpers for the PostgreSQL integration suite.

Each call opens its own short-lived pool on a fresh event loop, so it never
shares a loop with the app under TestClient.
"""

import asyncio
import os

from thingful.models.entities import Review, Thing, User
from thingful.services.postgres import PostgresService
from thingful.services.seed import seed_database

TEST_DB_URL = os.getenv("TEST_DB_URL")


async def _with_db(action):
    db = PostgresService(TEST_DB_URL, pool_max_size=2)
    await db.connect()
    try:
        await action(db)
    finally:
        await db.disconnect()


def run_with_db(action) -> None:
    asyncio.run(_with_db(action))


def seed_tables(users: list[dict], things: list[dict], reviews: list[dict]) -> None:
    async def seed(db: PostgresService) -> None:
        await seed_database(
            db,
            [User.model_validate(user) for user in users],
            [Thing.model_validate(thing) for thing in things],
            [Review.model_validate(review) for review in reviews],
            bcrypt_rounds=4,
        )

    run_with_db(seed)
