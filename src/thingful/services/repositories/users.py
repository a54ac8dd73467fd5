"""Repository for thingful_users (the credential store)."""

from typing import Any

from loguru import logger

from ...models.entities import User
from ..postgres.service import PostgresService


class UsersRepository:
    """Read access to user records, plus bulk insert for seeding."""

    table_name = "thingful_users"

    def __init__(self, db: PostgresService):
        self.db = db

    async def get_by_user_name(self, user_name: str) -> dict[str, Any] | None:
        """
        Look up a user row (including the password hash) by user name.

        Returns:
            Row dict or None if no such user
        """
        return await self.db.fetchrow(
            f"""
            SELECT id, user_name, full_name, nickname, password, date_created, date_modified
            FROM {self.table_name}
            WHERE user_name = $1
            """,
            user_name,
        )

    async def insert_users(self, users: list[User]) -> None:
        """Insert users with their ids (passwords must already be hashed)."""
        await self.db.execute_many(
            f"""
            INSERT INTO {self.table_name}
                (id, user_name, full_name, nickname, password, date_created, date_modified)
            VALUES ($1, $2, $3, $4, $5, $6, $7)
            """,
            [
                (
                    user.id,
                    user.user_name,
                    user.full_name,
                    user.nickname,
                    user.password,
                    user.date_created,
                    user.date_modified,
                )
                for user in users
            ],
        )
        await self.db.execute(
            f"SELECT setval('{self.table_name}_id_seq', (SELECT MAX(id) FROM {self.table_name}))"
        )
        logger.debug(f"Inserted {len(users)} users")
