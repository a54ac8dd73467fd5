"""
PostgresService - PostgreSQL connection management and query execution.

Wraps an asyncpg pool. The API lifespan calls connect()/disconnect(); the
repositories call fetch/fetchrow/execute with numbered ($1, $2) parameters.
"""

from typing import Any, Optional

import asyncpg
from loguru import logger


class PostgresService:
    """
    PostgreSQL database service for Thingful.

    Manages the connection pool and runs parameterized queries.
    """

    def __init__(
        self,
        connection_string: str,
        pool_min_size: int = 1,
        pool_max_size: int = 10,
    ):
        """
        Initialize PostgreSQL service.

        Args:
            connection_string: PostgreSQL connection string
            pool_min_size: Minimum pool size
            pool_max_size: Maximum pool size
        """
        self.connection_string = connection_string
        self.pool_min_size = pool_min_size
        self.pool_max_size = pool_max_size
        self.pool: Optional[asyncpg.Pool] = None

    async def connect(self) -> None:
        """Establish database connection pool."""
        logger.info(f"Connecting to PostgreSQL with pool size {self.pool_min_size}-{self.pool_max_size}")
        self.pool = await asyncpg.create_pool(
            self.connection_string,
            min_size=self.pool_min_size,
            max_size=self.pool_max_size,
        )
        logger.info("PostgreSQL connection pool established")

    async def disconnect(self) -> None:
        """Close database connection pool."""
        if self.pool:
            logger.info("Closing PostgreSQL connection pool")
            await self.pool.close()
            self.pool = None
            logger.info("PostgreSQL connection pool closed")

    def _require_pool(self) -> asyncpg.Pool:
        if not self.pool:
            raise RuntimeError("PostgreSQL pool not connected. Call connect() first.")
        return self.pool

    async def fetch(self, query: str, *params: Any) -> list[dict[str, Any]]:
        """
        Execute SQL query and return results.

        Args:
            query: SQL query string
            params: Query parameters

        Returns:
            List of result rows as dicts
        """
        async with self._require_pool().acquire() as conn:
            rows = await conn.fetch(query, *params)
        return [dict(row) for row in rows]

    async def fetchrow(self, query: str, *params: Any) -> dict[str, Any] | None:
        """Execute SQL query and return the first row (or None)."""
        async with self._require_pool().acquire() as conn:
            row = await conn.fetchrow(query, *params)
        return dict(row) if row else None

    async def execute(self, query: str, *params: Any) -> str:
        """
        Execute a statement that returns no rows.

        Without params the query may hold several statements (used for SQL scripts).

        Returns:
            asyncpg status string (e.g. "INSERT 0 1")
        """
        async with self._require_pool().acquire() as conn:
            return await conn.execute(query, *params)

    async def execute_many(self, query: str, params_list: list[tuple]) -> None:
        """
        Execute SQL query with multiple parameter sets in one transaction.

        Args:
            query: SQL query string
            params_list: List of parameter tuples
        """
        async with self._require_pool().acquire() as conn:
            async with conn.transaction():
                await conn.executemany(query, params_list)
