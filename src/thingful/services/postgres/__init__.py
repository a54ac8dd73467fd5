"""
PostgreSQL service for Thingful database operations.
"""

from .service import PostgresService


def get_postgres_service() -> PostgresService | None:
    """
    Get PostgresService instance with connection settings from settings.

    Returns None if Postgres is disabled.
    """
    from ...settings import settings

    if not settings.postgres.enabled:
        return None

    return PostgresService(
        settings.postgres.connection_string,
        pool_min_size=settings.postgres.pool_min_size,
        pool_max_size=settings.postgres.pool_max_size,
    )


__all__ = ["PostgresService", "get_postgres_service"]
