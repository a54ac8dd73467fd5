"""
Repositories for Thingful entities.

Each repository wraps a PostgresService and returns plain row dicts shaped
for the public views in thingful.models.entities.
"""

from .reviews import ReviewsRepository
from .things import ThingsRepository
from .users import UsersRepository

__all__ = ["ThingsRepository", "ReviewsRepository", "UsersRepository"]
