"""
FastAPI dependencies shared by the routers.

Repositories are built per request from the PostgresService stored on
app.state.db by the lifespan. Tests swap them out with
app.dependency_overrides.
"""

from fastapi import Depends, Request

from ..auth import BasicAuthGate
from ..exceptions import DatabaseUnavailable, NotFound
from ..models.entities import User
from ..services.postgres import PostgresService
from ..services.repositories import ReviewsRepository, ThingsRepository, UsersRepository


def get_db(request: Request) -> PostgresService:
    """The connected PostgresService, or 503 when the database is disabled."""
    db = getattr(request.app.state, "db", None)
    if db is None or db.pool is None:
        raise DatabaseUnavailable()
    return db


def get_users_repository(db: PostgresService = Depends(get_db)) -> UsersRepository:
    return UsersRepository(db)


def get_things_repository(db: PostgresService = Depends(get_db)) -> ThingsRepository:
    return ThingsRepository(db)


def get_reviews_repository(db: PostgresService = Depends(get_db)) -> ReviewsRepository:
    return ReviewsRepository(db)


async def require_basic_auth(
    request: Request,
    users: UsersRepository = Depends(get_users_repository),
) -> User:
    """
    Auth gate for protected routes.

    Attaches the authenticated user to request.state.user and returns it.
    """
    user = await BasicAuthGate(users).authenticate(request.headers.get("authorization"))
    request.state.user = user
    return user


async def get_existing_thing(
    thing_id: int,
    things: ThingsRepository = Depends(get_things_repository),
) -> dict:
    """Load the thing named in the path or fail with 404."""
    thing = await things.get_thing(thing_id)
    if not thing:
        raise NotFound("Thing doesn't exist")
    return thing
