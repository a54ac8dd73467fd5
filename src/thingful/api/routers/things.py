"""
Things endpoints.

Endpoints:
    GET /api/things                     - List all things (public)
    GET /api/things/{thing_id}          - One thing (basic auth)
    GET /api/things/{thing_id}/reviews  - Reviews for a thing (basic auth)

Dependency order matters: FastAPI resolves dependencies in declaration order
and the first one to raise wins.
- /{thing_id}: auth, then existence (anonymous requests get 401)
- /{thing_id}/reviews: existence, then auth (anonymous requests for an
  unknown thing get 404)
"""

from fastapi import APIRouter, Depends
from loguru import logger

from ..deps import get_existing_thing, get_things_repository, require_basic_auth
from ...models.entities import ReviewView, ThingView, User
from ...services.repositories import ThingsRepository

router = APIRouter(prefix="/api/things", tags=["things"])


@router.get("", response_model=list[ThingView])
async def list_things(
    things: ThingsRepository = Depends(get_things_repository),
) -> list[ThingView]:
    """List every thing with its owner and review aggregates."""
    rows = await things.list_things()
    return [ThingView.from_row(row) for row in rows]


@router.get("/{thing_id}", response_model=ThingView)
async def get_thing(
    user: User = Depends(require_basic_auth),
    thing: dict = Depends(get_existing_thing),
) -> ThingView:
    """Get one thing."""
    logger.debug(f"User {user.user_name} fetched thing {thing['id']}")
    return ThingView.from_row(thing)


@router.get("/{thing_id}/reviews", response_model=list[ReviewView])
async def get_thing_reviews(
    thing: dict = Depends(get_existing_thing),
    user: User = Depends(require_basic_auth),
    things: ThingsRepository = Depends(get_things_repository),
) -> list[ReviewView]:
    """Get the reviews for a thing, each with its author."""
    rows = await things.get_reviews_for_thing(thing["id"])
    return [ReviewView.from_row(row) for row in rows]
