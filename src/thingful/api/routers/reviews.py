"""
Reviews endpoints.

Endpoints:
    POST /api/reviews              - Create a review as the authenticated user
    GET  /api/reviews/{review_id}  - Read one review back

Both require basic auth. Body validation (missing fields, rating outside
1-5) is reported as 400 by the handlers in thingful.api.errors.
"""

from fastapi import APIRouter, Depends, Response
from loguru import logger

from ..deps import get_reviews_repository, get_things_repository, require_basic_auth
from ...exceptions import NotFound, ValidationError
from ...models.entities import Review, ReviewCreateRequest, ReviewView, User
from ...services.repositories import ReviewsRepository, ThingsRepository

router = APIRouter(prefix="/api/reviews", tags=["reviews"])


@router.post("", response_model=ReviewView, status_code=201)
async def post_review(
    request_body: ReviewCreateRequest,
    response: Response,
    user: User = Depends(require_basic_auth),
    things: ThingsRepository = Depends(get_things_repository),
    reviews: ReviewsRepository = Depends(get_reviews_repository),
) -> ReviewView:
    """
    Create a review for a thing.

    The author is always the authenticated user; the body cannot choose it.

    Returns:
        Created review with a Location header pointing at it
    """
    if not await things.get_thing(request_body.thing_id):
        raise ValidationError("Thing doesn't exist")

    review = Review(
        text=request_body.text,
        rating=request_body.rating,
        thing_id=request_body.thing_id,
        user_id=user.id,
    )
    row = await reviews.insert_review(review)

    logger.info(
        f"Review {row['id']} created: thing={request_body.thing_id}, "
        f"user={user.user_name}, rating={request_body.rating}"
    )

    response.headers["Location"] = f"/api/reviews/{row['id']}"
    return ReviewView.from_row(row)


@router.get("/{review_id}", response_model=ReviewView)
async def get_review(
    review_id: int,
    user: User = Depends(require_basic_auth),
    reviews: ReviewsRepository = Depends(get_reviews_repository),
) -> ReviewView:
    """Get one review."""
    row = await reviews.get_review(review_id)
    if not row:
        raise NotFound("Review doesn't exist")
    return ReviewView.from_row(row)
