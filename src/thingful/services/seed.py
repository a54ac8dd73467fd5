"""
Sample data for local development.

Used by `thingful db seed` and `thingful db clean`. Seeded users all have the
password "password" unless told otherwise, hashed with the configured bcrypt
cost.
"""

from datetime import datetime, timezone

from loguru import logger

from ..auth import hash_password
from ..models.entities import Review, Thing, User
from .postgres import PostgresService
from .repositories import ReviewsRepository, ThingsRepository, UsersRepository

TABLES = ("thingful_reviews", "thingful_things", "thingful_users")

_CREATED = datetime(2029, 1, 22, 16, 28, 32, 615000, tzinfo=timezone.utc)


def sample_users(password: str = "password") -> list[User]:
    """Seed users with plaintext passwords (hashed by seed_database)."""
    people = [
        ("dunder", "Dunder Mifflin", None),
        ("b.deboop", "Bodeep Deboop", "Bo"),
        ("c.bloggs", "Charlie Bloggs", "Charlie"),
        ("s.smith", "Sam Smith", "Sam"),
        ("lexlor", "Alex Taylor", "Lex"),
        ("wippy", "Ping Won In", "Ping"),
    ]
    return [
        User(
            id=index,
            user_name=user_name,
            full_name=full_name,
            nickname=nickname,
            password=password,
            date_created=_CREATED,
        )
        for index, (user_name, full_name, nickname) in enumerate(people, start=1)
    ]


def sample_things() -> list[Thing]:
    titles = [
        ("Shamburger 1", 2),
        ("Goopyglove 2", 3),
        ("Thingamajig 3", 4),
        ("Quadrangle 4", 1),
        ("Whoopsie daisy 5", 5),
        ("Pocket lint 6", 6),
    ]
    return [
        Thing(
            id=index,
            title=title,
            image=f"http://placehold.it/500x500?text={index}",
            user_id=user_id,
            date_created=_CREATED,
            content=(
                "Lorem ipsum dolor sit amet consectetur adipisicing elit. "
                "Natus consequuntur deserunt commodi, nobis qui inventore "
                "corrupti iusto aliquid debitis unde non."
            ),
        )
        for index, (title, user_id) in enumerate(titles, start=1)
    ]


def sample_reviews() -> list[Review]:
    entries = [
        (1, 2, 2, "This thing is amazing."),
        (1, 3, 4, "Put a bird on it!"),
        (1, 4, 3, "All the other reviewers are obviously insane, but this thing is amazing."),
        (2, 5, 3, "When life gives you lemons, trade them for this thing."),
        (3, 1, 5, "This cured my psoriasis, but left me unable to tell the difference between the taste of squash and the concept of increasing."),
        (3, 6, 1, "I think I swallowed a bug."),
        (4, 2, 4, "I have not used it or even seen it, and I do not actually know what it is."),
        (5, 3, 5, "Whoopsie daisy indeed."),
    ]
    return [
        Review(
            id=index,
            thing_id=thing_id,
            user_id=user_id,
            rating=rating,
            text=text,
            date_created=_CREATED,
        )
        for index, (thing_id, user_id, rating, text) in enumerate(entries, start=1)
    ]


async def clean_tables(db: PostgresService) -> None:
    """Empty every table and reset the id sequences."""
    await db.execute(f"TRUNCATE {', '.join(TABLES)} RESTART IDENTITY CASCADE")
    logger.info("Thingful tables truncated")


async def seed_database(
    db: PostgresService,
    users: list[User],
    things: list[Thing],
    reviews: list[Review],
    bcrypt_rounds: int = 12,
) -> None:
    """
    Insert users (hashing their plaintext passwords), things and reviews.

    Ids are inserted as given and the sequences moved past them.
    """
    hashed = [
        user.model_copy(update={"password": hash_password(user.password, bcrypt_rounds)})
        for user in users
    ]
    await UsersRepository(db).insert_users(hashed)
    if things:
        await ThingsRepository(db).insert_things(things)
    if reviews:
        await ReviewsRepository(db).insert_reviews(reviews)
    logger.info(
        f"Seeded {len(users)} users, {len(things)} things, {len(reviews)} reviews"
    )
