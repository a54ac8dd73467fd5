"""
Fixture data and expected-response builders shared by unit and integration tests.

Users carry plaintext passwords here; the fakes and the seeding helpers hash
them before storing.
"""

from datetime import datetime, timezone

from thingful.client import TokenService

CREATED = datetime(2029, 1, 22, 16, 28, 32, 615000, tzinfo=timezone.utc)
CREATED_ISO = "2029-01-22T16:28:32.615Z"


def make_users_array() -> list[dict]:
    return [
        {
            "id": index,
            "user_name": f"test-user-{index}",
            "full_name": f"Test user {index}",
            "nickname": f"TU{index}",
            "password": "password",
            "date_created": CREATED,
            "date_modified": None,
        }
        for index in range(1, 5)
    ]


def make_things_array(users: list[dict]) -> list[dict]:
    return [
        {
            "id": index,
            "title": f"{ordinal} test thing!",
            "image": "http://placehold.it/500x500",
            "user_id": users[index - 1]["id"],
            "date_created": CREATED,
            "content": "Lorem ipsum dolor sit amet, consectetur adipisicing elit. Natus, voluptate? Necessitatibus, reiciendis? Cupiditate totam laborum esse animi ratione ipsa dignissimos laboriosam eos similique cumque. Est nostrum esse porro id quaerat.",
        }
        for index, ordinal in enumerate(["First", "Second", "Third", "Fourth"], start=1)
    ]


def make_reviews_array(users: list[dict], things: list[dict]) -> list[dict]:
    entries = [
        (2, "First test review!", things[0], users[0]),
        (3, "Second test review!", things[0], users[1]),
        (1, "Third test review!", things[0], users[2]),
        (5, "Fourth test review!", things[0], users[3]),
        (1, "Fifth test review!", things[-1], users[0]),
        (2, "Sixth test review!", things[-1], users[2]),
        (5, "Seventh test review!", things[3], users[0]),
    ]
    return [
        {
            "id": index,
            "rating": rating,
            "text": text,
            "thing_id": thing["id"],
            "user_id": user["id"],
            "date_created": CREATED,
        }
        for index, (rating, text, thing, user) in enumerate(entries, start=1)
    ]


def make_things_fixtures() -> tuple[list[dict], list[dict], list[dict]]:
    users = make_users_array()
    things = make_things_array(users)
    reviews = make_reviews_array(users, things)
    return users, things, reviews


def make_expected_user(user: dict) -> dict:
    return {
        "id": user["id"],
        "user_name": user["user_name"],
        "full_name": user["full_name"],
        "nickname": user["nickname"],
        "date_created": CREATED_ISO,
        "date_modified": None,
    }


def calculate_average_review_rating(reviews: list[dict]) -> float:
    if not reviews:
        return 0
    return sum(review["rating"] for review in reviews) / len(reviews)


def make_expected_thing(users: list[dict], thing: dict, reviews: list[dict]) -> dict:
    user = next(user for user in users if user["id"] == thing["user_id"])
    thing_reviews = [review for review in reviews if review["thing_id"] == thing["id"]]
    return {
        "id": thing["id"],
        "image": thing["image"],
        "title": thing["title"],
        "content": thing["content"],
        "date_created": CREATED_ISO,
        "number_of_reviews": len(thing_reviews),
        "average_review_rating": calculate_average_review_rating(thing_reviews),
        "user": make_expected_user(user),
    }


def make_expected_thing_reviews(users: list[dict], thing_id: int, reviews: list[dict]) -> list[dict]:
    expected = []
    for review in reviews:
        if review["thing_id"] != thing_id:
            continue
        user = next(user for user in users if user["id"] == review["user_id"])
        expected.append(
            {
                "id": review["id"],
                "rating": review["rating"],
                "text": review["text"],
                "thing_id": review["thing_id"],
                "date_created": CREATED_ISO,
                "user": make_expected_user(user),
            }
        )
    return expected


def make_malicious_thing(user: dict) -> tuple[dict, dict]:
    malicious_thing = {
        "id": 911,
        "image": "http://placehold.it/500x500",
        "date_created": CREATED,
        "title": 'Naughty naughty very naughty <script>alert("xss");</script>',
        "user_id": user["id"],
        "content": 'Bad image <img src="https://url.to.file.which/does-not.exist" onerror="alert(document.cookie);">. But not <strong>all</strong> bad.',
    }
    expected_thing = {
        **make_expected_thing([user], malicious_thing, []),
        "title": 'Naughty naughty very naughty &lt;script&gt;alert("xss");&lt;/script&gt;',
        "content": 'Bad image <img src="https://url.to.file.which/does-not.exist">. But not <strong>all</strong> bad.',
    }
    return malicious_thing, expected_thing


def make_auth_header(user: dict) -> str:
    return f"basic {TokenService.make_basic_auth_token(user['user_name'], user['password'])}"
