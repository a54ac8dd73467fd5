"""
Basic-token authentication.

Protected routes expect `Authorization: basic <token>`, where the token is
base64 of `user_name:password`. The scheme name is matched case-insensitively.

Failure modes:
- header missing or not a basic header -> MissingToken (401 "Missing basic token")
- empty user name or password, unknown user, wrong password, or a token that
  does not decode -> Unauthorized (401 "Unauthorized request")

Passwords are stored as bcrypt hashes. Comparison runs in the threadpool so a
slow hash does not stall the event loop.

Usage:
    gate = BasicAuthGate(UsersRepository(db))
    user = await gate.authenticate(request.headers.get("authorization"))
"""

import base64
import binascii

import bcrypt
from loguru import logger
from starlette.concurrency import run_in_threadpool

from ..exceptions import MissingToken, Unauthorized
from ..models.entities import User
from ..services.repositories import UsersRepository

BASIC_PREFIX = "basic "


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a password with bcrypt."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Compare a plaintext password against a bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        logger.warning("Stored password is not a valid bcrypt hash")
        return False


def parse_basic_token(token: str) -> tuple[str, str]:
    """
    Decode a basic token into (user_name, password).

    Undecodable tokens yield ("", ""), which the gate rejects as unauthorized.
    """
    try:
        decoded = base64.b64decode(token.strip(), validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return "", ""
    user_name, _, password = decoded.partition(":")
    return user_name, password


class BasicAuthGate:
    """Checks basic-token credentials against the users table."""

    def __init__(self, users: UsersRepository):
        self.users = users

    async def authenticate(self, authorization: str | None) -> User:
        """
        Resolve the user behind an Authorization header value.

        Raises:
            MissingToken: no basic header
            Unauthorized: bad or unknown credentials
        """
        auth_header = authorization or ""
        if not auth_header.lower().startswith(BASIC_PREFIX):
            raise MissingToken()

        user_name, password = parse_basic_token(auth_header[len(BASIC_PREFIX):])
        if not user_name or not password:
            logger.warning("Rejected basic token with empty credentials")
            raise Unauthorized()

        row = await self.users.get_by_user_name(user_name)
        if not row:
            logger.warning(f"Rejected basic token for unknown user '{user_name}'")
            raise Unauthorized()

        if not await run_in_threadpool(verify_password, password, row["password"]):
            logger.warning(f"Rejected basic token with wrong password for '{user_name}'")
            raise Unauthorized()

        return User.model_validate(row)
