"""
Client-side credential storage.

A TokenService keeps the basic auth token under a fixed key in whatever
mapping it is given (an in-memory dict by default). It is passed into
ThingApiService as the token provider, so each client carries its own
credentials rather than sharing process-wide state.
"""

import base64
from collections.abc import MutableMapping
from typing import Protocol


class TokenProvider(Protocol):
    """Anything that can hand out the current auth token."""

    def get_auth_token(self) -> str | None: ...


class TokenService:
    """Stores and reads the basic auth token."""

    def __init__(self, token_key: str, storage: MutableMapping[str, str] | None = None):
        self.token_key = token_key
        self.storage = storage if storage is not None else {}

    def save_auth_token(self, token: str) -> None:
        self.storage[self.token_key] = token

    def get_auth_token(self) -> str | None:
        return self.storage.get(self.token_key)

    def clear_auth_token(self) -> None:
        self.storage.pop(self.token_key, None)

    def has_auth_token(self) -> bool:
        return bool(self.get_auth_token())

    @staticmethod
    def make_basic_auth_token(user_name: str, password: str) -> str:
        """base64 of `user_name:password`."""
        return base64.b64encode(f"{user_name}:{password}".encode("utf-8")).decode("ascii")
