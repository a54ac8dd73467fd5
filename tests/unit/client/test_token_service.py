"""Tests for TokenService."""

import base64

from thingful.client import TokenService


def test_save_get_clear():
    tokens = TokenService("thingful-client-auth-token")
    assert not tokens.has_auth_token()
    assert tokens.get_auth_token() is None

    tokens.save_auth_token("abc")
    assert tokens.has_auth_token()
    assert tokens.get_auth_token() == "abc"

    tokens.clear_auth_token()
    assert not tokens.has_auth_token()
    tokens.clear_auth_token()


def test_uses_given_storage_and_key():
    storage = {}
    tokens = TokenService("my-key", storage)
    tokens.save_auth_token("abc")
    assert storage == {"my-key": "abc"}


def test_instances_do_not_share_state():
    first = TokenService("key")
    second = TokenService("key")
    first.save_auth_token("abc")
    assert not second.has_auth_token()


def test_make_basic_auth_token():
    token = TokenService.make_basic_auth_token("test-user-1", "password")
    assert base64.b64decode(token).decode() == "test-user-1:password"
