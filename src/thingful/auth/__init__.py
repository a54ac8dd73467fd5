"""
Authentication for the Thingful API.

Basic-token auth against bcrypt hashes in thingful_users.
"""

from .basic import BasicAuthGate, hash_password, parse_basic_token, verify_password

__all__ = ["BasicAuthGate", "hash_password", "parse_basic_token", "verify_password"]
