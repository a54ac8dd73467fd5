"""
Thingful API client.

ThingApiService wraps the HTTP calls; TokenService supplies credentials.
"""

from .thing_api import ThingApiError, ThingApiService
from .token_service import TokenProvider, TokenService

__all__ = ["ThingApiService", "ThingApiError", "TokenService", "TokenProvider"]
