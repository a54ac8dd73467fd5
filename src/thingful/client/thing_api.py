"""
Async client for the Thingful API.

Four calls, one HTTP request each, no retries and no caching:
- get_things()
- get_thing(thing_id)
- get_thing_reviews(thing_id)
- post_review(thing_id, text, rating)

Every request carries `authorization: basic <token>` with the token read from
the injected provider at call time. Non-2xx responses raise ThingApiError with
the server's JSON error payload.

Example:
    tokens = TokenService(settings.client.token_key)
    tokens.save_auth_token(TokenService.make_basic_auth_token("dunder", "password"))

    async with ThingApiService(settings.client.api_endpoint, tokens) as api:
        things = await api.get_things()
        await api.post_review(things[0]["id"], "Great thing", 5)
"""

from typing import Any

import httpx
from loguru import logger

from .token_service import TokenProvider


class ThingApiError(Exception):
    """Non-success response from the API."""

    def __init__(self, status_code: int, payload: dict[str, Any]):
        self.status_code = status_code
        self.payload = payload
        super().__init__(f"{status_code}: {payload.get('error', payload)}")

    @property
    def error(self) -> Any:
        return self.payload.get("error")


def _error_payload(response: httpx.Response) -> dict[str, Any]:
    try:
        payload = response.json()
    except ValueError:
        return {"error": response.text}
    return payload if isinstance(payload, dict) else {"error": payload}


class ThingApiService:
    """Request-shaping wrapper over an httpx.AsyncClient."""

    def __init__(
        self,
        api_endpoint: str,
        token_provider: TokenProvider,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ):
        """
        Args:
            api_endpoint: Base URL including the /api prefix
            token_provider: Source of the basic token (e.g. a TokenService)
            http_client: Optional client to use (closed by the caller)
            timeout: Request timeout when the service creates its own client
        """
        self.api_endpoint = api_endpoint.rstrip("/")
        self.token_provider = token_provider
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=timeout)

    async def __aenter__(self) -> "ThingApiService":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def _headers(self) -> dict[str, str]:
        token = self.token_provider.get_auth_token() or ""
        return {"authorization": f"basic {token}"}

    async def _request(self, method: str, path: str, json: dict[str, Any] | None = None) -> Any:
        url = f"{self.api_endpoint}{path}"
        logger.debug(f"{method} {url}")
        response = await self._client.request(method, url, headers=self._headers(), json=json)
        if not response.is_success:
            raise ThingApiError(response.status_code, _error_payload(response))
        return response.json()

    async def get_things(self) -> list[dict[str, Any]]:
        return await self._request("GET", "/things")

    async def get_thing(self, thing_id: int) -> dict[str, Any]:
        return await self._request("GET", f"/things/{thing_id}")

    async def get_thing_reviews(self, thing_id: int) -> list[dict[str, Any]]:
        return await self._request("GET", f"/things/{thing_id}/reviews")

    async def post_review(self, thing_id: int, text: str, rating: int) -> dict[str, Any]:
        """Create a review; the server attributes it to the token's user."""
        return await self._request(
            "POST",
            "/reviews",
            json={"thing_id": thing_id, "rating": rating, "text": text},
        )
