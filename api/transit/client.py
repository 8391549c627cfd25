"""
Vasttrafik HTTP client helpers.

Used endpoints:
- POST {auth_url}                                   -> {"access_token": "...", "expires_in": 86400}
- GET  {api_base}/locations/by-text?q=...&limit=10  -> stop search results
- GET  {api_base}/stop-areas/{gid}/departures       -> departures for one stop area

The OAuth token is held in a `TokenCache` owned by the app. Refreshing is
single-flight: callers that find the cache stale queue on its lock and the
first one through fetches; the rest see the fresh token on re-check.
"""

from __future__ import annotations

import asyncio
import base64
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable

import httpx

from core.config import TransitSettings

# Refresh this long before the upstream expiry.
EXPIRY_MARGIN_S = 300

logger = logging.getLogger(__name__)


# Upstream failures are explicit and separable from other runtime errors.
class TransitError(RuntimeError):
    pass


@dataclass
class TokenCache:
    token: str | None = None
    expires_at: float = 0.0
    clock: Callable[[], float] = time.monotonic
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)

    def valid_token(self) -> str | None:
        if self.token and self.clock() < self.expires_at:
            return self.token
        return None

    def store(self, token: str, expires_in: float) -> None:
        self.token = token
        self.expires_at = self.clock() + max(0.0, expires_in - EXPIRY_MARGIN_S)


def _basic_auth(client_id: str, client_secret: str) -> str:
    raw = f"{client_id}:{client_secret}".encode("utf-8")
    return "Basic " + base64.b64encode(raw).decode("ascii")


async def _fetch_token(client: httpx.AsyncClient, settings: TransitSettings) -> tuple[str, float]:
    if not settings.client_id or not settings.client_secret:
        raise TransitError("VASTTRAFIK_CLIENT_ID and VASTTRAFIK_CLIENT_SECRET must be set.")

    resp = await client.post(
        settings.auth_url,
        headers={
            "Authorization": _basic_auth(settings.client_id, settings.client_secret),
            "Content-Type": "application/x-www-form-urlencoded",
        },
        content="grant_type=client_credentials",
    )
    if resp.status_code != 200:
        body = resp.text[:500]
        raise TransitError(f"Vasttrafik token request failed: {resp.status_code} {body}")

    data: dict[str, Any] = resp.json()
    token = data.get("access_token")
    if not isinstance(token, str) or not token:
        raise TransitError("Vasttrafik returned no access token.")

    try:
        expires_in = float(data.get("expires_in", 0))
    except (TypeError, ValueError) as e:
        raise TransitError("Vasttrafik returned a non-numeric expires_in.") from e
    return token, expires_in


async def get_access_token(
    cache: TokenCache,
    *,
    client: httpx.AsyncClient,
    settings: TransitSettings,
) -> str:
    token = cache.valid_token()
    if token is not None:
        return token

    async with cache.lock:
        # Another caller may have refreshed while we waited.
        token = cache.valid_token()
        if token is not None:
            return token

        token, expires_in = await _fetch_token(client, settings)
        cache.store(token, expires_in)
        logger.info("transit_token_refreshed expires_in=%s", expires_in)
        return token


async def _get_json(
    path: str,
    *,
    params: dict[str, Any],
    cache: TokenCache,
    client: httpx.AsyncClient,
    settings: TransitSettings,
) -> Any:
    token = await get_access_token(cache, client=client, settings=settings)
    url = settings.api_base.rstrip("/") + path
    resp = await client.get(url, params=params, headers={"Authorization": f"Bearer {token}"})
    if resp.status_code != 200:
        body = resp.text[:500]
        raise TransitError(f"Vasttrafik request failed: {resp.status_code} {body}")
    return resp.json()


async def search_stops(
    query: str,
    *,
    cache: TokenCache,
    client: httpx.AsyncClient,
    settings: TransitSettings,
    limit: int = 10,
) -> Any:
    return await _get_json(
        "/locations/by-text",
        params={"q": query, "limit": limit},
        cache=cache,
        client=client,
        settings=settings,
    )


async def departures(
    gid: str,
    *,
    cache: TokenCache,
    client: httpx.AsyncClient,
    settings: TransitSettings,
    limit: int = 20,
    time_span: int = 60,
) -> Any:
    return await _get_json(
        f"/stop-areas/{gid}/departures",
        params={"limit": limit, "timeSpan": time_span},
        cache=cache,
        client=client,
        settings=settings,
    )
