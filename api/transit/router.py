"""
Departure board API endpoints.
"""

from __future__ import annotations

import logging

import httpx
from fastapi import APIRouter, HTTPException, Query, Request, status

from . import client

router = APIRouter(prefix="/api")

logger = logging.getLogger(__name__)


def _deps(request: Request) -> dict:
    state = request.app.state
    return {
        "cache": state.token_cache,
        "client": state.http_client,
        "settings": state.transit_settings,
    }


@router.get("/stops/search")
async def search_stops(request: Request, query: str = Query(default="", max_length=200)):
    query = query.strip()
    if not query:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Query parameter required")

    try:
        return await client.search_stops(query, **_deps(request))
    except (client.TransitError, httpx.HTTPError) as exc:
        logger.error("stop_search_failed query=%s error=%s", query, exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to search stops",
        ) from exc


@router.get("/departures/{gid}")
async def departures(
    gid: str,
    request: Request,
    limit: int = Query(default=20, ge=1, le=100),
    timeSpan: int = Query(default=60, ge=1, le=1440),
):
    try:
        return await client.departures(gid, limit=limit, time_span=timeSpan, **_deps(request))
    except (client.TransitError, httpx.HTTPError) as exc:
        logger.error("departures_failed gid=%s error=%s", gid, exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch departures",
        ) from exc
