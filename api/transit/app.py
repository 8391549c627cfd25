"""
Departure board app. Run with: uvicorn transit.app:app --app-dir api --port 3001
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import httpx
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import TransitSettings, load_transit_settings
from core.errors import install_exception_handlers
from core.log import configure_logging

from . import router as transit_router
from .client import TokenCache

logger = logging.getLogger(__name__)


def create_app(
    settings: TransitSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    if settings is None:
        load_dotenv()
        settings = load_transit_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.http_client = httpx.AsyncClient(timeout=15.0, transport=transport)
        logger.info("startup frontend_url=%s api_base=%s", settings.frontend_url, settings.api_base)
        try:
            yield
        finally:
            await app.state.http_client.aclose()

    app = FastAPI(title="Departure board", lifespan=lifespan)
    app.state.transit_settings = settings
    app.state.token_cache = TokenCache()

    install_exception_handlers(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.include_router(transit_router.router, tags=["transit"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}

    return app


app = create_app()
