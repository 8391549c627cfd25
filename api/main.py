from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import APIRouter, Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from auth import dependencies as auth_dependencies
from auth import router as auth_router
from core import db
from core.config import Settings, load_settings
from core.errors import install_exception_handlers
from core.log import configure_logging
from features import router as features_router
from images import router as images_router
from jobs import router as jobs_router
from motorcycles import router as motorcycles_router
from notes import router as notes_router
from shopping import router as shopping_router

logger = logging.getLogger(__name__)


def _api_router() -> APIRouter:
    api = APIRouter(prefix="/api")
    api.include_router(auth_router.router, tags=["auth"])

    # Everything below requires a token while the auth gate is enabled.
    protected = APIRouter(dependencies=[Depends(auth_dependencies.require_auth)])
    protected.include_router(motorcycles_router.router, tags=["motorcycles"])
    protected.include_router(jobs_router.router, tags=["jobs"])
    protected.include_router(images_router.router, tags=["images"])
    protected.include_router(notes_router.router, tags=["notes"])
    protected.include_router(shopping_router.router, tags=["shopping"])
    protected.include_router(features_router.router, tags=["features"])
    api.include_router(protected)
    return api


def create_app(settings: Settings | None = None) -> FastAPI:
    if settings is None:
        load_dotenv()
        settings = load_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        Path(settings.upload_dir).mkdir(parents=True, exist_ok=True)
        # Open the DB connection once per process.
        await db.init_db(settings.database_path)
        logger.info(
            "startup auth_enabled=%s database=%s uploads=%s",
            settings.auth_enabled,
            settings.database_path,
            settings.upload_dir,
        )
        try:
            yield
        finally:
            await db.close_db()

    app = FastAPI(title="Mekkompis API", lifespan=lifespan)
    app.state.settings = settings

    install_exception_handlers(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.allowed_origins),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )

    app.include_router(_api_router())
    # The directory is created in lifespan, before the first request.
    app.mount("/uploads", StaticFiles(directory=settings.upload_dir, check_dir=False), name="uploads")

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok", "message": "Mekkompis API is running."}

    return app


app = create_app()
