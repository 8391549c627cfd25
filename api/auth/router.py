"""
Auth API endpoints. These stay reachable while the gate is enabled.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core.config import Settings, get_settings

from . import dependencies, schemas, service

router = APIRouter(prefix="/auth")


@router.post("/login")
async def login(
    request: schemas.LoginRequest,
    settings: Settings = Depends(get_settings),
) -> schemas.LoginResponse:
    return service.login(request, settings=settings)


@router.get("/verify")
async def verify(
    token: str | None = Depends(dependencies.get_optional_token),
    settings: Settings = Depends(get_settings),
) -> schemas.VerifyResponse:
    return service.verify(token, settings=settings)


@router.get("/status")
async def auth_status(settings: Settings = Depends(get_settings)) -> schemas.StatusResponse:
    return service.auth_status(settings)
