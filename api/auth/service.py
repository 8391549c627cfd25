"""
Auth business logic.

There is a single shared password; no user table. The gate is on only when
both `JWT_SECRET` and `AUTH_PASSWORD_HASH` are configured (see
`core.config.Settings.auth_enabled`).
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from core.config import Settings

from . import schemas, security

logger = logging.getLogger(__name__)


def login(payload: schemas.LoginRequest, *, settings: Settings) -> schemas.LoginResponse:
    if not settings.auth_enabled:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Authentication is not configured on the server.",
        )

    if not security.verify_password(payload.password, settings.auth_password_hash):
        logger.info("login_failed")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect password.",
        )

    token = security.build_access_token(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expire_days=settings.token_expire_days,
    )
    logger.info("login_succeeded")
    return schemas.LoginResponse(token=token, expiresIn=f"{settings.token_expire_days}d")


def is_token_valid(token: str | None, *, settings: Settings) -> bool:
    if not token:
        return False
    try:
        security.decode_access_token(
            token,
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )
    except security.AuthSecurityError:
        return False
    return True


def verify(token: str | None, *, settings: Settings) -> schemas.VerifyResponse:
    if not settings.auth_enabled:
        return schemas.VerifyResponse(valid=True, authEnabled=False)
    return schemas.VerifyResponse(valid=is_token_valid(token, settings=settings), authEnabled=True)


def auth_status(settings: Settings) -> schemas.StatusResponse:
    if settings.auth_enabled:
        return schemas.StatusResponse(authEnabled=True, message="Authentication is enabled.")
    return schemas.StatusResponse(
        authEnabled=False,
        message="Authentication is disabled (local development).",
    )
