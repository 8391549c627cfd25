"""
Auth dependencies for protected FastAPI routes.

`require_auth` is attached to every protected router. When the gate is
disabled it lets everything through. Failures carry `authRequired: true` so
the client knows to send the user to the login screen.
"""

from __future__ import annotations

from fastapi import Depends, Header, HTTPException, status

from core.config import Settings, get_settings

from . import security


def _auth_error(status_code: int, message: str) -> HTTPException:
    return HTTPException(
        status_code=status_code,
        detail={"error": message, "authRequired": True},
    )


def extract_bearer_token(authorization: str | None) -> str | None:
    raw = (authorization or "").strip()
    if not raw:
        return None

    parts = raw.split(" ", 1)
    if len(parts) != 2:
        return None

    scheme, token = parts[0].strip().lower(), parts[1].strip()
    if scheme != "bearer" or not token:
        return None
    return token


async def get_optional_token(authorization: str | None = Header(default=None)) -> str | None:
    return extract_bearer_token(authorization)


async def require_auth(
    token: str | None = Depends(get_optional_token),
    settings: Settings = Depends(get_settings),
) -> None:
    if not settings.auth_enabled:
        return None

    if not token:
        raise _auth_error(status.HTTP_401_UNAUTHORIZED, "Access token required.")

    try:
        security.decode_access_token(
            token,
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )
    except security.AuthSecurityError as exc:
        raise _auth_error(status.HTTP_403_FORBIDDEN, "Invalid or expired token.") from exc
    return None
