"""
Process configuration.

Everything is read from the environment once at startup and frozen into a
`Settings` value. The app keeps it on `app.state.settings`; request code gets
it through `get_settings` instead of reading `os.environ` again.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from fastapi import Request

DEFAULT_DATABASE_PATH = "database/mekkompis.db"
DEFAULT_UPLOAD_DIR = "uploads"
DEFAULT_MAX_UPLOAD_BYTES = 10 * 1024 * 1024  # 10 MiB
DEFAULT_ALLOWED_ORIGINS = ("http://localhost:5173",)

DEFAULT_VASTTRAFIK_AUTH_URL = "https://ext-api.vasttrafik.se/token"
DEFAULT_VASTTRAFIK_API_BASE = "https://ext-api.vasttrafik.se/pr/v4"


def _env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, "").strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_list(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    return tuple(item.strip() for item in raw.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    database_path: str = DEFAULT_DATABASE_PATH
    upload_dir: str = DEFAULT_UPLOAD_DIR
    jwt_secret: str = ""
    auth_password_hash: str = ""
    jwt_algorithm: str = "HS256"
    token_expire_days: int = 7
    allowed_origins: tuple[str, ...] = field(default=DEFAULT_ALLOWED_ORIGINS)
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES
    log_level: str = "INFO"

    @property
    def auth_enabled(self) -> bool:
        # Both secrets must be present; one alone leaves the gate open.
        return bool(self.jwt_secret and self.auth_password_hash)


@dataclass(frozen=True)
class TransitSettings:
    client_id: str = ""
    client_secret: str = ""
    auth_url: str = DEFAULT_VASTTRAFIK_AUTH_URL
    api_base: str = DEFAULT_VASTTRAFIK_API_BASE
    frontend_url: str = "http://localhost:5173"
    log_level: str = "INFO"


def load_settings() -> Settings:
    max_upload_bytes = _env_int("MAX_UPLOAD_BYTES", DEFAULT_MAX_UPLOAD_BYTES)
    if max_upload_bytes <= 0:
        max_upload_bytes = DEFAULT_MAX_UPLOAD_BYTES

    return Settings(
        database_path=_env_str("DATABASE_PATH", DEFAULT_DATABASE_PATH),
        upload_dir=_env_str("UPLOAD_DIR", DEFAULT_UPLOAD_DIR),
        jwt_secret=_env_str("JWT_SECRET"),
        auth_password_hash=_env_str("AUTH_PASSWORD_HASH"),
        jwt_algorithm=_env_str("JWT_ALG", "HS256"),
        token_expire_days=_env_int("TOKEN_EXPIRE_DAYS", 7),
        allowed_origins=_env_list("ALLOWED_ORIGINS", DEFAULT_ALLOWED_ORIGINS),
        max_upload_bytes=max_upload_bytes,
        log_level=_env_str("LOG_LEVEL", "INFO").upper(),
    )


def load_transit_settings() -> TransitSettings:
    return TransitSettings(
        client_id=_env_str("VASTTRAFIK_CLIENT_ID"),
        client_secret=_env_str("VASTTRAFIK_CLIENT_SECRET"),
        auth_url=_env_str("VASTTRAFIK_AUTH_URL", DEFAULT_VASTTRAFIK_AUTH_URL),
        api_base=_env_str("VASTTRAFIK_API_BASE", DEFAULT_VASTTRAFIK_API_BASE),
        frontend_url=_env_str("FRONTEND_URL", "http://localhost:5173"),
        log_level=_env_str("LOG_LEVEL", "INFO").upper(),
    )


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
