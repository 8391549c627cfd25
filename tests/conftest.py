"""
Shared fixtures: every test gets its own SQLite file and upload directory.
"""

from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from auth.security import hash_password
from core.config import Settings
from main import create_app

PASSWORD = "correct horse battery"
JWT_SECRET = "test-secret"


def count_rows(settings: Settings, table: str, where: str = "", *args) -> int:
    sql = f"SELECT COUNT(*) FROM {table}"
    if where:
        sql += f" WHERE {where}"
    with sqlite3.connect(settings.database_path) as conn:
        return conn.execute(sql, args).fetchone()[0]


def stored_files(settings: Settings) -> list[str]:
    return sorted(p.name for p in Path(settings.upload_dir).iterdir())


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        database_path=str(tmp_path / "db" / "test.db"),
        upload_dir=str(tmp_path / "uploads"),
    )


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def auth_settings(tmp_path) -> Settings:
    return Settings(
        database_path=str(tmp_path / "db" / "auth.db"),
        upload_dir=str(tmp_path / "uploads"),
        jwt_secret=JWT_SECRET,
        auth_password_hash=hash_password(PASSWORD, rounds=4),
    )


@pytest.fixture
def auth_client(auth_settings):
    with TestClient(create_app(auth_settings)) as c:
        yield c


@pytest.fixture
def motorcycle(client) -> dict:
    response = client.post("/api/motorcycles", json={"brand": "Honda", "model": "CB500"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def job(client, motorcycle) -> dict:
    response = client.post(
        "/api/jobs",
        json={"motorcycle_id": motorcycle["id"], "title": "Oil change", "date": "2024-01-01"},
    )
    assert response.status_code == 201
    return response.json()
