"""
Tests for app-wide wiring: error rendering, CORS and the import layout.
"""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

import core
import main
from core.config import Settings
from main import create_app
from motorcycles import repository as motorcycles_repository

API_DIR = Path(__file__).resolve().parent.parent / "api"
ALLOWED = "http://localhost:5173"


@pytest.fixture
def cors_settings(tmp_path) -> Settings:
    return Settings(
        database_path=str(tmp_path / "cors.db"),
        upload_dir=str(tmp_path / "uploads"),
        allowed_origins=(ALLOWED,),
    )


def test_unexpected_error_is_generic_500(cors_settings, monkeypatch):
    async def broken():
        raise RuntimeError("disk full at /var/secret/path")

    monkeypatch.setattr(motorcycles_repository, "list_motorcycles", broken)

    with TestClient(create_app(cors_settings), raise_server_exceptions=False) as client:
        response = client.get("/api/motorcycles", headers={"Origin": ALLOWED})

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error."}
    assert "secret" not in response.text
    assert response.headers["access-control-allow-origin"] == ALLOWED


def test_cors_preflight_allows_configured_origin(cors_settings):
    with TestClient(create_app(cors_settings)) as client:
        response = client.options(
            "/api/jobs",
            headers={
                "Origin": ALLOWED,
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Authorization",
            },
        )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == ALLOWED
    assert "POST" in response.headers["access-control-allow-methods"]


def test_cors_preflight_rejects_other_origin(cors_settings):
    with TestClient(create_app(cors_settings)) as client:
        response = client.options(
            "/api/jobs",
            headers={"Origin": "http://evil.example", "Access-Control-Request-Method": "POST"},
        )
        assert response.status_code == 400
        assert "access-control-allow-origin" not in response.headers

        simple = client.get("/api/jobs", headers={"Origin": "http://evil.example"})
        assert "access-control-allow-origin" not in simple.headers


def test_unknown_api_path_is_404_even_with_gate(auth_client):
    response = auth_client.get("/api/no-such-thing")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_modules_load_from_api_source_root():
    assert Path(core.__file__).resolve().parent.parent == API_DIR
    assert Path(main.__file__).resolve().parent == API_DIR
