"""
Feature backlog persistence.
"""

from __future__ import annotations

from typing import Any

from core import db


async def list_features() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, title, description, status, created_at, updated_at
        FROM features
        ORDER BY created_at DESC, id DESC
        """
    )


async def get_feature(feature_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT id, title, description, status, created_at, updated_at
        FROM features
        WHERE id = ?
        """,
        feature_id,
    )


async def create_feature(*, title: str, description: str | None, status: str) -> int:
    return await db.insert(
        """
        INSERT INTO features (title, description, status)
        VALUES (?, ?, ?)
        """,
        title,
        description,
        status,
    )


async def update_feature(feature_id: int, *, title: str, description: str | None) -> int:
    return await db.execute(
        """
        UPDATE features
        SET title = ?,
            description = ?,
            updated_at = CURRENT_TIMESTAMP
        WHERE id = ?
        """,
        title,
        description,
        feature_id,
    )


async def update_feature_status(feature_id: int, *, status: str) -> int:
    return await db.execute(
        """
        UPDATE features
        SET status = ?,
            updated_at = CURRENT_TIMESTAMP
        WHERE id = ?
        """,
        status,
        feature_id,
    )


async def delete_feature(feature_id: int) -> int:
    return await db.execute("DELETE FROM features WHERE id = ?", feature_id)
