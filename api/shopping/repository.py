"""
Shopping list persistence (parts and supplies per job).
"""

from __future__ import annotations

from typing import Any

from core import db


async def list_items_for_job(job_id: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, job_id, item_name, quantity, purchased, created_at
        FROM shopping_items
        WHERE job_id = ?
        ORDER BY created_at ASC, id ASC
        """,
        job_id,
    )


async def get_item(item_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT id, job_id, item_name, quantity, purchased, created_at
        FROM shopping_items
        WHERE id = ?
        """,
        item_id,
    )


async def create_item(*, job_id: int, item_name: str, quantity: int = 1) -> int:
    return await db.insert(
        """
        INSERT INTO shopping_items (job_id, item_name, quantity, purchased)
        VALUES (?, ?, ?, 0)
        """,
        job_id,
        item_name,
        quantity,
    )


async def update_item(item_id: int, *, item_name: str, quantity: int) -> int:
    return await db.execute(
        """
        UPDATE shopping_items
        SET item_name = ?,
            quantity = ?
        WHERE id = ?
        """,
        item_name,
        quantity,
        item_id,
    )


async def toggle_item_purchased(item_id: int) -> int:
    return await db.execute(
        """
        UPDATE shopping_items
        SET purchased = CASE purchased WHEN 1 THEN 0 ELSE 1 END
        WHERE id = ?
        """,
        item_id,
    )


async def delete_item(item_id: int) -> int:
    return await db.execute("DELETE FROM shopping_items WHERE id = ?", item_id)
