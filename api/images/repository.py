"""
Image row persistence. The files themselves live in `images.storage`.
"""

from __future__ import annotations

from typing import Any

from core import db


async def list_images_for_job(job_id: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, job_id, filename, original_name, created_at
        FROM images
        WHERE job_id = ?
        ORDER BY created_at ASC, id ASC
        """,
        job_id,
    )


async def list_image_filenames_for_job(job_id: int) -> list[str]:
    rows = await db.fetch_all(
        """
        SELECT filename
        FROM images
        WHERE job_id = ?
        """,
        job_id,
    )
    return [str(row["filename"]) for row in rows]


async def get_image(image_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT id, job_id, filename, original_name, created_at
        FROM images
        WHERE id = ?
        """,
        image_id,
    )


async def create_image(*, job_id: int, filename: str, original_name: str) -> int:
    return await db.insert(
        """
        INSERT INTO images (job_id, filename, original_name)
        VALUES (?, ?, ?)
        """,
        job_id,
        filename,
        original_name,
    )


async def delete_image(image_id: int) -> int:
    return await db.execute("DELETE FROM images WHERE id = ?", image_id)
