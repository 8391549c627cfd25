"""
Note persistence.
"""

from __future__ import annotations

from typing import Any

from core import db


async def list_notes_for_job(job_id: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT id, job_id, content, created_at
        FROM notes
        WHERE job_id = ?
        ORDER BY created_at ASC, id ASC
        """,
        job_id,
    )


async def get_note(note_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        SELECT id, job_id, content, created_at
        FROM notes
        WHERE id = ?
        """,
        note_id,
    )


async def create_note(*, job_id: int, content: str) -> int:
    return await db.insert(
        """
        INSERT INTO notes (job_id, content)
        VALUES (?, ?)
        """,
        job_id,
        content,
    )


async def update_note(note_id: int, *, content: str) -> int:
    return await db.execute("UPDATE notes SET content = ? WHERE id = ?", content, note_id)


async def delete_note(note_id: int) -> int:
    return await db.execute("DELETE FROM notes WHERE id = ?", note_id)
