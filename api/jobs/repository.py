"""
Job persistence.
This module is where job-related SQL lives.
"""

from __future__ import annotations

from typing import Any

from core import db

_JOB_COLUMNS = """
  id, motorcycle_id, title, description, date, mileage, cost, completed,
  created_at, updated_at
"""


async def list_jobs() -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {_JOB_COLUMNS}
        FROM jobs
        ORDER BY date DESC, created_at DESC, id DESC
        """
    )


async def list_jobs_for_motorcycle(motorcycle_id: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {_JOB_COLUMNS}
        FROM jobs
        WHERE motorcycle_id = ?
        ORDER BY date DESC, created_at DESC, id DESC
        """,
        motorcycle_id,
    )


async def get_job(job_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {_JOB_COLUMNS}
        FROM jobs
        WHERE id = ?
        """,
        job_id,
    )


async def create_job(
    *,
    motorcycle_id: int | None,
    title: str,
    description: str,
    date: str,
    mileage: int | None,
    cost: float | None,
) -> int:
    return await db.insert(
        """
        INSERT INTO jobs (motorcycle_id, title, description, date, mileage, cost)
        VALUES (?, ?, ?, ?, ?, ?)
        """,
        motorcycle_id,
        title,
        description,
        date,
        mileage,
        cost,
    )


async def update_job(
    job_id: int,
    *,
    motorcycle_id: int | None,
    title: str,
    description: str,
    date: str,
    mileage: int | None,
    cost: float | None,
) -> int:
    return await db.execute(
        """
        UPDATE jobs
        SET motorcycle_id = ?,
            title = ?,
            description = ?,
            date = ?,
            mileage = ?,
            cost = ?,
            updated_at = CURRENT_TIMESTAMP
        WHERE id = ?
        """,
        motorcycle_id,
        title,
        description,
        date,
        mileage,
        cost,
        job_id,
    )


async def delete_job(job_id: int) -> int:
    """
    Delete a job. Its images, notes and shopping items go with it (ON DELETE CASCADE).
    """
    return await db.execute("DELETE FROM jobs WHERE id = ?", job_id)


async def toggle_job_completed(job_id: int) -> int:
    """
    Flip `completed` in one statement so concurrent toggles cannot lose a transition.
    """
    return await db.execute(
        """
        UPDATE jobs
        SET completed = CASE completed WHEN 1 THEN 0 ELSE 1 END,
            updated_at = CURRENT_TIMESTAMP
        WHERE id = ?
        """,
        job_id,
    )
