"""
Motorcycle persistence, including the two per-motorcycle aggregates.
"""

from __future__ import annotations

from typing import Any

from core import db

_MOTORCYCLE_COLUMNS = """
  id, brand, model, year, registration_number, current_mileage,
  image_filename, created_at, updated_at
"""


async def list_motorcycles() -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {_MOTORCYCLE_COLUMNS}
        FROM motorcycles
        ORDER BY created_at DESC, id DESC
        """
    )


async def get_motorcycle(motorcycle_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {_MOTORCYCLE_COLUMNS}
        FROM motorcycles
        WHERE id = ?
        """,
        motorcycle_id,
    )


async def create_motorcycle(
    *,
    brand: str,
    model: str,
    year: int | None,
    registration_number: str | None,
    current_mileage: int | None,
    image_filename: str | None,
) -> int:
    return await db.insert(
        """
        INSERT INTO motorcycles
          (brand, model, year, registration_number, current_mileage, image_filename)
        VALUES (?, ?, ?, ?, ?, ?)
        """,
        brand,
        model,
        year,
        registration_number,
        current_mileage,
        image_filename,
    )


async def update_motorcycle(
    motorcycle_id: int,
    *,
    brand: str,
    model: str,
    year: int | None,
    registration_number: str | None,
    current_mileage: int | None,
    image_filename: str | None,
) -> int:
    return await db.execute(
        """
        UPDATE motorcycles
        SET brand = ?,
            model = ?,
            year = ?,
            registration_number = ?,
            current_mileage = ?,
            image_filename = ?,
            updated_at = CURRENT_TIMESTAMP
        WHERE id = ?
        """,
        brand,
        model,
        year,
        registration_number,
        current_mileage,
        image_filename,
        motorcycle_id,
    )


async def delete_motorcycle(motorcycle_id: int) -> int:
    """
    Delete a motorcycle. Its jobs survive with motorcycle_id = NULL (ON DELETE SET NULL).
    """
    return await db.execute("DELETE FROM motorcycles WHERE id = ?", motorcycle_id)


async def total_cost_for_motorcycle(motorcycle_id: int) -> float:
    value = await db.fetch_value(
        """
        SELECT SUM(cost) AS total_cost
        FROM jobs
        WHERE motorcycle_id = ?
          AND cost IS NOT NULL
        """,
        motorcycle_id,
    )
    return value or 0


async def job_count_for_motorcycle(motorcycle_id: int) -> int:
    value = await db.fetch_value(
        """
        SELECT COUNT(*) AS job_count
        FROM jobs
        WHERE motorcycle_id = ?
        """,
        motorcycle_id,
    )
    return int(value or 0)
