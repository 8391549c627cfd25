"""
Motorcycle business logic.

A motorcycle owns at most one image file (`image_filename`). Its jobs are
not owned: deleting the motorcycle leaves them in place with a null
reference, so their images stay on disk too.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, UploadFile, status

from core.config import Settings
from images import storage
from jobs import repository as jobs_repository

from . import repository, schemas

logger = logging.getLogger(__name__)


async def _require_motorcycle(motorcycle_id: int) -> dict:
    motorcycle = await repository.get_motorcycle(motorcycle_id)
    if motorcycle is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Motorcycle not found.")
    return motorcycle


async def _with_stats(motorcycle: dict) -> dict:
    motorcycle_id = int(motorcycle["id"])
    return {
        **motorcycle,
        "total_cost": await repository.total_cost_for_motorcycle(motorcycle_id),
        "job_count": await repository.job_count_for_motorcycle(motorcycle_id),
    }


async def list_motorcycles() -> list[dict]:
    rows = await repository.list_motorcycles()
    return [await _with_stats(row) for row in rows]


async def get_motorcycle_detail(motorcycle_id: int) -> dict:
    motorcycle = await _require_motorcycle(motorcycle_id)
    jobs = await jobs_repository.list_jobs_for_motorcycle(motorcycle_id)
    return {**(await _with_stats(motorcycle)), "jobs": jobs}


async def _store_image(image: UploadFile | None, settings: Settings) -> str | None:
    if image is None:
        return None
    stored = await storage.save_image(
        image,
        upload_dir=settings.upload_dir,
        max_bytes=settings.max_upload_bytes,
    )
    return stored.filename


async def create_motorcycle(
    payload: schemas.MotorcycleIn,
    image: UploadFile | None,
    *,
    settings: Settings,
) -> dict:
    image_filename = await _store_image(image, settings)
    try:
        motorcycle_id = await repository.create_motorcycle(
            brand=payload.brand,
            model=payload.model,
            year=payload.year,
            registration_number=payload.registration_number,
            current_mileage=payload.current_mileage,
            image_filename=image_filename,
        )
    except Exception:
        storage.remove_files(settings.upload_dir, [image_filename])
        raise

    logger.info("motorcycle_created motorcycle_id=%s", motorcycle_id)
    return await _require_motorcycle(motorcycle_id)


async def update_motorcycle(
    motorcycle_id: int,
    payload: schemas.MotorcycleIn,
    image: UploadFile | None,
    *,
    settings: Settings,
) -> dict:
    existing = await _require_motorcycle(motorcycle_id)
    new_filename = await _store_image(image, settings)
    previous_filename = existing.get("image_filename")

    try:
        await repository.update_motorcycle(
            motorcycle_id,
            brand=payload.brand,
            model=payload.model,
            year=payload.year,
            registration_number=payload.registration_number,
            current_mileage=payload.current_mileage,
            image_filename=new_filename or previous_filename,
        )
    except Exception:
        storage.remove_files(settings.upload_dir, [new_filename])
        raise

    # The row now points at the new file; the old one is unreferenced.
    if new_filename and previous_filename:
        storage.remove_files(settings.upload_dir, [previous_filename])

    return await _require_motorcycle(motorcycle_id)


async def delete_motorcycle(motorcycle_id: int, *, settings: Settings) -> dict:
    motorcycle = await _require_motorcycle(motorcycle_id)

    deleted = await repository.delete_motorcycle(motorcycle_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Motorcycle not found.")

    storage.remove_files(settings.upload_dir, [motorcycle.get("image_filename")])
    logger.info("motorcycle_deleted motorcycle_id=%s", motorcycle_id)
    return {"message": "Motorcycle deleted."}
