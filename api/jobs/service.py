"""
Job business logic.

Deleting a job is a two-phase operation. The store cascades the job's image
rows away in the same statement that deletes the job, so the filenames have
to be read first and the files removed after the delete has committed. A
crash between the two steps leaves orphan files on disk; it never leaves a
row pointing at a missing file.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from core.config import Settings
from images import repository as images_repository
from images import storage
from motorcycles import repository as motorcycles_repository
from notes import repository as notes_repository
from shopping import repository as shopping_repository

from . import repository, schemas

logger = logging.getLogger(__name__)


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job not found.")


async def require_job(job_id: int) -> dict:
    job = await repository.get_job(job_id)
    if job is None:
        raise _not_found()
    return job


async def _check_motorcycle(motorcycle_id: int | None) -> None:
    if motorcycle_id is None:
        return None
    if await motorcycles_repository.get_motorcycle(motorcycle_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Motorcycle not found.")


async def get_job_detail(job_id: int) -> dict:
    job = await require_job(job_id)
    images = await images_repository.list_images_for_job(job_id)
    notes = await notes_repository.list_notes_for_job(job_id)
    shopping_items = await shopping_repository.list_items_for_job(job_id)
    return {**job, "images": images, "notes": notes, "shoppingItems": shopping_items}


async def create_job(payload: schemas.JobIn) -> dict:
    await _check_motorcycle(payload.motorcycle_id)
    job_id = await repository.create_job(
        motorcycle_id=payload.motorcycle_id,
        title=payload.title,
        description=payload.description or "",
        date=payload.date,
        mileage=payload.mileage,
        cost=payload.cost,
    )
    logger.info("job_created job_id=%s motorcycle_id=%s", job_id, payload.motorcycle_id)
    return await require_job(job_id)


async def update_job(job_id: int, payload: schemas.JobIn) -> dict:
    await require_job(job_id)
    await _check_motorcycle(payload.motorcycle_id)
    updated = await repository.update_job(
        job_id,
        motorcycle_id=payload.motorcycle_id,
        title=payload.title,
        description=payload.description or "",
        date=payload.date,
        mileage=payload.mileage,
        cost=payload.cost,
    )
    if not updated:
        raise _not_found()
    return await require_job(job_id)


async def delete_job(job_id: int, *, settings: Settings) -> dict:
    filenames = await images_repository.list_image_filenames_for_job(job_id)

    deleted = await repository.delete_job(job_id)
    if not deleted:
        raise _not_found()

    removed = storage.remove_files(settings.upload_dir, filenames)
    if removed != len(filenames):
        logger.warning(
            "job_image_cleanup_mismatch job_id=%s expected=%s removed=%s",
            job_id,
            len(filenames),
            removed,
        )
    logger.info("job_deleted job_id=%s images=%s", job_id, len(filenames))
    return {"message": "Job deleted."}


async def toggle_completed(job_id: int) -> dict:
    updated = await repository.toggle_job_completed(job_id)
    if not updated:
        raise _not_found()
    job = await require_job(job_id)
    return {"message": "Status updated.", "completed": job["completed"]}
