"""
Job image lifecycle: a row in `images` plus a file in the upload directory.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, UploadFile, status

from core.config import Settings
from jobs import repository as jobs_repository

from . import repository, storage

logger = logging.getLogger(__name__)


async def upload_for_job(job_id: int, file: UploadFile | None, *, settings: Settings) -> dict:
    if file is None or not file.filename:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No image uploaded.")

    if await jobs_repository.get_job(job_id) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job not found.")

    stored = await storage.save_image(
        file,
        upload_dir=settings.upload_dir,
        max_bytes=settings.max_upload_bytes,
    )
    try:
        image_id = await repository.create_image(
            job_id=job_id,
            filename=stored.filename,
            original_name=stored.original_name,
        )
    except Exception:
        # The row never landed, so the file has no owner.
        storage.remove_files(settings.upload_dir, [stored.filename])
        raise

    image = await repository.get_image(image_id)
    if image is None:
        raise RuntimeError("Failed to read back created image.")
    return image


async def delete_image(image_id: int, *, settings: Settings) -> dict:
    image = await repository.get_image(image_id)
    if image is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Image not found.")

    await repository.delete_image(image_id)
    storage.remove_files(settings.upload_dir, [image["filename"]])
    logger.info("image_deleted image_id=%s job_id=%s", image_id, image["job_id"])
    return {"message": "Image deleted."}
