"""
FastAPI router for job images.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, File, UploadFile, status

from core.config import Settings, get_settings

from . import service

router = APIRouter()


@router.post("/jobs/{job_id}/images", status_code=status.HTTP_201_CREATED)
async def upload_image(
    job_id: int,
    image: UploadFile | None = File(default=None),
    settings: Settings = Depends(get_settings),
) -> dict:
    """
    Attach one image to a job. The multipart field name is `image`.
    """
    return await service.upload_for_job(job_id, image, settings=settings)


@router.delete("/images/{image_id}")
async def delete_image(
    image_id: int,
    settings: Settings = Depends(get_settings),
) -> dict:
    return await service.delete_image(image_id, settings=settings)
