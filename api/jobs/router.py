"""
FastAPI router for job endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from core.config import Settings, get_settings

from . import repository, schemas, service

router = APIRouter(prefix="/jobs")


@router.get("")
async def list_jobs() -> list[dict]:
    return await repository.list_jobs()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_job(request: schemas.JobIn) -> dict:
    return await service.create_job(request)


@router.get("/{job_id}")
async def get_job(job_id: int) -> dict:
    """
    A job with its images, notes and shopping items.
    """
    return await service.get_job_detail(job_id)


@router.put("/{job_id}")
async def update_job(job_id: int, request: schemas.JobIn) -> dict:
    return await service.update_job(job_id, request)


@router.delete("/{job_id}")
async def delete_job(
    job_id: int,
    settings: Settings = Depends(get_settings),
) -> dict:
    return await service.delete_job(job_id, settings=settings)


@router.patch("/{job_id}/complete")
async def toggle_job_completed(job_id: int) -> dict:
    return await service.toggle_completed(job_id)
