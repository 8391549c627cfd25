"""
FastAPI router for motorcycle endpoints.

Create and update accept either `multipart/form-data` (the UI form, with an
optional `image` file) or a plain JSON body.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request, UploadFile, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from starlette.datastructures import UploadFile as StarletteUploadFile

from core.config import Settings, get_settings

from . import schemas, service

router = APIRouter(prefix="/motorcycles")

_FORM_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")


async def _read_payload(request: Request) -> tuple[schemas.MotorcycleIn, UploadFile | None]:
    content_type = request.headers.get("content-type", "").lower()
    image: UploadFile | None = None

    if content_type.startswith(_FORM_TYPES):
        form = await request.form()
        data = {key: value for key, value in form.items() if not isinstance(value, StarletteUploadFile)}
        candidate = form.get("image")
        if isinstance(candidate, StarletteUploadFile) and candidate.filename:
            image = candidate
    else:
        try:
            data = await request.json()
        except ValueError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Request body must be JSON or form data.",
            ) from exc
        if not isinstance(data, dict):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Request body must be a JSON object.",
            )

    try:
        payload = schemas.MotorcycleIn.model_validate(data)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors()) from exc
    return payload, image


@router.get("")
async def list_motorcycles() -> list[dict]:
    """
    All motorcycles, newest first, each with `total_cost` and `job_count`.
    """
    return await service.list_motorcycles()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_motorcycle(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> dict:
    payload, image = await _read_payload(request)
    return await service.create_motorcycle(payload, image, settings=settings)


@router.get("/{motorcycle_id}")
async def get_motorcycle(motorcycle_id: int) -> dict:
    return await service.get_motorcycle_detail(motorcycle_id)


@router.put("/{motorcycle_id}")
async def update_motorcycle(
    motorcycle_id: int,
    request: Request,
    settings: Settings = Depends(get_settings),
) -> dict:
    payload, image = await _read_payload(request)
    return await service.update_motorcycle(motorcycle_id, payload, image, settings=settings)


@router.delete("/{motorcycle_id}")
async def delete_motorcycle(
    motorcycle_id: int,
    settings: Settings = Depends(get_settings),
) -> dict:
    return await service.delete_motorcycle(motorcycle_id, settings=settings)
