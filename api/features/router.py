"""
FastAPI router for the feature backlog (ideas for the app itself).
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from . import repository, schemas

router = APIRouter(prefix="/features")


async def _require_feature(feature_id: int) -> dict:
    feature = await repository.get_feature(feature_id)
    if feature is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Feature not found.")
    return feature


@router.get("")
async def list_features() -> list[dict]:
    return await repository.list_features()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_feature(request: schemas.FeatureIn) -> dict:
    feature_id = await repository.create_feature(
        title=request.title,
        description=request.description,
        status=request.status,
    )
    return await _require_feature(feature_id)


@router.put("/{feature_id}")
async def update_feature(feature_id: int, request: schemas.FeatureIn) -> dict:
    """
    Update title and description. Status changes go through PATCH .../status.
    """
    updated = await repository.update_feature(
        feature_id,
        title=request.title,
        description=request.description,
    )
    if not updated:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Feature not found.")
    return await _require_feature(feature_id)


@router.patch("/{feature_id}/status")
async def update_feature_status(feature_id: int, request: schemas.FeatureStatusIn) -> dict:
    updated = await repository.update_feature_status(feature_id, status=request.status)
    if not updated:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Feature not found.")
    return await _require_feature(feature_id)


@router.delete("/{feature_id}")
async def delete_feature(feature_id: int) -> dict:
    deleted = await repository.delete_feature(feature_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Feature not found.")
    return {"message": "Feature deleted."}
