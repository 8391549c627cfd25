"""
FastAPI router for per-job shopping lists.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from jobs import service as jobs_service

from . import repository, schemas

router = APIRouter()


async def _require_item(item_id: int) -> dict:
    item = await repository.get_item(item_id)
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Shopping item not found.")
    return item


@router.post("/jobs/{job_id}/shopping", status_code=status.HTTP_201_CREATED)
async def create_item(job_id: int, request: schemas.ShoppingItemCreate) -> list[dict]:
    """
    Add an item and return the job's full shopping list.
    """
    await jobs_service.require_job(job_id)
    await repository.create_item(job_id=job_id, item_name=request.item_name, quantity=request.quantity)
    return await repository.list_items_for_job(job_id)


@router.put("/shopping/{item_id}")
async def update_item(item_id: int, request: schemas.ShoppingItemUpdate) -> dict:
    item = await _require_item(item_id)
    await repository.update_item(
        item_id,
        item_name=request.item_name or item["item_name"],
        quantity=request.quantity or item["quantity"],
    )
    return await _require_item(item_id)


@router.patch("/shopping/{item_id}")
async def toggle_item(item_id: int) -> dict:
    updated = await repository.toggle_item_purchased(item_id)
    if not updated:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Shopping item not found.")
    item = await _require_item(item_id)
    return {"message": "Status updated.", "purchased": item["purchased"]}


@router.delete("/shopping/{item_id}")
async def delete_item(item_id: int) -> dict:
    deleted = await repository.delete_item(item_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Shopping item not found.")
    return {"message": "Shopping item deleted."}
