"""
FastAPI router for job notes.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from jobs import service as jobs_service

from . import repository, schemas

router = APIRouter()


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Note not found.")


@router.post("/jobs/{job_id}/notes", status_code=status.HTTP_201_CREATED)
async def create_note(job_id: int, request: schemas.NoteIn) -> list[dict]:
    """
    Add a note and return the job's full note list.
    """
    await jobs_service.require_job(job_id)
    await repository.create_note(job_id=job_id, content=request.content)
    return await repository.list_notes_for_job(job_id)


@router.put("/notes/{note_id}")
async def update_note(note_id: int, request: schemas.NoteIn) -> dict:
    updated = await repository.update_note(note_id, content=request.content)
    if not updated:
        raise _not_found()
    note = await repository.get_note(note_id)
    if note is None:
        raise _not_found()
    return note


@router.delete("/notes/{note_id}")
async def delete_note(note_id: int) -> dict:
    deleted = await repository.delete_note(note_id)
    if not deleted:
        raise _not_found()
    return {"message": "Note deleted."}
