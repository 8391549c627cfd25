"""
Image file storage on local disk.

This file contains logic that is independent of FastAPI's routing layer:
- Validate uploads (content type, size)
- Turn the client filename into a safe, unique stored name
- Write the file under the upload directory
- Remove files best-effort after their rows are gone

Rows reference files by bare filename only; the upload directory is flat.
The client-supplied name is never used to build a path.
"""

from __future__ import annotations

import contextlib
import logging
import os
import random
import re
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from fastapi import HTTPException, UploadFile, status

MAX_FILENAME_LENGTH = 255
CHUNK_SIZE = 1024 * 1024  # 1 MiB

_SEPARATORS = re.compile(r"[/\\]")
_DISALLOWED = re.compile(r"[^a-zA-Z0-9._-]")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoredFile:
    filename: str
    original_name: str


def sanitize_filename(filename: str) -> str:
    """
    Remove anything that could escape the upload directory.

    Separators and ".." go first, then every character outside the
    allow-list becomes "_". The result is capped at 255 characters.
    """
    cleaned = _SEPARATORS.sub("", filename or "")
    cleaned = cleaned.replace("..", "")
    cleaned = _DISALLOWED.sub("_", cleaned)
    return cleaned[:MAX_FILENAME_LENGTH]


def build_stored_filename(original_name: str) -> str:
    sanitized = sanitize_filename(original_name)
    stem, ext = os.path.splitext(sanitized)
    if not stem:
        stem = "image"
    prefix = f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}-"
    ext = ext.lower()[: MAX_FILENAME_LENGTH - len(prefix) - 1]
    # The whole stored name, prefix included, must fit the filesystem limit.
    stem = stem[: MAX_FILENAME_LENGTH - len(prefix) - len(ext)]
    return f"{prefix}{stem}{ext}"


def validate_image(file: UploadFile) -> None:
    content_type = (file.content_type or "").lower()
    if not content_type.startswith("image/"):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only image files are allowed.",
        )


def resolve_path(upload_dir: str | Path, filename: str) -> Path:
    base = Path(upload_dir).resolve()
    path = (base / filename).resolve()
    if path.parent != base:
        raise ValueError(f"Refusing path outside upload dir: {filename!r}")
    return path


async def save_image(file: UploadFile, *, upload_dir: str | Path, max_bytes: int) -> StoredFile:
    """
    Validate and stream one uploaded image to disk.

    The size cap is enforced while reading; an oversized upload leaves no
    partial file behind.
    """
    validate_image(file)

    original_name = file.filename or ""
    stored_name = build_stored_filename(original_name)
    path = resolve_path(upload_dir, stored_name)

    size = 0
    try:
        with path.open("wb") as out:
            while True:
                chunk = await file.read(CHUNK_SIZE)
                if not chunk:
                    break
                size += len(chunk)
                if size > max_bytes:
                    raise HTTPException(
                        status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                        detail=f"File too large. Max is {max_bytes} bytes.",
                    )
                out.write(chunk)
    except BaseException:
        with contextlib.suppress(OSError):
            path.unlink(missing_ok=True)
        raise

    logger.info(
        "image_saved filename=%s content_type=%s size_bytes=%s",
        stored_name,
        file.content_type,
        size,
    )
    return StoredFile(filename=stored_name, original_name=original_name)


def remove_files(upload_dir: str | Path, filenames: Iterable[str | None]) -> int:
    """
    Delete stored files after their rows are gone.

    Missing files are ignored. Any other failure is logged and skipped; the
    rows are already committed, so cleanup must never fail the request.
    Returns how many files were actually removed.
    """
    removed = 0
    for filename in filenames:
        if not filename:
            continue
        try:
            resolve_path(upload_dir, filename).unlink()
        except FileNotFoundError:
            continue
        except (OSError, ValueError):
            logger.warning("image_cleanup_failed filename=%s", filename, exc_info=True)
            continue
        removed += 1
    return removed
