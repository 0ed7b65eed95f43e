"""
Upload intake and cleanup for résumé PDFs.

Each request stores at most one file under the upload directory and removes
it before the request finishes, whatever the outcome.
"""
import logging
import os
import time
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import AsyncIterator, Optional

import aiofiles
from fastapi import UploadFile, status

from resume_ace.core.config import PDF_MIME_TYPE, Settings
from resume_ace.core.errors import ValidationError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


@dataclass
class UploadedFile:
    """A résumé persisted for the lifetime of one request."""
    storage_path: str
    original_name: str
    mime_type: str
    size_bytes: int


def _too_large(settings: Settings) -> ValidationError:
    limit_mb = settings.max_upload_bytes / (1024 * 1024)
    return ValidationError(
        f"File too large. Maximum size is {limit_mb:g}MB",
        status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
    )


def validate_upload(upload: Optional[UploadFile], settings: Settings, missing_message: str = "No file uploaded") -> UploadFile:
    """
    Check presence, MIME type and declared size before anything is written.

    Raises:
        ValidationError: Missing file, non-PDF content type, or oversized file
    """
    if upload is None or not upload.filename:
        raise ValidationError(missing_message)

    if upload.content_type != PDF_MIME_TYPE:
        raise ValidationError("Only PDF files are allowed")

    if upload.size is not None and upload.size > settings.max_upload_bytes:
        raise _too_large(settings)

    return upload


def storage_name(original_name: str) -> str:
    """Millisecond timestamp plus the client's base filename."""
    return f"{int(time.time() * 1000)}-{Path(original_name).name}"


async def save_upload(upload: UploadFile, settings: Settings) -> UploadedFile:
    """
    Persist an already validated upload, enforcing the size ceiling while streaming.

    Raises:
        ValidationError: The stream exceeded the size ceiling (partial file removed)
    """
    upload_dir = Path(settings.upload_dir)
    upload_dir.mkdir(parents=True, exist_ok=True)
    path = upload_dir / storage_name(upload.filename)

    written = 0
    try:
        async with aiofiles.open(path, "wb") as out_file:
            while True:
                chunk = await upload.read(CHUNK_SIZE)
                if not chunk:
                    break
                written += len(chunk)
                if written > settings.max_upload_bytes:
                    raise _too_large(settings)
                await out_file.write(chunk)
    except BaseException:
        cleanup_file(str(path))
        raise

    logger.info(f"Stored upload {upload.filename!r} at {path} ({written} bytes)")
    return UploadedFile(
        storage_path=str(path),
        original_name=upload.filename,
        mime_type=upload.content_type,
        size_bytes=written,
    )


def cleanup_file(file_path: str) -> None:
    """Remove a stored upload; failures are logged and never raised."""
    try:
        if os.path.exists(file_path):
            os.remove(file_path)
            logger.debug(f"Removed upload {file_path}")
    except OSError as e:
        logger.error(f"Error cleaning up file {file_path}: {e}")


@asynccontextmanager
async def stored_upload(
    upload: Optional[UploadFile],
    settings: Settings,
    missing_message: str = "No file uploaded",
) -> AsyncIterator[UploadedFile]:
    """
    Validate and store an upload for the duration of the block.

    The file is deleted on exit, including when the block raises.
    """
    validate_upload(upload, settings, missing_message)
    uploaded = await save_upload(upload, settings)
    try:
        yield uploaded
    finally:
        cleanup_file(uploaded.storage_path)
