"""
Upload Guard — validate the multipart ``cv`` field before any processing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from fastapi import UploadFile

from cv_analyzer.config import Settings
from cv_analyzer.exceptions import InvalidUpload

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True)
class UploadedDocument:
    """An accepted upload, held in memory for the duration of one request."""

    content: bytes
    content_type: str
    filename: str

    @property
    def size(self) -> int:
        return len(self.content)


async def read_upload(
    files: Sequence[UploadFile] | None, settings: Settings
) -> UploadedDocument:
    """
    Accept exactly one file whose MIME type is allowed and whose size is within
    ``settings.max_upload_size``. Raises InvalidUpload otherwise.
    """
    if not files:
        raise InvalidUpload("Please upload a PDF file.")
    if len(files) > 1:
        raise InvalidUpload("Only one file may be uploaded per request.")

    upload = files[0]
    filename = upload.filename or "uploaded-file"
    content_type = upload.content_type or ""

    if content_type not in settings.allowed_upload_types:
        raise InvalidUpload(
            f"Unsupported file type '{content_type or 'unknown'}'. "
            f"Allowed: {', '.join(settings.allowed_upload_types)}."
        )

    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await upload.read(_CHUNK_SIZE)
        if not chunk:
            break
        total += len(chunk)
        if total > settings.max_upload_size:
            raise InvalidUpload(
                f"File too large. Maximum allowed size is {_format_size(settings.max_upload_size)}."
            )
        chunks.append(chunk)

    if total == 0:
        raise InvalidUpload("The uploaded file is empty.")

    logger.info(f"Accepted upload '{filename}' ({content_type}, {total} bytes)")
    return UploadedDocument(content=b"".join(chunks), content_type=content_type, filename=filename)


def _format_size(num_bytes: int) -> str:
    if num_bytes % (1024 * 1024) == 0:
        return f"{num_bytes // (1024 * 1024)} MB"
    return f"{num_bytes} bytes"
