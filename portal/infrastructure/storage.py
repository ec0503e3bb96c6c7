"""Local-disk storage for uploaded thumbnail images."""

import os
import uuid
from dataclasses import dataclass

import structlog
from fastapi import UploadFile

from portal.core.exceptions import BadRequest

logger = structlog.get_logger(__name__)

THUMBNAIL_URL_PREFIX = "/uploads/thumbnails/"


@dataclass(frozen=True)
class StoredImage:
    filename: str
    url: str
    original_name: str
    size: int
    mime_type: str


class ThumbnailStorage:
    """Writes images under ``<upload_dir>/thumbnails`` and serves them from
    ``/uploads/thumbnails/<name>``."""

    def __init__(self, upload_dir: str, max_bytes: int):
        self.directory = os.path.join(upload_dir, "thumbnails")
        self.max_bytes = max_bytes

    async def save(self, file: UploadFile) -> StoredImage:
        mime_type = file.content_type or ""
        if not mime_type.startswith("image/"):
            raise BadRequest("Only image files are allowed")

        content = await file.read()
        if len(content) > self.max_bytes:
            raise BadRequest(f"Image exceeds the {self.max_bytes // (1024 * 1024)}MB limit")

        original_name = file.filename or "image"
        ext = os.path.splitext(original_name)[1].lower()
        filename = f"thumbnail-{uuid.uuid4().hex}{ext}"

        os.makedirs(self.directory, exist_ok=True)
        with open(os.path.join(self.directory, filename), "wb") as f:
            f.write(content)

        logger.info("Thumbnail stored", filename=filename, size=len(content))
        return StoredImage(
            filename=filename,
            url=f"{THUMBNAIL_URL_PREFIX}{filename}",
            original_name=original_name,
            size=len(content),
            mime_type=mime_type,
        )

    def delete(self, url: str) -> bool:
        """Remove the file behind a served URL; unknown URLs are ignored."""
        if not url or not url.startswith(THUMBNAIL_URL_PREFIX):
            return False
        name = os.path.basename(url[len(THUMBNAIL_URL_PREFIX):])
        path = os.path.join(self.directory, name)
        if not os.path.isfile(path):
            return False
        os.remove(path)
        logger.info("Thumbnail removed", filename=name)
        return True
