"""Pydantic schemas for thumbnails."""

from pydantic import BaseModel
from datetime import datetime
from typing import Optional

from portal.domain.schemas.common import AuditRead


class ThumbnailPublic(BaseModel):
    id: int
    title: str
    description: str = ""
    image_url: str
    url: str = ""
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class ThumbnailRead(AuditRead, ThumbnailPublic):
    original_file_name: Optional[str] = None
    file_size: Optional[int] = None
    mime_type: Optional[str] = None
