"""Pydantic schemas for latest jobs."""

from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional

from portal.domain.schemas.common import AuditRead


class LatestJobCreate(BaseModel):
    category: str = Field(min_length=1)
    meta_title: str = Field(min_length=1)
    meta_description: str = Field(min_length=1)
    meta_tags: list[str] = []
    keywords: list[str] = []
    content_title: str = Field(min_length=1)
    content_description: str = Field(min_length=1)


class LatestJobUpdate(BaseModel):
    category: Optional[str] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    meta_tags: Optional[list[str]] = None
    keywords: Optional[list[str]] = None
    content_title: Optional[str] = None
    content_description: Optional[str] = None
    is_active: Optional[bool] = None


class LatestJobPublic(BaseModel):
    id: int
    category: str
    meta_title: str
    meta_description: str
    meta_tags: list[str] = []
    keywords: list[str] = []
    content_title: str
    content_description: str
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class LatestJobRead(AuditRead, LatestJobPublic):
    pass
