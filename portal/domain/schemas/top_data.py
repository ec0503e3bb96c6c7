"""Pydantic schemas for top data banners."""

from pydantic import BaseModel, Field
from typing import Optional

from portal.domain.models.top_data import DEFAULT_COLOR_CODE
from portal.domain.schemas.common import AuditRead


class TopDataBase(BaseModel):
    meta_title: str
    meta_description: Optional[str] = None
    keywords: list[str] = []
    tags: list[str] = []
    content_title: str
    content_description: Optional[str] = None
    color_code: str = DEFAULT_COLOR_CODE


class TopDataCreate(TopDataBase):
    meta_title: str = Field(min_length=1)
    content_title: str = Field(min_length=1)


class TopDataUpdate(BaseModel):
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    keywords: Optional[list[str]] = None
    tags: Optional[list[str]] = None
    content_title: Optional[str] = None
    content_description: Optional[str] = None
    color_code: Optional[str] = None
    is_active: Optional[bool] = None


class TopDataPublic(TopDataBase):
    id: int

    model_config = {"from_attributes": True}


class TopDataRead(AuditRead, TopDataPublic):
    pass
