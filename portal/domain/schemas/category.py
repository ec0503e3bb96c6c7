"""Pydantic schemas for main and sub categories."""

from pydantic import BaseModel, Field
from typing import Optional

from portal.domain.schemas.common import AuditRead


class MainCategoryCreate(BaseModel):
    title: str = Field(min_length=1)


class MainCategoryUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    is_active: Optional[bool] = None


class MainCategoryRef(BaseModel):
    id: int
    title: str

    model_config = {"from_attributes": True}


class MainCategoryRead(AuditRead):
    id: int
    title: str


class SubCategoryBase(BaseModel):
    meta_title: str
    meta_description: Optional[str] = None
    keywords: list[str] = []
    tags: list[str] = []
    content_title: str
    content_description: Optional[str] = None


class SubCategoryCreate(SubCategoryBase):
    main_category_id: int
    meta_title: str = Field(min_length=1)
    content_title: str = Field(min_length=1)


class SubCategoryUpdate(BaseModel):
    main_category_id: Optional[int] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    keywords: Optional[list[str]] = None
    tags: Optional[list[str]] = None
    content_title: Optional[str] = None
    content_description: Optional[str] = None
    is_active: Optional[bool] = None


class SubCategoryPublic(SubCategoryBase):
    id: int
    main_category: Optional[MainCategoryRef] = None

    model_config = {"from_attributes": True}


class SubCategoryRead(AuditRead, SubCategoryPublic):
    main_category_id: int
