"""Pydantic schemas for FAQs."""

from pydantic import BaseModel, Field
from typing import Optional

from portal.domain.schemas.common import AuditRead


class FAQCreate(BaseModel):
    sub_category_id: int
    question: str = Field(min_length=1)
    answer: str = Field(min_length=1)
    order: int = 0


class FAQUpdate(BaseModel):
    question: Optional[str] = None
    answer: Optional[str] = None
    order: Optional[int] = None
    is_active: Optional[bool] = None


class SubCategoryRef(BaseModel):
    id: int
    meta_title: str
    content_title: str

    model_config = {"from_attributes": True}


class FAQPublic(BaseModel):
    id: int
    question: str
    answer: str
    order: int
    sub_category_id: int
    sub_category: Optional[SubCategoryRef] = None

    model_config = {"from_attributes": True}


class FAQRead(AuditRead, FAQPublic):
    pass
