"""Pydantic schemas for home page content."""

from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional

from portal.domain.schemas.common import AuditRead


class HomeFAQ(BaseModel):
    question: str = Field(min_length=1)
    answer: str = Field(min_length=1)


class HomeContentCreate(BaseModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    telegram_link: str = Field(min_length=1)
    whatsapp_link: str = Field(min_length=1)
    faqs: list[HomeFAQ] = []


class HomeContentUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    telegram_link: Optional[str] = None
    whatsapp_link: Optional[str] = None
    faqs: Optional[list[HomeFAQ]] = None
    is_active: Optional[bool] = None


class HomeContentPublic(BaseModel):
    id: int
    title: str
    description: str
    telegram_link: str
    whatsapp_link: str
    faqs: list[HomeFAQ] = []
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class HomeContentRead(AuditRead, HomeContentPublic):
    pass
