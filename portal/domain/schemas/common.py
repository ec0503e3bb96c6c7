"""Pydantic schemas shared across content types."""

from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class PrincipalRef(BaseModel):
    id: str
    name: str
    email: str

    model_config = {"from_attributes": True}


class AuditRead(BaseModel):
    is_active: bool
    created_by: str
    creator: Optional[PrincipalRef] = None
    updated_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class Pagination(BaseModel):
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int


class MessageResponse(BaseModel):
    success: bool = True
    message: str
