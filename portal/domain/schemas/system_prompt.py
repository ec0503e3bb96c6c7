"""Pydantic schemas for the system prompt."""

from pydantic import BaseModel, Field
from typing import Optional

from portal.domain.schemas.common import AuditRead


class SystemPromptCreate(BaseModel):
    system_prompt: str = Field(min_length=1)
    description: Optional[str] = None


class SystemPromptUpdate(BaseModel):
    system_prompt: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    is_active: Optional[bool] = None


class SystemPromptRead(AuditRead):
    id: int
    system_prompt: str
    description: Optional[str] = None
