"""System prompt — at most one active row at a time."""

from sqlalchemy import Column, Integer, Text

from portal.infrastructure.database import Base
from portal.domain.models.audit import AuditMixin


class SystemPrompt(AuditMixin, Base):
    __tablename__ = "system_prompts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    system_prompt = Column(Text, nullable=False)
    description = Column(Text, nullable=True)

    def __repr__(self):
        return f"<SystemPrompt {self.id}>"
