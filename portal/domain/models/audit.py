"""Columns shared by every curated content table."""

from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import declared_attr, relationship
from sqlalchemy.sql import func


class AuditMixin:
    # updated_by holds either an admin or an employee id, so it has no FK.
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    updated_by = Column(String(32), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    @declared_attr
    def created_by(cls):
        return Column(String(32), ForeignKey("users.id"), nullable=False)

    @declared_attr
    def creator(cls):
        return relationship("User", lazy="joined")
