"""Thumbnail images uploaded by admins."""

from sqlalchemy import Column, Integer, String, Text

from portal.infrastructure.database import Base
from portal.domain.models.audit import AuditMixin


class Thumbnail(AuditMixin, Base):
    __tablename__ = "thumbnails"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(500), nullable=False)
    description = Column(Text, nullable=False, default="")
    image_url = Column(String(500), nullable=False)
    original_file_name = Column(String(500), nullable=True)
    file_size = Column(Integer, nullable=True)
    mime_type = Column(String(100), nullable=True)
    url = Column(String(1000), nullable=False, default="")

    def __repr__(self):
        return f"<Thumbnail {self.title}>"
