"""Top data — highlighted banner blocks shown above the category listing."""

from sqlalchemy import Column, Integer, String, Text, JSON

from portal.infrastructure.database import Base
from portal.domain.models.audit import AuditMixin

DEFAULT_COLOR_CODE = "#000000"


class TopData(AuditMixin, Base):
    __tablename__ = "top_data"

    id = Column(Integer, primary_key=True, autoincrement=True)
    meta_title = Column(String(500), nullable=False)
    meta_description = Column(Text, nullable=True)
    keywords = Column(JSON, nullable=False, default=list)
    tags = Column(JSON, nullable=False, default=list)
    content_title = Column(String(500), nullable=False)
    content_description = Column(Text, nullable=True)  # markdown
    color_code = Column(String(20), nullable=False, default=DEFAULT_COLOR_CODE)

    def __repr__(self):
        return f"<TopData {self.meta_title}>"
