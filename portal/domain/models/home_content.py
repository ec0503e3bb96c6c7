"""Home page content — hero text, community links and inline FAQs."""

from sqlalchemy import Column, Integer, String, Text, JSON

from portal.infrastructure.database import Base
from portal.domain.models.audit import AuditMixin


class HomeContent(AuditMixin, Base):
    __tablename__ = "home_contents"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(500), nullable=False)
    description = Column(Text, nullable=False)
    telegram_link = Column(String(500), nullable=False)
    whatsapp_link = Column(String(500), nullable=False)
    faqs = Column(JSON, nullable=False, default=list)  # [{"question": ..., "answer": ...}]

    def __repr__(self):
        return f"<HomeContent {self.title}>"
