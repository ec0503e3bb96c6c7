"""Main and sub categories — the two-level content hierarchy."""

from sqlalchemy import Column, Integer, String, Text, JSON, ForeignKey
from sqlalchemy.orm import relationship

from portal.infrastructure.database import Base
from portal.domain.models.audit import AuditMixin


class MainCategory(AuditMixin, Base):
    __tablename__ = "main_categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), unique=True, nullable=False)

    def __repr__(self):
        return f"<MainCategory {self.title}>"


class SubCategory(AuditMixin, Base):
    __tablename__ = "sub_categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    main_category_id = Column(Integer, ForeignKey("main_categories.id"), nullable=False, index=True)
    meta_title = Column(String(500), nullable=False)
    meta_description = Column(Text, nullable=True)
    keywords = Column(JSON, nullable=False, default=list)
    tags = Column(JSON, nullable=False, default=list)
    content_title = Column(String(500), nullable=False)
    content_description = Column(Text, nullable=True)  # markdown

    main_category = relationship("MainCategory", lazy="joined")

    def __repr__(self):
        return f"<SubCategory {self.meta_title}>"
