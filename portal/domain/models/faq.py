"""FAQ entries attached to a sub category."""

from sqlalchemy import Column, Integer, Text, ForeignKey
from sqlalchemy.orm import relationship

from portal.infrastructure.database import Base
from portal.domain.models.audit import AuditMixin


class FAQ(AuditMixin, Base):
    __tablename__ = "faqs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    sub_category_id = Column(Integer, ForeignKey("sub_categories.id"), nullable=False, index=True)
    question = Column(Text, nullable=False)
    answer = Column(Text, nullable=False)
    order = Column(Integer, nullable=False, default=0)

    sub_category = relationship("SubCategory", lazy="joined")

    def __repr__(self):
        return f"<FAQ {self.id} #{self.order}>"
