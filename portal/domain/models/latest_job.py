"""Latest jobs — job, exam and result announcements."""

from sqlalchemy import Column, Integer, String, Text, JSON

from portal.infrastructure.database import Base
from portal.domain.models.audit import AuditMixin

JOB_CATEGORIES = (
    "Results",
    "AdmitCards",
    "AnswerKey",
    "Syllabus",
    "Admission",
    "Importance",
    "LatestJobs",
)


class LatestJob(AuditMixin, Base):
    __tablename__ = "latest_jobs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    category = Column(String(50), nullable=False, index=True)
    meta_title = Column(String(500), nullable=False)
    meta_description = Column(Text, nullable=False)
    meta_tags = Column(JSON, nullable=False, default=list)
    keywords = Column(JSON, nullable=False, default=list)
    content_title = Column(String(500), nullable=False)
    content_description = Column(Text, nullable=False)

    def __repr__(self):
        return f"<LatestJob {self.category} - {self.meta_title}>"
