"""Employee domain model — content editors, maps to the 'employees' table."""

from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from portal.infrastructure.database import Base
from portal.domain.models.user import new_principal_id


class Employee(Base):
    __tablename__ = "employees"

    id = Column(String(32), primary_key=True, default=new_principal_id)
    name = Column(String(200), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    user_id = Column(String(100), unique=True, nullable=False, index=True)  # login identifier
    password_hash = Column(String(255), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    created_by = Column(String(32), ForeignKey("users.id"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    creator = relationship("User", lazy="joined")

    @property
    def login_identifier(self) -> str:
        return self.user_id

    def __repr__(self):
        return f"<Employee {self.user_id}>"
