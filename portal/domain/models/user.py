"""User domain model — admins and regular users, maps to the 'users' table."""

import uuid

from sqlalchemy import Column, String, Boolean, DateTime
from sqlalchemy.sql import func

from portal.infrastructure.database import Base

ROLE_ADMIN = "admin"
ROLE_USER = "user"
USER_ROLES = (ROLE_ADMIN, ROLE_USER)


def new_principal_id() -> str:
    # Users and employees share one id space so an id resolves in one store only.
    return uuid.uuid4().hex


class User(Base):
    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=new_principal_id)
    name = Column(String(200), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default=ROLE_USER)  # admin, user
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    @property
    def login_identifier(self) -> str:
        return self.email

    def __repr__(self):
        return f"<User {self.email} ({self.role})>"
