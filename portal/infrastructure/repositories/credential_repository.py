"""
SQLAlchemy implementations of the two credential stores.
"""

from typing import Optional

from sqlalchemy.orm import Session

from portal.application.services.auth_service import verify_password
from portal.domain.models.employee import Employee
from portal.domain.models.user import User
from portal.domain.principal import PrincipalRecord
from portal.domain.repositories.credential_store import CredentialStore
from portal.infrastructure.repositories.base_repository import SQLAlchemyRepository


class _SQLAlchemyCredentialStore:
    def compare(self, principal: PrincipalRecord, candidate: str) -> bool:
        return verify_password(candidate, principal.password_hash)


class SQLAlchemyUserStore(_SQLAlchemyCredentialStore, SQLAlchemyRepository[User], CredentialStore[User]):
    """User store keyed by email."""

    def __init__(self, db: Session):
        super().__init__(db, User)

    def find_by_id(self, principal_id: str) -> Optional[User]:
        return self.db.get(User, principal_id)

    def find_by_login(self, identifier: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == identifier).first()


class SQLAlchemyEmployeeStore(_SQLAlchemyCredentialStore, SQLAlchemyRepository[Employee], CredentialStore[Employee]):
    """Employee store keyed by the assigned user id."""

    def __init__(self, db: Session):
        super().__init__(db, Employee)

    def find_by_id(self, principal_id: str) -> Optional[Employee]:
        return self.db.get(Employee, principal_id)

    def find_by_login(self, identifier: str) -> Optional[Employee]:
        return self.db.query(Employee).filter(Employee.user_id == identifier).first()

    def find_by_email(self, email: str) -> Optional[Employee]:
        return self.db.query(Employee).filter(Employee.email == email).first()

    def find_by_email_or_login(self, email: str, user_id: str) -> Optional[Employee]:
        return (
            self.db.query(Employee)
            .filter((Employee.email == email) | (Employee.user_id == user_id))
            .first()
        )

    def list_active(self) -> list[Employee]:
        return (
            self.db.query(Employee)
            .filter(Employee.is_active.is_(True))
            .order_by(Employee.created_at.desc())
            .all()
        )
