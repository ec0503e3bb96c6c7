"""Auth service — password hashing, signup and login flows."""

from typing import Optional

import structlog
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from portal.application.services.token_codec import TokenCodec
from portal.core.exceptions import Conflict, Forbidden, Unauthorized
from portal.domain.models.employee import Employee
from portal.domain.models.user import ROLE_ADMIN, ROLE_USER, User
from portal.domain.principal import RoleTag

logger = structlog.get_logger(__name__)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def create_user(db: Session, name: str, email: str, password: str, role: str = ROLE_USER) -> User:
    if get_user_by_email(db, email):
        raise Conflict("User with this email already exists")

    user = User(
        name=name,
        email=email,
        password_hash=hash_password(password),
        role=role,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("User created", user_id=user.id, role=role)
    return user


def issue_user_token(codec: TokenCodec, user: User) -> str:
    return codec.issue(user.id, user.email, RoleTag(user.role))


def signup_admin(db: Session, name: str, email: str, password: str, allowed: bool = True) -> User:
    if not allowed:
        raise Forbidden("Admin signup is disabled")
    if get_user_by_email(db, email):
        raise Conflict("Admin with this email already exists")
    return create_user(db, name=name, email=email, password=password, role=ROLE_ADMIN)


def login_user(store, email: str, password: str, require_admin: bool = False) -> User:
    """Check credentials against the user store.

    Unknown email and wrong password answer the same message.
    """
    user = store.find_by_login(email)
    if not user or (require_admin and user.role != ROLE_ADMIN):
        raise Unauthorized("Invalid credentials")
    if not user.is_active:
        raise Unauthorized("Account is deactivated")
    if not store.compare(user, password):
        raise Unauthorized("Invalid credentials")
    return user


def login_employee(store, user_id: str, password: str) -> Employee:
    employee = store.find_by_login(user_id)
    if not employee:
        raise Unauthorized("Invalid credentials")
    if not employee.is_active:
        raise Unauthorized("Account is deactivated")
    if not store.compare(employee, password):
        raise Unauthorized("Invalid credentials")
    return employee


def issue_employee_token(codec: TokenCodec, employee: Employee) -> str:
    return codec.issue(employee.id, employee.user_id, RoleTag.EMPLOYEE)


def create_employee(
    db: Session,
    store,
    name: str,
    email: str,
    user_id: str,
    password: str,
    created_by: str,
) -> Employee:
    if store.find_by_email_or_login(email, user_id):
        raise Conflict("Employee already exists")

    employee = Employee(
        name=name,
        email=email,
        user_id=user_id,
        password_hash=hash_password(password),
        created_by=created_by,
    )
    db.add(employee)
    db.commit()
    db.refresh(employee)
    logger.info("Employee created", employee_id=employee.id, created_by=created_by)
    return employee
