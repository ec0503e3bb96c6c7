"""
Shared fixtures: in-memory SQLite database, TestClient, seeded principals.

Environment is set before anything under ``portal`` is imported so the
cached settings and the module-level engine pick it up.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from portal.config import Settings  # noqa: E402

Settings.model_config["env_file"] = None

from portal.application.services.auth_service import (  # noqa: E402
    create_employee,
    create_user,
    issue_employee_token,
    issue_user_token,
)
from portal.application.services.token_codec import TokenCodec  # noqa: E402
from portal.infrastructure.database import Base, get_db  # noqa: E402
from portal.infrastructure.repositories.credential_repository import SQLAlchemyEmployeeStore  # noqa: E402
from portal.main import app  # noqa: E402

TEST_SECRET = "test-secret"

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def _schema():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def codec() -> TokenCodec:
    return TokenCodec(TEST_SECRET)


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin(db):
    return create_user(db, name="Admin", email="a@x.com", password="p1", role="admin")


@pytest.fixture
def admin_headers(admin, codec) -> dict:
    return bearer(issue_user_token(codec, admin))


@pytest.fixture
def employee(db, admin):
    return create_employee(
        db,
        SQLAlchemyEmployeeStore(db),
        name="Emp One",
        email="emp1@x.com",
        user_id="emp1",
        password="p2",
        created_by=admin.id,
    )


@pytest.fixture
def employee_headers(employee, codec) -> dict:
    return bearer(issue_employee_token(codec, employee))
