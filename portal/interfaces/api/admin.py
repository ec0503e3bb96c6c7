"""Admin API routes — admin signup/login, employee and user management."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from portal.config import Settings, get_settings
from portal.infrastructure.database import get_db
from portal.application.services.auth_service import (
    create_employee,
    hash_password,
    issue_user_token,
    login_user,
    signup_admin,
)
from portal.application.services.token_codec import TokenCodec
from portal.core.exceptions import Conflict, EntityNotFound
from portal.domain.principal import AuthContext
from portal.domain.schemas.auth import (
    EmployeeCreate,
    EmployeeRead,
    EmployeeUpdate,
    LoginRequest,
    SignupRequest,
    UserRead,
    UserStatusUpdate,
    UserTokenResponse,
)
from portal.infrastructure.repositories.credential_repository import (
    SQLAlchemyEmployeeStore,
    SQLAlchemyUserStore,
)
from portal.interfaces.api.deps import require_admin
from portal.interfaces.deps import get_employee_store, get_token_codec, get_user_store

router = APIRouter(prefix="/api/admin", tags=["Admin"])


@router.post("/signup", response_model=UserTokenResponse, status_code=status.HTTP_201_CREATED)
def admin_signup(
    body: SignupRequest,
    db: Session = Depends(get_db),
    codec: TokenCodec = Depends(get_token_codec),
    settings: Settings = Depends(get_settings),
):
    admin = signup_admin(
        db,
        name=body.name,
        email=body.email,
        password=body.password,
        allowed=settings.ALLOW_ADMIN_SIGNUP,
    )
    return UserTokenResponse(
        message="Admin created successfully",
        token=issue_user_token(codec, admin),
        user=UserRead.model_validate(admin),
    )


@router.post("/login", response_model=UserTokenResponse)
def admin_login(
    body: LoginRequest,
    store: SQLAlchemyUserStore = Depends(get_user_store),
    codec: TokenCodec = Depends(get_token_codec),
):
    admin = login_user(store, body.email, body.password, require_admin=True)
    return UserTokenResponse(
        message="Admin login successful",
        token=issue_user_token(codec, admin),
        user=UserRead.model_validate(admin),
    )


# -- employees ----------------------------------------------------------------


@router.post("/employees", status_code=status.HTTP_201_CREATED)
def add_employee(
    body: EmployeeCreate,
    db: Session = Depends(get_db),
    store: SQLAlchemyEmployeeStore = Depends(get_employee_store),
    context: AuthContext = Depends(require_admin),
):
    employee = create_employee(
        db,
        store,
        name=body.name,
        email=body.email,
        user_id=body.user_id,
        password=body.password,
        created_by=context.principal_id,
    )
    return {
        "success": True,
        "message": "Employee created successfully",
        "data": EmployeeRead.model_validate(employee),
    }


@router.get("/employees")
def list_employees(
    store: SQLAlchemyEmployeeStore = Depends(get_employee_store),
    context: AuthContext = Depends(require_admin),
):
    return {
        "success": True,
        "data": [EmployeeRead.model_validate(e) for e in store.list_active()],
    }


@router.patch("/employees/{employee_id}")
def update_employee(
    employee_id: str,
    body: EmployeeUpdate,
    store: SQLAlchemyEmployeeStore = Depends(get_employee_store),
    context: AuthContext = Depends(require_admin),
):
    employee = store.find_by_id(employee_id)
    if employee is None:
        raise EntityNotFound("Employee not found")

    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    if "email" in changes and changes["email"] != employee.email:
        other = store.find_by_email(changes["email"])
        if other is not None and other.id != employee.id:
            raise Conflict("Employee with this email already exists")
    if "password" in changes:
        changes["password_hash"] = hash_password(changes.pop("password"))

    employee = store.update(employee, changes)
    return {
        "success": True,
        "message": "Employee updated successfully",
        "data": EmployeeRead.model_validate(employee),
    }


# -- users ----------------------------------------------------------------------


@router.patch("/users/{user_id}/status")
def set_user_status(
    user_id: str,
    body: UserStatusUpdate,
    store: SQLAlchemyUserStore = Depends(get_user_store),
    context: AuthContext = Depends(require_admin),
):
    """Activate or deactivate a user; takes effect on that user's next request."""
    user = store.find_by_id(user_id)
    if user is None:
        raise EntityNotFound("User not found")

    user = store.update(user, {"is_active": body.is_active})
    return {
        "success": True,
        "message": "User activated" if user.is_active else "User deactivated",
        "data": UserRead.model_validate(user),
    }
