"""FastAPI dependencies — the authorization gate.

Two-step: ``authenticate`` followed by ``require_admin`` / ``require_employee``.
One-step: ``authenticate_admin`` / ``authenticate_employee``.
All four return an :class:`AuthContext`.
"""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from portal.config import Settings, get_settings
from portal.application.services.authorization import (
    ADMIN_POLICY,
    authenticate_token,
    authorize,
    employee_policy,
)
from portal.application.services.token_codec import TokenCodec
from portal.domain.principal import AuthContext
from portal.infrastructure.repositories.credential_repository import (
    SQLAlchemyEmployeeStore,
    SQLAlchemyUserStore,
)
from portal.interfaces.deps import get_employee_store, get_token_codec, get_user_store

# auto_error=False so a missing header reaches the gate and gets our message
bearer_scheme = HTTPBearer(auto_error=False)


def bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    return credentials.credentials if credentials else None


def authenticate(
    token: Optional[str] = Depends(bearer_token),
    codec: TokenCodec = Depends(get_token_codec),
) -> AuthContext:
    """Token presence and validity only."""
    return authenticate_token(codec, token)


def require_admin(
    context: AuthContext = Depends(authenticate),
    users: SQLAlchemyUserStore = Depends(get_user_store),
) -> AuthContext:
    return authorize(context, users, ADMIN_POLICY)


def require_employee(
    context: AuthContext = Depends(authenticate),
    employees: SQLAlchemyEmployeeStore = Depends(get_employee_store),
    settings: Settings = Depends(get_settings),
) -> AuthContext:
    return authorize(context, employees, employee_policy(settings.EMPLOYEE_GATE_CHECKS_ACTIVE))


def authenticate_admin(
    token: Optional[str] = Depends(bearer_token),
    codec: TokenCodec = Depends(get_token_codec),
    users: SQLAlchemyUserStore = Depends(get_user_store),
) -> AuthContext:
    return authorize(authenticate_token(codec, token), users, ADMIN_POLICY)


def authenticate_employee(
    token: Optional[str] = Depends(bearer_token),
    codec: TokenCodec = Depends(get_token_codec),
    employees: SQLAlchemyEmployeeStore = Depends(get_employee_store),
    settings: Settings = Depends(get_settings),
) -> AuthContext:
    return authorize(
        authenticate_token(codec, token),
        employees,
        employee_policy(settings.EMPLOYEE_GATE_CHECKS_ACTIVE),
    )
