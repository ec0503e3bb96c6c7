"""
Authorization gate — the checks every protected route goes through.

1. token presence   -> TokenRequired
2. token validity   -> InvalidToken
3. admin path       -> AdminRequired
4. employee path    -> EmployeeRequired

Checks 3 and 4 are two instances of :func:`authorize`, which resolves the
token's principal in one credential store and applies a policy to the row.
A lookup that raises is reported as StoreUnavailable and never retried.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Type

import structlog
from sqlalchemy.exc import SQLAlchemyError

from portal.application.services.token_codec import Expired, TokenCodec, TokenError
from portal.core.exceptions import (
    AdminRequired,
    AppError,
    EmployeeRequired,
    InvalidToken,
    StoreUnavailable,
    TokenRequired,
)
from portal.domain.models.user import ROLE_ADMIN
from portal.domain.principal import AuthContext, Capability, PrincipalRecord, TokenClaims
from portal.domain.repositories.credential_store import CredentialStore

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class GatePolicy:
    capability: Capability
    admits: Callable[[PrincipalRecord], bool]
    failure: Type[AppError]


def _is_active_admin(user) -> bool:
    return bool(user.is_active) and user.role == ROLE_ADMIN


ADMIN_POLICY = GatePolicy(Capability.HAS_ROLE_ADMIN, _is_active_admin, AdminRequired)


def employee_policy(check_active: bool = False) -> GatePolicy:
    """Policy for the employee store.

    By default any row in the store is admitted, active or not. Whether
    deactivated employees should be locked out is still an open product
    decision; ``check_active`` switches it on.
    """
    if check_active:
        return GatePolicy(Capability.IS_EMPLOYEE, lambda e: bool(e.is_active), EmployeeRequired)
    return GatePolicy(Capability.IS_EMPLOYEE, lambda e: True, EmployeeRequired)


def require_token(token: Optional[str]) -> str:
    if not token:
        logger.info("Gate rejected request", reason="token_missing")
        raise TokenRequired()
    return token


def verify_token(codec: TokenCodec, token: str) -> TokenClaims:
    try:
        return codec.verify(token)
    except TokenError as exc:
        logger.info(
            "Gate rejected request",
            reason="token_expired" if isinstance(exc, Expired) else "token_invalid",
            detail=str(exc),
        )
        raise InvalidToken() from exc


def authenticate_token(codec: TokenCodec, token: Optional[str]) -> AuthContext:
    """Checks 1 and 2."""
    return AuthContext(claims=verify_token(codec, require_token(token)))


def authorize(context: AuthContext, store: CredentialStore, policy: GatePolicy) -> AuthContext:
    """Resolve the principal in ``store`` and apply ``policy`` (checks 3/4)."""
    try:
        record = store.find_by_id(context.principal_id)
    except SQLAlchemyError as exc:
        logger.exception(
            "Credential store lookup failed",
            capability=policy.capability.value,
            principal_id=context.principal_id,
        )
        raise StoreUnavailable() from exc

    if record is None or not policy.admits(record):
        logger.info(
            "Gate rejected request",
            reason="principal_missing" if record is None else "policy_denied",
            capability=policy.capability.value,
            principal_id=context.principal_id,
            token_role=context.role.value,
        )
        raise policy.failure()

    return AuthContext(claims=context.claims, capability=policy.capability)
