"""
Principal types shared by the token codec and the authorization gate.

A principal lives in one of two credential stores. The store it lives in
decides what it may do:

* ``User`` rows carry a role (``admin`` or ``user``); only active admins pass
  the admin gate.
* ``Employee`` rows carry no role; being present in the store is the
  employee capability.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Protocol


class RoleTag(str, Enum):
    """Privilege label embedded in a token."""

    ADMIN = "admin"
    USER = "user"
    EMPLOYEE = "employee"


class Capability(str, Enum):
    HAS_ROLE_ADMIN = "has_role_admin"
    IS_EMPLOYEE = "is_employee"


@dataclass(frozen=True)
class TokenClaims:
    principal_id: str
    login_identifier: str
    role: RoleTag
    issued_at: datetime
    expires_at: datetime


@dataclass(frozen=True)
class AuthContext:
    """What the gate hands to a handler once a request is admitted.

    ``principal_id`` is the only field a handler may use for created-by and
    updated-by attribution.
    """

    claims: TokenClaims
    capability: Optional[Capability] = None

    @property
    def principal_id(self) -> str:
        return self.claims.principal_id

    @property
    def role(self) -> RoleTag:
        return self.claims.role


class PrincipalRecord(Protocol):
    id: str
    is_active: bool
    password_hash: str

    @property
    def login_identifier(self) -> str:
        ...
