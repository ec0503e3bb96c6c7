"""Pydantic schemas for principals and auth."""

from pydantic import BaseModel, Field
from datetime import datetime
from typing import Annotated, Optional

from portal.domain.schemas.common import PrincipalRef

# bcrypt ignores everything past 72 bytes
Password = Annotated[str, Field(min_length=1, max_length=72)]


class SignupRequest(BaseModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    password: Password


class LoginRequest(BaseModel):
    email: str
    password: str


class EmployeeLoginRequest(BaseModel):
    user_id: str
    password: str


class UserRead(BaseModel):
    id: str
    name: str
    email: str
    role: str
    is_active: bool
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class UserStatusUpdate(BaseModel):
    is_active: bool


class EmployeeCreate(BaseModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    user_id: str = Field(min_length=1)
    password: Password


class EmployeeUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = Field(default=None, min_length=3)
    password: Optional[str] = Field(default=None, min_length=1, max_length=72)
    is_active: Optional[bool] = None


class EmployeeRead(BaseModel):
    id: str
    name: str
    email: str
    user_id: str
    is_active: bool
    created_by: Optional[str] = None
    creator: Optional[PrincipalRef] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class TokenResponse(BaseModel):
    message: str
    token: str
    token_type: str = "bearer"


class UserTokenResponse(TokenResponse):
    user: UserRead


class EmployeeTokenResponse(TokenResponse):
    employee: EmployeeRead


class ClaimsRead(BaseModel):
    principal_id: str
    login_identifier: str
    role: str
    issued_at: datetime
    expires_at: datetime
