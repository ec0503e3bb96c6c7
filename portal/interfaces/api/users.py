"""User API routes — self-signup, login, me."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from portal.infrastructure.database import get_db
from portal.application.services.auth_service import create_user, issue_user_token, login_user
from portal.application.services.token_codec import TokenCodec
from portal.domain.models.user import ROLE_USER
from portal.domain.principal import AuthContext
from portal.domain.schemas.auth import (
    ClaimsRead,
    LoginRequest,
    SignupRequest,
    UserRead,
    UserTokenResponse,
)
from portal.infrastructure.repositories.credential_repository import SQLAlchemyUserStore
from portal.interfaces.api.deps import authenticate
from portal.interfaces.deps import get_token_codec, get_user_store

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.post("/signup", response_model=UserTokenResponse, status_code=status.HTTP_201_CREATED)
def signup(
    body: SignupRequest,
    db: Session = Depends(get_db),
    codec: TokenCodec = Depends(get_token_codec),
):
    user = create_user(db, name=body.name, email=body.email, password=body.password, role=ROLE_USER)
    return UserTokenResponse(
        message="User created successfully",
        token=issue_user_token(codec, user),
        user=UserRead.model_validate(user),
    )


@router.post("/login", response_model=UserTokenResponse)
def login(
    body: LoginRequest,
    store: SQLAlchemyUserStore = Depends(get_user_store),
    codec: TokenCodec = Depends(get_token_codec),
):
    user = login_user(store, body.email, body.password)
    return UserTokenResponse(
        message="Login successful",
        token=issue_user_token(codec, user),
        user=UserRead.model_validate(user),
    )


@router.get("/me", response_model=ClaimsRead)
def me(context: AuthContext = Depends(authenticate)):
    """Claims of the presented token; no store lookup."""
    claims = context.claims
    return ClaimsRead(
        principal_id=claims.principal_id,
        login_identifier=claims.login_identifier,
        role=claims.role.value,
        issued_at=claims.issued_at,
        expires_at=claims.expires_at,
    )
