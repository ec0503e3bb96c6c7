"""Home content routes — one-step admin gate for writes, public reads."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from portal.application.services.content_service import (
    create_owned,
    delete_owned,
    get_or_404,
    provided_changes,
    update_owned,
)
from portal.core.exceptions import EntityNotFound
from portal.domain.models.home_content import HomeContent
from portal.domain.principal import AuthContext
from portal.domain.schemas.home_content import (
    HomeContentCreate,
    HomeContentPublic,
    HomeContentRead,
    HomeContentUpdate,
)
from portal.infrastructure.repositories.content_repository import SQLAlchemyContentRepository
from portal.interfaces.api.deps import authenticate_admin
from portal.interfaces.deps import get_home_content_repository

router = APIRouter(prefix="/api/home-content", tags=["Home Content"])


# -- public -----------------------------------------------------------------------


@router.get("/public/active")
def get_active_home_content(repo: SQLAlchemyContentRepository = Depends(get_home_content_repository)):
    content = repo.find_active(order_by=(HomeContent.updated_at.desc(), HomeContent.id.desc()))
    if content is None:
        raise EntityNotFound("No active home content found")
    return {"success": True, "data": HomeContentPublic.model_validate(content)}


@router.get("/public/all")
def list_public_home_content(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    repo: SQLAlchemyContentRepository = Depends(get_home_content_repository),
):
    result = repo.paginate(page, limit)
    return {
        "success": True,
        "data": [HomeContentPublic.model_validate(c) for c in result["items"]],
        "pagination": result["pagination"],
    }


# -- admin ---------------------------------------------------------------------------


@router.post("/admin/create", status_code=status.HTTP_201_CREATED)
def create_home_content(
    body: HomeContentCreate,
    repo: SQLAlchemyContentRepository = Depends(get_home_content_repository),
    context: AuthContext = Depends(authenticate_admin),
):
    content = create_owned(repo, body, context.principal_id)
    return {
        "success": True,
        "message": "Home content created successfully",
        "data": HomeContentRead.model_validate(content),
    }


@router.get("/admin/all")
def list_home_content(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    search: Optional[str] = None,
    repo: SQLAlchemyContentRepository = Depends(get_home_content_repository),
    context: AuthContext = Depends(authenticate_admin),
):
    """Every row, inactive ones included."""
    result = repo.paginate(page, limit, term=search, active_only=False)
    return {
        "success": True,
        "data": [HomeContentRead.model_validate(c) for c in result["items"]],
        "pagination": result["pagination"],
    }


@router.get("/admin/{content_id}")
def get_home_content(
    content_id: int,
    repo: SQLAlchemyContentRepository = Depends(get_home_content_repository),
    context: AuthContext = Depends(authenticate_admin),
):
    content = get_or_404(repo, content_id, "Home content not found")
    return {"success": True, "data": HomeContentRead.model_validate(content)}


@router.put("/admin/{content_id}")
def update_home_content(
    content_id: int,
    body: HomeContentUpdate,
    repo: SQLAlchemyContentRepository = Depends(get_home_content_repository),
    context: AuthContext = Depends(authenticate_admin),
):
    content = get_or_404(repo, content_id, "Home content not found")
    content = update_owned(repo, content, provided_changes(body, content), context.principal_id)
    return {
        "success": True,
        "message": "Home content updated successfully",
        "data": HomeContentRead.model_validate(content),
    }


@router.delete("/admin/{content_id}")
def delete_home_content(
    content_id: int,
    repo: SQLAlchemyContentRepository = Depends(get_home_content_repository),
    context: AuthContext = Depends(authenticate_admin),
):
    content = get_or_404(repo, content_id, "Home content not found")
    delete_owned(repo, content, context.principal_id)
    return {"success": True, "message": "Home content deleted successfully"}
