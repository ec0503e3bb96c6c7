"""Latest jobs routes — announcements grouped by category.

Admin routes use the one-step admin gate. Public routes only ever see
active rows.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query, status

from portal.application.services.content_service import (
    create_owned,
    delete_owned,
    get_or_404,
    provided_changes,
    update_owned,
    validate_job_category,
)
from portal.core.exceptions import BadRequest
from portal.domain.models.latest_job import JOB_CATEGORIES
from portal.domain.principal import AuthContext
from portal.domain.schemas.latest_job import (
    LatestJobCreate,
    LatestJobPublic,
    LatestJobRead,
    LatestJobUpdate,
)
from portal.infrastructure.repositories.content_repository import SQLAlchemyContentRepository
from portal.interfaces.api.deps import authenticate_admin
from portal.interfaces.deps import get_latest_job_repository

router = APIRouter(prefix="/api/latest-jobs", tags=["Latest Jobs"])

Page = Annotated[int, Query(ge=1)]
Limit = Annotated[int, Query(ge=1, le=100)]

# public shortcut path -> category
CATEGORY_SHORTCUTS = {
    "results": "Results",
    "admitcards": "AdmitCards",
    "answerkey": "AnswerKey",
    "syllabus": "Syllabus",
    "admission": "Admission",
    "importance": "Importance",
}


def _page(result, schema):
    return {
        "success": True,
        "data": [schema.model_validate(job) for job in result["items"]],
        "pagination": result["pagination"],
    }


def _known_category(category: Optional[str]) -> Optional[str]:
    """Public filters drop unknown categories instead of failing."""
    return category if category in JOB_CATEGORIES else None


# -- admin ---------------------------------------------------------------------------


@router.post("/admin/create", status_code=status.HTTP_201_CREATED)
def create_latest_job(
    body: LatestJobCreate,
    repo: SQLAlchemyContentRepository = Depends(get_latest_job_repository),
    context: AuthContext = Depends(authenticate_admin),
):
    validate_job_category(body.category)
    job = create_owned(repo, body, context.principal_id)
    return {"success": True, "message": "Latest job created successfully", "data": LatestJobRead.model_validate(job)}


@router.get("/admin/all")
def list_latest_jobs(
    page: Page = 1,
    limit: Limit = 10,
    category: Optional[str] = None,
    search: Optional[str] = None,
    repo: SQLAlchemyContentRepository = Depends(get_latest_job_repository),
    context: AuthContext = Depends(authenticate_admin),
):
    result = repo.paginate(page, limit, term=search, active_only=False, category=category or None)
    return _page(result, LatestJobRead)


@router.get("/admin/category/{category}")
def list_latest_jobs_by_category(
    category: str,
    page: Page = 1,
    limit: Limit = 10,
    repo: SQLAlchemyContentRepository = Depends(get_latest_job_repository),
    context: AuthContext = Depends(authenticate_admin),
):
    validate_job_category(category)
    return _page(repo.paginate(page, limit, active_only=False, category=category), LatestJobRead)


@router.get("/admin/{job_id}")
def get_latest_job(
    job_id: int,
    repo: SQLAlchemyContentRepository = Depends(get_latest_job_repository),
    context: AuthContext = Depends(authenticate_admin),
):
    job = get_or_404(repo, job_id, "Latest job not found")
    return {"success": True, "data": LatestJobRead.model_validate(job)}


@router.put("/admin/{job_id}")
def update_latest_job(
    job_id: int,
    body: LatestJobUpdate,
    repo: SQLAlchemyContentRepository = Depends(get_latest_job_repository),
    context: AuthContext = Depends(authenticate_admin),
):
    job = get_or_404(repo, job_id, "Latest job not found")
    changes = provided_changes(body, job)
    if changes.get("category") is not None:
        validate_job_category(changes["category"])

    job = update_owned(repo, job, changes, context.principal_id)
    return {"success": True, "message": "Latest job updated successfully", "data": LatestJobRead.model_validate(job)}


@router.delete("/admin/{job_id}")
def delete_latest_job(
    job_id: int,
    repo: SQLAlchemyContentRepository = Depends(get_latest_job_repository),
    context: AuthContext = Depends(authenticate_admin),
):
    job = get_or_404(repo, job_id, "Latest job not found")
    delete_owned(repo, job, context.principal_id)
    return {"success": True, "message": "Latest job deleted successfully"}


# -- public ----------------------------------------------------------------------------


@router.get("/public/all")
def list_public_latest_jobs(
    page: Page = 1,
    limit: Limit = 10,
    category: Optional[str] = None,
    repo: SQLAlchemyContentRepository = Depends(get_latest_job_repository),
):
    return _page(repo.paginate(page, limit, category=_known_category(category)), LatestJobPublic)


def _shortcut(category: str):
    def list_category(
        page: Page = 1,
        limit: Limit = 10,
        repo: SQLAlchemyContentRepository = Depends(get_latest_job_repository),
    ):
        return _page(repo.paginate(page, limit, category=category), LatestJobPublic)

    list_category.__name__ = f"list_public_{category.lower()}"
    return list_category


# registered ahead of /public/{job_id} so the literal paths win
for _path, _category in CATEGORY_SHORTCUTS.items():
    router.add_api_route(f"/public/{_path}", _shortcut(_category), methods=["GET"])


@router.get("/public/category/{category}")
def list_public_latest_jobs_by_category(
    category: str,
    page: Page = 1,
    limit: Limit = 10,
    repo: SQLAlchemyContentRepository = Depends(get_latest_job_repository),
):
    validate_job_category(category)
    return _page(repo.paginate(page, limit, category=category), LatestJobPublic)


@router.get("/public/search")
def search_latest_jobs(
    q: Optional[str] = None,
    page: Page = 1,
    limit: Limit = 10,
    category: Optional[str] = None,
    repo: SQLAlchemyContentRepository = Depends(get_latest_job_repository),
):
    if not q or not q.strip():
        raise BadRequest("Search query is required")
    result = repo.paginate(page, limit, term=q.strip(), category=_known_category(category))
    return _page(result, LatestJobPublic)


@router.get("/public/{job_id}")
def get_public_latest_job(
    job_id: int,
    repo: SQLAlchemyContentRepository = Depends(get_latest_job_repository),
):
    job = get_or_404(repo, job_id, "Latest job not found", active_only=True)
    return {"success": True, "data": LatestJobPublic.model_validate(job)}
