"""Employee workspace routes.

Employees may read and edit existing categories, top data and FAQs, but
never create or delete them. Edits only overwrite fields sent with a
non-empty value.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from portal.application.services.auth_service import issue_employee_token, login_employee
from portal.application.services.content_service import get_or_404, non_empty_changes, update_owned
from portal.application.services.token_codec import TokenCodec
from portal.domain.principal import AuthContext
from portal.domain.schemas.auth import EmployeeLoginRequest, EmployeeRead, EmployeeTokenResponse
from portal.domain.schemas.category import SubCategoryRead, SubCategoryUpdate
from portal.domain.schemas.faq import FAQRead, FAQUpdate
from portal.domain.schemas.top_data import TopDataRead, TopDataUpdate
from portal.core.exceptions import EntityNotFound
from portal.infrastructure.repositories.content_repository import SQLAlchemyContentRepository
from portal.infrastructure.repositories.credential_repository import SQLAlchemyEmployeeStore
from portal.interfaces.api.deps import authenticate_employee, require_employee
from portal.interfaces.deps import (
    get_employee_store,
    get_faq_repository,
    get_sub_category_repository,
    get_token_codec,
    get_top_data_repository,
)

router = APIRouter(prefix="/api/employee", tags=["Employee"])

# fields only an admin may change
_ADMIN_ONLY = ("is_active", "main_category_id")


def _employee_changes(body: BaseModel, **kwargs: Any) -> Dict[str, Any]:
    changes = non_empty_changes(body, **kwargs)
    for field in _ADMIN_ONLY:
        changes.pop(field, None)
    return changes


@router.post("/login", response_model=EmployeeTokenResponse)
def employee_login(
    body: EmployeeLoginRequest,
    store: SQLAlchemyEmployeeStore = Depends(get_employee_store),
    codec: TokenCodec = Depends(get_token_codec),
):
    employee = login_employee(store, body.user_id, body.password)
    return EmployeeTokenResponse(
        message="Employee login successful",
        token=issue_employee_token(codec, employee),
        employee=EmployeeRead.model_validate(employee),
    )


@router.get("/me")
def employee_profile(
    store: SQLAlchemyEmployeeStore = Depends(get_employee_store),
    context: AuthContext = Depends(authenticate_employee),
):
    employee = store.find_by_id(context.principal_id)
    if employee is None:
        raise EntityNotFound("Employee not found")
    return {"success": True, "data": EmployeeRead.model_validate(employee)}


# -- sub categories ---------------------------------------------------------------


@router.get("/subcategories")
def list_sub_categories(
    repo: SQLAlchemyContentRepository = Depends(get_sub_category_repository),
    context: AuthContext = Depends(require_employee),
):
    return {"success": True, "data": [SubCategoryRead.model_validate(s) for s in repo.list_active()]}


@router.get("/subcategories/{sub_category_id}")
def get_sub_category(
    sub_category_id: int,
    repo: SQLAlchemyContentRepository = Depends(get_sub_category_repository),
    context: AuthContext = Depends(require_employee),
):
    sub_category = get_or_404(repo, sub_category_id, "Sub category not found", active_only=True)
    return {"success": True, "data": SubCategoryRead.model_validate(sub_category)}


@router.put("/subcategories/{sub_category_id}")
def update_sub_category(
    sub_category_id: int,
    body: SubCategoryUpdate,
    repo: SQLAlchemyContentRepository = Depends(get_sub_category_repository),
    context: AuthContext = Depends(require_employee),
):
    sub_category = get_or_404(repo, sub_category_id, "Sub category not found", active_only=True)
    sub_category = update_owned(repo, sub_category, _employee_changes(body), context.principal_id)
    return {
        "success": True,
        "message": "Sub category updated successfully",
        "data": SubCategoryRead.model_validate(sub_category),
    }


# -- top data -----------------------------------------------------------------------


@router.get("/topdata")
def list_top_data(
    repo: SQLAlchemyContentRepository = Depends(get_top_data_repository),
    context: AuthContext = Depends(require_employee),
):
    return {"success": True, "data": [TopDataRead.model_validate(t) for t in repo.list_active()]}


@router.get("/topdata/{top_data_id}")
def get_top_data(
    top_data_id: int,
    repo: SQLAlchemyContentRepository = Depends(get_top_data_repository),
    context: AuthContext = Depends(require_employee),
):
    top_data = get_or_404(repo, top_data_id, "Top data not found", active_only=True)
    return {"success": True, "data": TopDataRead.model_validate(top_data)}


@router.put("/topdata/{top_data_id}")
def update_top_data(
    top_data_id: int,
    body: TopDataUpdate,
    repo: SQLAlchemyContentRepository = Depends(get_top_data_repository),
    context: AuthContext = Depends(require_employee),
):
    top_data = get_or_404(repo, top_data_id, "Top data not found", active_only=True)
    top_data = update_owned(repo, top_data, _employee_changes(body), context.principal_id)
    return {
        "success": True,
        "message": "Top data updated successfully",
        "data": TopDataRead.model_validate(top_data),
    }


# -- FAQs ------------------------------------------------------------------------------


@router.get("/faqs")
def list_faqs(
    repo: SQLAlchemyContentRepository = Depends(get_faq_repository),
    context: AuthContext = Depends(require_employee),
):
    return {"success": True, "data": [FAQRead.model_validate(f) for f in repo.list_active()]}


@router.get("/faqs/subcategory/{sub_category_id}")
def list_faqs_by_sub_category(
    sub_category_id: int,
    repo: SQLAlchemyContentRepository = Depends(get_faq_repository),
    context: AuthContext = Depends(require_employee),
):
    faqs = repo.list_active(sub_category_id=sub_category_id)
    return {"success": True, "data": [FAQRead.model_validate(f) for f in faqs]}


@router.get("/faqs/{faq_id}")
def get_faq(
    faq_id: int,
    repo: SQLAlchemyContentRepository = Depends(get_faq_repository),
    context: AuthContext = Depends(require_employee),
):
    faq = get_or_404(repo, faq_id, "FAQ not found", active_only=True)
    return {"success": True, "data": FAQRead.model_validate(faq)}


@router.put("/faqs/{faq_id}")
def update_faq(
    faq_id: int,
    body: FAQUpdate,
    repo: SQLAlchemyContentRepository = Depends(get_faq_repository),
    context: AuthContext = Depends(require_employee),
):
    faq = get_or_404(repo, faq_id, "FAQ not found", active_only=True)
    faq = update_owned(repo, faq, _employee_changes(body, keep_falsy=("order",)), context.principal_id)
    return {"success": True, "message": "FAQ updated successfully", "data": FAQRead.model_validate(faq)}
