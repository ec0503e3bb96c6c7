"""Admin content routes — categories, top data, FAQs, system prompt.

Every route here goes through the two-step gate (``authenticate`` then
``require_admin``) except the two ``/users/...`` reads, which are public.
"""

from fastapi import APIRouter, Depends, status

from portal.application.services.content_service import (
    create_owned,
    ensure_exists,
    ensure_single_active,
    ensure_unique,
    get_or_404,
    provided_changes,
    soft_delete_owned,
    update_owned,
)
from portal.core.exceptions import EntityNotFound
from portal.domain.models.faq import FAQ
from portal.domain.principal import AuthContext
from portal.domain.schemas.category import (
    MainCategoryCreate,
    MainCategoryRead,
    MainCategoryUpdate,
    SubCategoryCreate,
    SubCategoryRead,
    SubCategoryUpdate,
)
from portal.domain.schemas.faq import FAQCreate, FAQRead, FAQUpdate
from portal.domain.schemas.system_prompt import (
    SystemPromptCreate,
    SystemPromptRead,
    SystemPromptUpdate,
)
from portal.domain.schemas.top_data import TopDataCreate, TopDataRead, TopDataUpdate
from portal.infrastructure.repositories.content_repository import SQLAlchemyContentRepository
from portal.interfaces.api.deps import require_admin
from portal.interfaces.deps import (
    get_faq_repository,
    get_main_category_repository,
    get_sub_category_repository,
    get_system_prompt_repository,
    get_top_data_repository,
)

router = APIRouter(prefix="/api/admin", tags=["Admin Content"])


# -- main categories --------------------------------------------------------------


@router.post("/categories/main", status_code=status.HTTP_201_CREATED)
def create_main_category(
    body: MainCategoryCreate,
    repo: SQLAlchemyContentRepository = Depends(get_main_category_repository),
    context: AuthContext = Depends(require_admin),
):
    ensure_unique(repo, "Category already exists", title=body.title)
    category = create_owned(repo, body, context.principal_id)
    return {
        "success": True,
        "message": "Main category created successfully",
        "data": MainCategoryRead.model_validate(category),
    }


@router.get("/categories/main")
def list_main_categories(
    repo: SQLAlchemyContentRepository = Depends(get_main_category_repository),
    context: AuthContext = Depends(require_admin),
):
    return {"success": True, "data": [MainCategoryRead.model_validate(c) for c in repo.list_active()]}


@router.get("/categories/main/{category_id}")
def get_main_category(
    category_id: int,
    repo: SQLAlchemyContentRepository = Depends(get_main_category_repository),
    context: AuthContext = Depends(require_admin),
):
    category = get_or_404(repo, category_id, "Main category not found")
    return {"success": True, "data": MainCategoryRead.model_validate(category)}


@router.put("/categories/main/{category_id}")
def update_main_category(
    category_id: int,
    body: MainCategoryUpdate,
    repo: SQLAlchemyContentRepository = Depends(get_main_category_repository),
    context: AuthContext = Depends(require_admin),
):
    category = get_or_404(repo, category_id, "Main category not found")
    changes = provided_changes(body, category)
    if changes.get("title") and changes["title"] != category.title:
        ensure_unique(repo, "Category with this title already exists", exclude_id=category.id, title=changes["title"])

    category = update_owned(repo, category, changes, context.principal_id)
    return {
        "success": True,
        "message": "Main category updated successfully",
        "data": MainCategoryRead.model_validate(category),
    }


@router.delete("/categories/main/{category_id}")
def delete_main_category(
    category_id: int,
    repo: SQLAlchemyContentRepository = Depends(get_main_category_repository),
    context: AuthContext = Depends(require_admin),
):
    category = get_or_404(repo, category_id, "Main category not found")
    soft_delete_owned(repo, category, context.principal_id)
    return {"success": True, "message": "Main category deleted successfully"}


# -- sub categories -------------------------------------------------------------------


@router.post("/categories/sub", status_code=status.HTTP_201_CREATED)
def create_sub_category(
    body: SubCategoryCreate,
    repo: SQLAlchemyContentRepository = Depends(get_sub_category_repository),
    main_repo: SQLAlchemyContentRepository = Depends(get_main_category_repository),
    context: AuthContext = Depends(require_admin),
):
    ensure_exists(main_repo, body.main_category_id, "Main category not found")
    sub_category = create_owned(repo, body, context.principal_id)
    return {
        "success": True,
        "message": "Sub category created successfully",
        "data": SubCategoryRead.model_validate(sub_category),
    }


@router.get("/categories/sub")
def list_sub_categories(
    repo: SQLAlchemyContentRepository = Depends(get_sub_category_repository),
    context: AuthContext = Depends(require_admin),
):
    return {"success": True, "data": [SubCategoryRead.model_validate(s) for s in repo.list_active()]}


@router.get("/categories/sub/{sub_category_id}")
def get_sub_category(
    sub_category_id: int,
    repo: SQLAlchemyContentRepository = Depends(get_sub_category_repository),
    context: AuthContext = Depends(require_admin),
):
    sub_category = get_or_404(repo, sub_category_id, "Sub category not found")
    return {"success": True, "data": SubCategoryRead.model_validate(sub_category)}


@router.put("/categories/sub/{sub_category_id}")
def update_sub_category(
    sub_category_id: int,
    body: SubCategoryUpdate,
    repo: SQLAlchemyContentRepository = Depends(get_sub_category_repository),
    main_repo: SQLAlchemyContentRepository = Depends(get_main_category_repository),
    context: AuthContext = Depends(require_admin),
):
    sub_category = get_or_404(repo, sub_category_id, "Sub category not found")
    changes = provided_changes(body, sub_category)
    if changes.get("main_category_id") is not None:
        ensure_exists(main_repo, changes["main_category_id"], "Main category not found")

    sub_category = update_owned(repo, sub_category, changes, context.principal_id)
    return {
        "success": True,
        "message": "Sub category updated successfully",
        "data": SubCategoryRead.model_validate(sub_category),
    }


@router.delete("/categories/sub/{sub_category_id}")
def delete_sub_category(
    sub_category_id: int,
    repo: SQLAlchemyContentRepository = Depends(get_sub_category_repository),
    context: AuthContext = Depends(require_admin),
):
    sub_category = get_or_404(repo, sub_category_id, "Sub category not found")
    soft_delete_owned(repo, sub_category, context.principal_id)
    return {"success": True, "message": "Sub category deleted successfully"}


# -- top data ---------------------------------------------------------------------------


@router.post("/topdata", status_code=status.HTTP_201_CREATED)
def create_top_data(
    body: TopDataCreate,
    repo: SQLAlchemyContentRepository = Depends(get_top_data_repository),
    context: AuthContext = Depends(require_admin),
):
    top_data = create_owned(repo, body, context.principal_id)
    return {
        "success": True,
        "message": "Top data created successfully",
        "data": TopDataRead.model_validate(top_data),
    }


@router.get("/topdata")
def list_top_data(
    repo: SQLAlchemyContentRepository = Depends(get_top_data_repository),
    context: AuthContext = Depends(require_admin),
):
    return {"success": True, "data": [TopDataRead.model_validate(t) for t in repo.list_active()]}


@router.get("/users/topdata")
def list_top_data_for_users(repo: SQLAlchemyContentRepository = Depends(get_top_data_repository)):
    return {"success": True, "data": [TopDataRead.model_validate(t) for t in repo.list_active()]}


@router.get("/topdata/{top_data_id}")
def get_top_data(
    top_data_id: int,
    repo: SQLAlchemyContentRepository = Depends(get_top_data_repository),
    context: AuthContext = Depends(require_admin),
):
    top_data = get_or_404(repo, top_data_id, "Top data not found")
    return {"success": True, "data": TopDataRead.model_validate(top_data)}


@router.put("/topdata/{top_data_id}")
def update_top_data(
    top_data_id: int,
    body: TopDataUpdate,
    repo: SQLAlchemyContentRepository = Depends(get_top_data_repository),
    context: AuthContext = Depends(require_admin),
):
    top_data = get_or_404(repo, top_data_id, "Top data not found")
    top_data = update_owned(repo, top_data, provided_changes(body, top_data), context.principal_id)
    return {
        "success": True,
        "message": "Top data updated successfully",
        "data": TopDataRead.model_validate(top_data),
    }


@router.delete("/topdata/{top_data_id}")
def delete_top_data(
    top_data_id: int,
    repo: SQLAlchemyContentRepository = Depends(get_top_data_repository),
    context: AuthContext = Depends(require_admin),
):
    top_data = get_or_404(repo, top_data_id, "Top data not found")
    soft_delete_owned(repo, top_data, context.principal_id)
    return {"success": True, "message": "Top data deleted successfully"}


# -- FAQs -------------------------------------------------------------------------------------


@router.post("/faqs", status_code=status.HTTP_201_CREATED)
def create_faq(
    body: FAQCreate,
    repo: SQLAlchemyContentRepository = Depends(get_faq_repository),
    sub_repo: SQLAlchemyContentRepository = Depends(get_sub_category_repository),
    context: AuthContext = Depends(require_admin),
):
    ensure_exists(sub_repo, body.sub_category_id, "Sub category not found")
    faq = create_owned(repo, body, context.principal_id)
    return {"success": True, "message": "FAQ created successfully", "data": FAQRead.model_validate(faq)}


@router.get("/faqs")
def list_faqs(
    repo: SQLAlchemyContentRepository = Depends(get_faq_repository),
    context: AuthContext = Depends(require_admin),
):
    return {"success": True, "data": [FAQRead.model_validate(f) for f in repo.list_active()]}


@router.get("/faqs/subcategory/{sub_category_id}")
def list_faqs_by_sub_category(
    sub_category_id: int,
    repo: SQLAlchemyContentRepository = Depends(get_faq_repository),
    context: AuthContext = Depends(require_admin),
):
    faqs = repo.list_active(sub_category_id=sub_category_id)
    return {"success": True, "data": [FAQRead.model_validate(f) for f in faqs]}


@router.get("/faqs/{faq_id}")
def get_faq(
    faq_id: int,
    repo: SQLAlchemyContentRepository = Depends(get_faq_repository),
    context: AuthContext = Depends(require_admin),
):
    faq = get_or_404(repo, faq_id, "FAQ not found")
    return {"success": True, "data": FAQRead.model_validate(faq)}


@router.put("/faqs/{faq_id}")
def update_faq(
    faq_id: int,
    body: FAQUpdate,
    repo: SQLAlchemyContentRepository = Depends(get_faq_repository),
    context: AuthContext = Depends(require_admin),
):
    faq: FAQ = get_or_404(repo, faq_id, "FAQ not found")
    faq = update_owned(repo, faq, provided_changes(body, faq), context.principal_id)
    return {"success": True, "message": "FAQ updated successfully", "data": FAQRead.model_validate(faq)}


@router.delete("/faqs/{faq_id}")
def delete_faq(
    faq_id: int,
    repo: SQLAlchemyContentRepository = Depends(get_faq_repository),
    context: AuthContext = Depends(require_admin),
):
    faq = get_or_404(repo, faq_id, "FAQ not found")
    soft_delete_owned(repo, faq, context.principal_id)
    return {"success": True, "message": "FAQ deleted successfully"}


# -- system prompt ------------------------------------------------------------------------------


def _active_prompt(repo: SQLAlchemyContentRepository):
    prompt = repo.find_active()
    if prompt is None:
        raise EntityNotFound("No system prompt found")
    return prompt


@router.post("/system-prompt", status_code=status.HTTP_201_CREATED)
def create_system_prompt(
    body: SystemPromptCreate,
    repo: SQLAlchemyContentRepository = Depends(get_system_prompt_repository),
    context: AuthContext = Depends(require_admin),
):
    ensure_single_active(
        repo,
        "System prompt already exists. Only one system prompt is allowed. "
        "Please update the existing one instead.",
    )
    prompt = create_owned(repo, body, context.principal_id)
    return {
        "success": True,
        "message": "System prompt created successfully",
        "data": SystemPromptRead.model_validate(prompt),
    }


@router.get("/system-prompt")
def get_system_prompt(
    repo: SQLAlchemyContentRepository = Depends(get_system_prompt_repository),
    context: AuthContext = Depends(require_admin),
):
    return {"success": True, "data": SystemPromptRead.model_validate(_active_prompt(repo))}


@router.get("/users/system-prompt")
def get_system_prompt_for_users(repo: SQLAlchemyContentRepository = Depends(get_system_prompt_repository)):
    return {"success": True, "data": SystemPromptRead.model_validate(_active_prompt(repo))}


@router.get("/system-prompt/{prompt_id}")
def get_system_prompt_by_id(
    prompt_id: int,
    repo: SQLAlchemyContentRepository = Depends(get_system_prompt_repository),
    context: AuthContext = Depends(require_admin),
):
    prompt = get_or_404(repo, prompt_id, "System prompt not found")
    return {"success": True, "data": SystemPromptRead.model_validate(prompt)}


@router.put("/system-prompt/{prompt_id}")
def update_system_prompt(
    prompt_id: int,
    body: SystemPromptUpdate,
    repo: SQLAlchemyContentRepository = Depends(get_system_prompt_repository),
    context: AuthContext = Depends(require_admin),
):
    prompt = get_or_404(repo, prompt_id, "System prompt not found")
    changes = provided_changes(body, prompt)
    if changes.get("is_active") and not prompt.is_active:
        ensure_single_active(repo, "Another system prompt is already active")

    prompt = update_owned(repo, prompt, changes, context.principal_id)
    return {
        "success": True,
        "message": "System prompt updated successfully",
        "data": SystemPromptRead.model_validate(prompt),
    }


@router.delete("/system-prompt/{prompt_id}")
def delete_system_prompt(
    prompt_id: int,
    repo: SQLAlchemyContentRepository = Depends(get_system_prompt_repository),
    context: AuthContext = Depends(require_admin),
):
    prompt = get_or_404(repo, prompt_id, "System prompt not found")
    soft_delete_owned(repo, prompt, context.principal_id)
    return {"success": True, "message": "System prompt deleted successfully"}
