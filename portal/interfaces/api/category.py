"""Public category API — read-only views of active content, no token needed."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from portal.application.services.content_service import get_or_404
from portal.domain.schemas.category import MainCategoryRef, SubCategoryPublic
from portal.domain.schemas.faq import FAQPublic
from portal.domain.schemas.top_data import TopDataPublic
from portal.infrastructure.repositories.content_repository import SQLAlchemyContentRepository
from portal.interfaces.deps import (
    get_faq_repository,
    get_main_category_repository,
    get_sub_category_repository,
    get_top_data_repository,
)

router = APIRouter(prefix="/api/category", tags=["Category"])

SearchTerm = Annotated[str, Query(min_length=1)]


@router.get("/main")
def list_main_categories(repo: SQLAlchemyContentRepository = Depends(get_main_category_repository)):
    return {"success": True, "data": [MainCategoryRef.model_validate(c) for c in repo.list_active()]}


@router.get("/main/{category_id}")
def get_main_category(
    category_id: int,
    repo: SQLAlchemyContentRepository = Depends(get_main_category_repository),
):
    category = get_or_404(repo, category_id, "Main category not found", active_only=True)
    return {"success": True, "data": MainCategoryRef.model_validate(category)}


# -- sub categories -------------------------------------------------------------


@router.get("/sub")
def list_sub_categories(repo: SQLAlchemyContentRepository = Depends(get_sub_category_repository)):
    return {"success": True, "data": [SubCategoryPublic.model_validate(s) for s in repo.list_active()]}


@router.get("/sub/search")
def search_sub_categories(
    q: SearchTerm,
    repo: SQLAlchemyContentRepository = Depends(get_sub_category_repository),
):
    return {"success": True, "data": [SubCategoryPublic.model_validate(s) for s in repo.search(q)]}


@router.get("/sub/main/{main_category_id}")
def list_sub_categories_by_main(
    main_category_id: int,
    repo: SQLAlchemyContentRepository = Depends(get_sub_category_repository),
):
    items = repo.list_active(main_category_id=main_category_id)
    return {"success": True, "data": [SubCategoryPublic.model_validate(s) for s in items]}


@router.get("/sub/{sub_category_id}")
def get_sub_category(
    sub_category_id: int,
    repo: SQLAlchemyContentRepository = Depends(get_sub_category_repository),
):
    sub_category = get_or_404(repo, sub_category_id, "Sub category not found", active_only=True)
    return {"success": True, "data": SubCategoryPublic.model_validate(sub_category)}


# -- top data -----------------------------------------------------------------------


@router.get("/topdata")
def list_top_data(repo: SQLAlchemyContentRepository = Depends(get_top_data_repository)):
    return {"success": True, "data": [TopDataPublic.model_validate(t) for t in repo.list_active()]}


@router.get("/topdata/search")
def search_top_data(
    q: SearchTerm,
    repo: SQLAlchemyContentRepository = Depends(get_top_data_repository),
):
    return {"success": True, "data": [TopDataPublic.model_validate(t) for t in repo.search(q)]}


@router.get("/topdata/{top_data_id}")
def get_top_data(
    top_data_id: int,
    repo: SQLAlchemyContentRepository = Depends(get_top_data_repository),
):
    top_data = get_or_404(repo, top_data_id, "Top data not found", active_only=True)
    return {"success": True, "data": TopDataPublic.model_validate(top_data)}


# -- FAQs ------------------------------------------------------------------------------


@router.get("/faqs")
def list_faqs(repo: SQLAlchemyContentRepository = Depends(get_faq_repository)):
    return {"success": True, "data": [FAQPublic.model_validate(f) for f in repo.list_active()]}


@router.get("/faqs/search")
def search_faqs(
    q: SearchTerm,
    repo: SQLAlchemyContentRepository = Depends(get_faq_repository),
):
    return {"success": True, "data": [FAQPublic.model_validate(f) for f in repo.search(q)]}


@router.get("/faqs/subcategory/{sub_category_id}")
def list_faqs_by_sub_category(
    sub_category_id: int,
    repo: SQLAlchemyContentRepository = Depends(get_faq_repository),
):
    faqs = repo.list_active(sub_category_id=sub_category_id)
    return {"success": True, "data": [FAQPublic.model_validate(f) for f in faqs]}


@router.get("/faqs/{faq_id}")
def get_faq(
    faq_id: int,
    repo: SQLAlchemyContentRepository = Depends(get_faq_repository),
):
    faq = get_or_404(repo, faq_id, "FAQ not found", active_only=True)
    return {"success": True, "data": FAQPublic.model_validate(faq)}
