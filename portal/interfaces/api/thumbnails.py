"""Thumbnail routes — multipart image uploads kept on local disk."""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile, status

from portal.application.services.content_service import (
    create_owned,
    get_or_404,
    soft_delete_owned,
    update_owned,
)
from portal.core.exceptions import BadRequest
from portal.domain.principal import AuthContext
from portal.domain.schemas.thumbnail import ThumbnailPublic, ThumbnailRead
from portal.infrastructure.repositories.content_repository import SQLAlchemyContentRepository
from portal.infrastructure.storage import StoredImage, ThumbnailStorage
from portal.interfaces.api.deps import require_admin
from portal.interfaces.deps import get_thumbnail_repository, get_thumbnail_storage

router = APIRouter(prefix="/api/thumbnails", tags=["Thumbnails"])


def _image_fields(stored: StoredImage) -> dict:
    return {
        "image_url": stored.url,
        "original_file_name": stored.original_name,
        "file_size": stored.size,
        "mime_type": stored.mime_type,
    }


# -- admin ---------------------------------------------------------------------------


@router.post("/admin", status_code=status.HTTP_201_CREATED)
async def create_thumbnail(
    title: str = Form(..., min_length=1),
    description: str = Form(""),
    url: str = Form(""),
    image: Optional[UploadFile] = File(None),
    repo: SQLAlchemyContentRepository = Depends(get_thumbnail_repository),
    storage: ThumbnailStorage = Depends(get_thumbnail_storage),
    context: AuthContext = Depends(require_admin),
):
    if image is None or not image.filename:
        raise BadRequest("Image file is required")

    stored = await storage.save(image)
    data = {"title": title, "description": description, "url": url, **_image_fields(stored)}
    try:
        thumbnail = create_owned(repo, data, context.principal_id)
    except Exception:
        storage.delete(stored.url)
        raise
    return {
        "success": True,
        "message": "Thumbnail created successfully",
        "data": ThumbnailRead.model_validate(thumbnail),
    }


@router.get("/admin")
def list_thumbnails(
    repo: SQLAlchemyContentRepository = Depends(get_thumbnail_repository),
    context: AuthContext = Depends(require_admin),
):
    return {"success": True, "data": [ThumbnailRead.model_validate(t) for t in repo.list_active()]}


@router.get("/admin/{thumbnail_id}")
def get_thumbnail(
    thumbnail_id: int,
    repo: SQLAlchemyContentRepository = Depends(get_thumbnail_repository),
    context: AuthContext = Depends(require_admin),
):
    thumbnail = get_or_404(repo, thumbnail_id, "Thumbnail not found")
    return {"success": True, "data": ThumbnailRead.model_validate(thumbnail)}


@router.put("/admin/{thumbnail_id}")
async def update_thumbnail(
    thumbnail_id: int,
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    url: Optional[str] = Form(None),
    is_active: Optional[bool] = Form(None),
    image: Optional[UploadFile] = File(None),
    repo: SQLAlchemyContentRepository = Depends(get_thumbnail_repository),
    storage: ThumbnailStorage = Depends(get_thumbnail_storage),
    context: AuthContext = Depends(require_admin),
):
    thumbnail = get_or_404(repo, thumbnail_id, "Thumbnail not found")

    changes = {
        k: v
        for k, v in {"title": title, "description": description, "url": url, "is_active": is_active}.items()
        if v is not None
    }
    stored = None
    if image is not None and image.filename:
        stored = await storage.save(image)
        changes.update(_image_fields(stored))

    old_image_url = thumbnail.image_url
    try:
        thumbnail = update_owned(repo, thumbnail, changes, context.principal_id)
    except Exception:
        if stored is not None:
            storage.delete(stored.url)
        raise
    if stored is not None:
        storage.delete(old_image_url)
    return {
        "success": True,
        "message": "Thumbnail updated successfully",
        "data": ThumbnailRead.model_validate(thumbnail),
    }


@router.delete("/admin/{thumbnail_id}")
def delete_thumbnail(
    thumbnail_id: int,
    repo: SQLAlchemyContentRepository = Depends(get_thumbnail_repository),
    storage: ThumbnailStorage = Depends(get_thumbnail_storage),
    context: AuthContext = Depends(require_admin),
):
    thumbnail = get_or_404(repo, thumbnail_id, "Thumbnail not found")
    storage.delete(thumbnail.image_url)
    soft_delete_owned(repo, thumbnail, context.principal_id)
    return {"success": True, "message": "Thumbnail deleted successfully"}


# -- public ----------------------------------------------------------------------------


@router.get("")
def list_public_thumbnails(repo: SQLAlchemyContentRepository = Depends(get_thumbnail_repository)):
    return {"success": True, "data": [ThumbnailPublic.model_validate(t) for t in repo.list_active()]}


@router.get("/search/{query}")
def search_thumbnails(
    query: str,
    repo: SQLAlchemyContentRepository = Depends(get_thumbnail_repository),
):
    return {"success": True, "data": [ThumbnailPublic.model_validate(t) for t in repo.search(query)]}


@router.get("/{thumbnail_id}")
def get_public_thumbnail(
    thumbnail_id: int,
    repo: SQLAlchemyContentRepository = Depends(get_thumbnail_repository),
):
    thumbnail = get_or_404(repo, thumbnail_id, "Thumbnail not found", active_only=True)
    return {"success": True, "data": ThumbnailPublic.model_validate(thumbnail)}
