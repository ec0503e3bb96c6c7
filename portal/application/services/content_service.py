"""Content service — shared rules for curated content writes."""

from typing import Any, Dict, Iterable, Optional, Union

import structlog
from pydantic import BaseModel

from portal.core.exceptions import BadRequest, Conflict, EntityNotFound
from portal.domain.models.latest_job import JOB_CATEGORIES
from portal.domain.repositories.content_repository import ContentRepository

logger = structlog.get_logger(__name__)


def get_or_404(repo: ContentRepository, id: int, message: str, active_only: bool = False):
    obj = repo.get_active(id) if active_only else repo.get_by_id(id)
    if obj is None:
        raise EntityNotFound(message)
    return obj


def create_owned(repo: ContentRepository, body: Union[BaseModel, Dict[str, Any]], actor_id: str, **extra: Any):
    """Create a row attributed to ``actor_id``."""
    data = body.model_dump() if isinstance(body, BaseModel) else dict(body)
    data.update(extra)
    data["created_by"] = actor_id
    obj = repo.create(data)
    logger.info("Content created", model=type(obj).__name__, id=obj.id, actor=actor_id)
    return obj


def update_owned(repo: ContentRepository, obj, changes: Dict[str, Any], actor_id: str):
    changes = dict(changes)
    changes["updated_by"] = actor_id
    obj = repo.update(obj, changes)
    logger.info("Content updated", model=type(obj).__name__, id=obj.id, actor=actor_id, fields=sorted(changes))
    return obj


def soft_delete_owned(repo: ContentRepository, obj, actor_id: str):
    obj = repo.soft_delete(obj, actor_id)
    logger.info("Content deactivated", model=type(obj).__name__, id=obj.id, actor=actor_id)
    return obj


def delete_owned(repo: ContentRepository, obj, actor_id: str) -> None:
    """Remove the row for good."""
    id, model = obj.id, type(obj).__name__
    repo.delete(id)
    logger.info("Content deleted", model=model, id=id, actor=actor_id)


def provided_changes(body: BaseModel, obj) -> Dict[str, Any]:
    """Fields the client actually sent (admin edits: explicit values win).

    An explicit ``null`` only clears columns of ``obj`` that allow it; on
    NOT NULL columns it leaves the stored value alone.
    """
    columns = type(obj).__table__.columns
    return {
        k: v
        for k, v in body.model_dump(exclude_unset=True).items()
        if v is not None or (k in columns and columns[k].nullable)
    }


def non_empty_changes(body: BaseModel, keep_falsy: Iterable[str] = ()) -> Dict[str, Any]:
    """Fields the client sent with a non-empty value (employee edits).

    Empty strings and empty lists leave the stored value untouched; names in
    ``keep_falsy`` (e.g. a zero ``order``) are kept whenever they are sent.
    """
    keep = set(keep_falsy)
    return {
        k: v
        for k, v in body.model_dump(exclude_unset=True).items()
        if v is not None and (k in keep or v not in ("", [], {}))
    }


# -- per-type rules -----------------------------------------------------------


def ensure_unique(repo: ContentRepository, message: str, exclude_id: Optional[int] = None, **filters: Any) -> None:
    existing = repo.find_one(**filters)
    if existing is not None and existing.id != exclude_id:
        raise Conflict(message)


def ensure_exists(repo: ContentRepository, id: int, message: str) -> None:
    if repo.get_by_id(id) is None:
        raise BadRequest(message)


def ensure_single_active(repo: ContentRepository, message: str) -> None:
    if repo.find_active() is not None:
        raise BadRequest(message)


def validate_job_category(category: str) -> str:
    if category not in JOB_CATEGORIES:
        raise BadRequest(f"Invalid category. Must be one of: {', '.join(JOB_CATEGORIES)}")
    return category
