"""
SQLAlchemy implementation of the Content Repository.
"""

from typing import Any, Dict, List, Optional, Sequence, Type

from sqlalchemy import String, cast, or_
from sqlalchemy.orm import Query, Session

from portal.domain.repositories.content_repository import ContentRepository
from portal.infrastructure.repositories.base_repository import ModelType, SQLAlchemyRepository


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so user input is matched literally."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class SQLAlchemyContentRepository(SQLAlchemyRepository[ModelType], ContentRepository[ModelType]):
    """Content repository over one model.

    ``text_fields`` are matched with a case-insensitive substring test;
    ``list_fields`` are JSON arrays matched against their serialized form.
    """

    def __init__(
        self,
        db: Session,
        model: Type[ModelType],
        text_fields: Sequence[str] = (),
        list_fields: Sequence[str] = (),
        default_order: Optional[Sequence[Any]] = None,
    ):
        super().__init__(db, model)
        self.text_fields = tuple(text_fields)
        self.list_fields = tuple(list_fields)
        self.default_order = default_order if default_order is not None else (model.created_at.desc(),)

    # -- query building -----------------------------------------------------

    def _query(self, active_only: bool = True, **filters: Any) -> Query:
        query = self.db.query(self.model)
        if active_only:
            query = query.filter(self.model.is_active.is_(True))
        for field, value in filters.items():
            if value is not None:
                query = query.filter(getattr(self.model, field) == value)
        return query

    def _search_clause(self, term: str):
        pattern = f"%{escape_like(term)}%"
        clauses = [getattr(self.model, f).ilike(pattern, escape="\\") for f in self.text_fields]
        clauses += [
            cast(getattr(self.model, f), String).ilike(pattern, escape="\\") for f in self.list_fields
        ]
        return or_(*clauses)

    def _ordered(self, query: Query, order_by: Optional[Sequence[Any]]) -> Query:
        return query.order_by(*(order_by if order_by is not None else self.default_order))

    # -- reads ----------------------------------------------------------------

    def list_active(self, order_by: Optional[Sequence[Any]] = None, **filters: Any) -> List[ModelType]:
        return self._ordered(self._query(**filters), order_by).all()

    def get_active(self, id: int) -> Optional[ModelType]:
        return self._query(id=id).first()

    def find_one(self, **filters: Any) -> Optional[ModelType]:
        return self._query(active_only=False, **filters).first()

    def find_active(self, order_by: Optional[Sequence[Any]] = None, **filters: Any) -> Optional[ModelType]:
        return self._ordered(self._query(**filters), order_by).first()

    def search(self, term: str, order_by: Optional[Sequence[Any]] = None, **filters: Any) -> List[ModelType]:
        query = self._query(**filters).filter(self._search_clause(term))
        return self._ordered(query, order_by).all()

    def paginate(
        self,
        page: int,
        limit: int,
        term: Optional[str] = None,
        order_by: Optional[Sequence[Any]] = None,
        active_only: bool = True,
        **filters: Any,
    ) -> Dict[str, Any]:
        query = self._query(active_only=active_only, **filters)
        if term:
            query = query.filter(self._search_clause(term))

        total = query.count()
        items = (
            self._ordered(query, order_by)
            .offset((page - 1) * limit)
            .limit(limit)
            .all()
        )
        return {
            "items": items,
            "pagination": {
                "current_page": page,
                "total_pages": (total + limit - 1) // limit,
                "total_items": total,
                "items_per_page": limit,
            },
        }

    # -- writes ---------------------------------------------------------------

    def soft_delete(self, db_obj: ModelType, actor_id: str) -> ModelType:
        return self.update(db_obj, {"is_active": False, "updated_by": actor_id})
