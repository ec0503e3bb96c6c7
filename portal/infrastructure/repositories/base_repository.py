"""
SQLAlchemy implementation of the Base Repository.
"""

from typing import Any, Generic, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy.orm import Session

from portal.domain.repositories.base import BaseRepository, Changes
from portal.infrastructure.database import Base

ModelType = TypeVar("ModelType", bound=Base)


def _as_dict(obj_in: Changes) -> dict:
    # schemas only contribute the fields the client actually sent
    if isinstance(obj_in, BaseModel):
        return obj_in.model_dump(exclude_unset=True)
    return dict(obj_in)


class SQLAlchemyRepository(BaseRepository[ModelType], Generic[ModelType]):
    """One model, one session; every write commits and refreshes."""

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def _save(self, db_obj: ModelType) -> ModelType:
        self.db.add(db_obj)
        self.db.commit()
        self.db.refresh(db_obj)
        return db_obj

    def get_by_id(self, id: Any) -> Optional[ModelType]:
        return self.db.get(self.model, id)

    def create(self, obj_in: Changes) -> ModelType:
        return self._save(self.model(**_as_dict(obj_in)))

    def update(self, db_obj: ModelType, obj_in: Changes) -> ModelType:
        for field, value in _as_dict(obj_in).items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)
        return self._save(db_obj)

    def delete(self, id: Any) -> Optional[ModelType]:
        db_obj = self.get_by_id(id)
        if db_obj is not None:
            self.db.delete(db_obj)
            self.db.commit()
        return db_obj
