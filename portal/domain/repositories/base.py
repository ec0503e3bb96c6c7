"""
Base Repository Interface.
Row-level reads and writes shared by the credential stores and content repositories.
"""

from typing import Any, Mapping, Optional, Protocol, TypeVar, Union

from pydantic import BaseModel

T = TypeVar("T")

Changes = Union[BaseModel, Mapping[str, Any]]


class BaseRepository(Protocol[T]):
    """Primary-key access plus create/update/delete for one table."""

    def get_by_id(self, id: Any) -> Optional[T]:
        """Row with this primary key, active or not."""
        ...

    def create(self, obj_in: Changes) -> T:
        ...

    def update(self, db_obj: T, obj_in: Changes) -> T:
        """Apply ``obj_in`` field by field; unknown fields are skipped."""
        ...

    def delete(self, id: Any) -> Optional[T]:
        """Hard delete; returns the removed row or None."""
        ...
