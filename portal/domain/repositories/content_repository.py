"""
Content Repository Interface.
Read and write operations shared by every curated content type.
"""

from typing import Any, Dict, List, Optional, Protocol, Sequence, TypeVar

from portal.domain.repositories.base import BaseRepository

T = TypeVar("T")


class ContentRepository(BaseRepository[T], Protocol[T]):
    """Interface for soft-deletable, searchable content."""

    def list_active(self, order_by: Optional[Sequence[Any]] = None, **filters: Any) -> List[T]:
        """Active rows matching equality filters."""
        ...

    def get_active(self, id: int) -> Optional[T]:
        """Get a row only if it is still active."""
        ...

    def find_one(self, **filters: Any) -> Optional[T]:
        """First row matching equality filters."""
        ...

    def find_active(self, order_by: Optional[Sequence[Any]] = None, **filters: Any) -> Optional[T]:
        """First active row matching equality filters."""
        ...

    def search(self, term: str, order_by: Optional[Sequence[Any]] = None, **filters: Any) -> List[T]:
        """Active rows whose searchable columns contain ``term``."""
        ...

    def paginate(
        self,
        page: int,
        limit: int,
        term: Optional[str] = None,
        order_by: Optional[Sequence[Any]] = None,
        **filters: Any,
    ) -> Dict[str, Any]:
        """One page of rows plus pagination metadata."""
        ...

    def soft_delete(self, db_obj: T, actor_id: str) -> T:
        """Mark a row inactive on behalf of ``actor_id``."""
        ...
