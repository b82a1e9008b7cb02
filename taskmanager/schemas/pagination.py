"""Generic paginated envelope shared by every list endpoint."""

from typing import Generic, List, TypeVar

from taskmanager.schemas.base import CamelModel

T = TypeVar("T")


class PagedResponse(CamelModel, Generic[T]):
    items: List[T]
    total_count: int
    page_number: int
    page_size: int
    total_pages: int
