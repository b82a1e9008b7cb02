import math
from typing import List, Optional, Tuple, Type

from taskmanager.core.config import settings
from taskmanager.schemas.pagination import PagedResponse


def normalize_paging(page: Optional[int], page_size: Optional[int]) -> Tuple[int, int]:
    """Clamp paging input instead of rejecting it.

    page < 1 becomes 1; a page size outside [1, MAX_PAGE_SIZE] falls back to
    DEFAULT_PAGE_SIZE (not to the nearest bound).
    """
    if page is None or page < 1:
        page = 1
    if page_size is None or page_size < 1 or page_size > settings.MAX_PAGE_SIZE:
        page_size = settings.DEFAULT_PAGE_SIZE
    return page, page_size


def total_pages(total_count: int, page_size: int) -> int:
    if total_count <= 0:
        return 0
    return math.ceil(total_count / page_size)


def build_page(item_model: Type, items: List, total_count: int, page: int, page_size: int) -> PagedResponse:
    return PagedResponse[item_model](
        items=items,
        total_count=total_count,
        page_number=page,
        page_size=page_size,
        total_pages=total_pages(total_count, page_size),
    )
