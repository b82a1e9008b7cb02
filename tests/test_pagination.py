from types import SimpleNamespace

import pytest

from taskmanager.schemas.task import TaskResponse
from taskmanager.services.pagination import build_page, normalize_paging, total_pages
from taskmanager.services.progress import compute_progress


def _tasks(completed, total):
    return [SimpleNamespace(is_completed=i < completed) for i in range(total)]


# ========== PROGRESS ==========
def test_progress_without_tasks_is_zero():
    progress = compute_progress([])
    assert progress.total == 0
    assert progress.completed == 0
    assert progress.percentage == 0


@pytest.mark.parametrize("completed,total,expected", [
    (0, 3, 0.0),
    (2, 4, 50.0),
    (1, 3, 33.33),
    (2, 3, 66.67),
    (3, 3, 100.0),
    (1, 8, 12.5),
])
def test_progress_percentage_rounded_to_two_decimals(completed, total, expected):
    progress = compute_progress(_tasks(completed, total))
    assert progress.total == total
    assert progress.completed == completed
    assert progress.percentage == expected


# ========== NORMALIZE PAGING ==========
def test_normalize_paging_keeps_valid_values():
    assert normalize_paging(3, 25) == (3, 25)
    assert normalize_paging(1, 100) == (1, 100)


@pytest.mark.parametrize("page,expected", [(0, 1), (-5, 1), (None, 1)])
def test_normalize_paging_page_floor(page, expected):
    assert normalize_paging(page, 10)[0] == expected


@pytest.mark.parametrize("page_size", [0, -1, 101, 5000, None])
def test_normalize_paging_out_of_range_size_falls_back_to_default(page_size):
    # pas de clamp vers la borne la plus proche : retour à 10
    assert normalize_paging(1, page_size) == (1, 10)


# ========== PAGE MATH ==========
@pytest.mark.parametrize("total,size,expected", [
    (0, 10, 0),
    (1, 10, 1),
    (10, 10, 1),
    (11, 10, 2),
    (25, 5, 5),
])
def test_total_pages(total, size, expected):
    assert total_pages(total, size) == expected


def test_build_page_beyond_last_page_is_empty_but_consistent():
    page = build_page(TaskResponse, [], total_count=12, page=3, page_size=10)
    assert page.items == []
    assert page.total_count == 12
    assert page.total_pages == 2
    assert page.page_number == 3


def test_build_page_serializes_in_camel_case():
    page = build_page(TaskResponse, [], total_count=0, page=1, page_size=10)
    dumped = page.model_dump(by_alias=True)
    assert dumped == {
        "items": [],
        "totalCount": 0,
        "pageNumber": 1,
        "pageSize": 10,
        "totalPages": 0,
    }
