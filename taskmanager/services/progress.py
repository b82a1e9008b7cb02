"""Derived project progress. Never stored, always computed from the loaded tasks."""

from typing import Iterable, NamedTuple


class Progress(NamedTuple):
    total: int
    completed: int
    percentage: float


def compute_progress(tasks: Iterable) -> Progress:
    tasks = list(tasks)
    total = len(tasks)
    if total == 0:
        return Progress(0, 0, 0.0)
    completed = sum(1 for task in tasks if task.is_completed)
    return Progress(total, completed, round(completed / total * 100, 2))
