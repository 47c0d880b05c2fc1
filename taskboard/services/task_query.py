"""Filtering and sorting over task sequences.

Every function returns a new list and never mutates its input. A query with
no matches returns an empty list.
"""

from datetime import date, datetime
from typing import Iterable, List, Optional, Sequence, Union

from taskboard.errors import InvalidSortKey
from taskboard.models.task_model import Task

SORT_KEYS = {
    "deadline": lambda t: t.deadline or datetime.min,
    "priority": lambda t: t.priority,
}


def filter_by_completion(tasks: Iterable[Task], is_completed: bool) -> List[Task]:
    return [t for t in tasks if t.is_completed == is_completed]


def filter_by_priority(tasks: Iterable[Task], priority: int) -> List[Task]:
    return [t for t in tasks if t.priority == priority]


def filter_by_deadline(tasks: Iterable[Task], day: Union[date, datetime]) -> List[Task]:
    """Match on calendar date only; the time of day is ignored."""
    if isinstance(day, datetime):
        day = day.date()
    return [t for t in tasks if t.deadline is not None and t.deadline.date() == day]


def filter_by_tags(tasks: Iterable[Task], tags: Sequence[str]) -> List[Task]:
    """Keep tasks carrying every one of ``tags``."""
    wanted = set(tags)
    return [t for t in tasks if wanted.issubset(t.tags)]


def filter_tasks(
    tasks: Iterable[Task],
    is_completed: Optional[bool] = None,
    priority: Optional[int] = None,
    deadline: Optional[Union[date, datetime]] = None,
    tags: Optional[Sequence[str]] = None,
) -> List[Task]:
    """Narrow ``tasks`` by each supplied criterion in turn."""
    result = list(tasks)
    if is_completed is not None:
        result = filter_by_completion(result, is_completed)
    if priority is not None:
        result = filter_by_priority(result, priority)
    if deadline is not None:
        result = filter_by_deadline(result, deadline)
    if tags:
        result = filter_by_tags(result, tags)
    return result


def sort_tasks(tasks: Iterable[Task], sort_by: Optional[str], sort_order: Optional[str]) -> List[Task]:
    """Sort by "deadline" or "priority".

    A blank key or order leaves the natural order untouched. Any order other
    than "desc" (case-insensitive) sorts ascending.
    """
    result = list(tasks)
    if not sort_by or not sort_by.strip() or not sort_order or not sort_order.strip():
        return result

    key = SORT_KEYS.get(sort_by)
    if key is None:
        raise InvalidSortKey(sort_by)

    return sorted(result, key=key, reverse=sort_order.strip().lower() == "desc")
