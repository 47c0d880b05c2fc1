import logging
from datetime import datetime
from typing import List, Optional

from flask import current_app, g

from taskboard.models.seed import seed_tasks
from taskboard.models.task_model import Task

logger = logging.getLogger(__name__)

STORE_MODES = ("shared", "per_request")


class TaskStore:
    """In-memory task list.

    Lookups are linear scans over insertion order. Not thread-safe.
    """

    def __init__(self, tasks: Optional[List[Task]] = None):
        self._tasks: List[Task] = list(tasks or [])

    @classmethod
    def seeded(cls, now: Optional[datetime] = None) -> "TaskStore":
        return cls(seed_tasks(now))

    def __len__(self) -> int:
        return len(self._tasks)

    def get_all(self) -> List[Task]:
        return list(self._tasks)

    def get_by_id(self, task_id: int) -> Optional[Task]:
        return next((t for t in self._tasks if t.id == task_id), None)

    def contains(self, task_id: int) -> bool:
        return self.get_by_id(task_id) is not None

    def insert(self, task: Task) -> None:
        self._tasks.append(task)

    def remove(self, task: Task) -> None:
        self._tasks.remove(task)

    def replace_fields(self, task_id: int, source: Task) -> Optional[Task]:
        """Copy every field except the id from ``source`` onto the stored task."""
        existing = self.get_by_id(task_id)
        if existing is None:
            return None
        existing.title = source.title
        existing.description = source.description
        existing.deadline = source.deadline
        existing.is_completed = source.is_completed
        existing.priority = source.priority
        existing.tags = list(source.tags)
        return existing

    def update_title(self, task_id: int, title: str) -> Optional[Task]:
        existing = self.get_by_id(task_id)
        if existing is None:
            return None
        existing.title = title
        return existing


def init_app(app) -> None:
    """Attach the task store lifecycle to ``app``.

    In "shared" mode a single seeded store lives for the whole process. In
    "per_request" mode every request gets its own seeded store on ``g``.
    """
    mode = app.config.get("TASK_STORE_MODE", "shared")
    if mode not in STORE_MODES:
        raise ValueError(f"TASK_STORE_MODE must be one of {STORE_MODES}, got {mode!r}")

    if mode == "shared":
        app.extensions["task_store"] = TaskStore.seeded()
        logger.info("Shared task store seeded with %d tasks", len(app.extensions["task_store"]))

    app.teardown_appcontext(close_store)


def get_store() -> TaskStore:
    if current_app.config.get("TASK_STORE_MODE", "shared") == "shared":
        return current_app.extensions["task_store"]
    if "task_store" not in g:
        g.task_store = TaskStore.seeded()
    return g.task_store


def close_store(_=None) -> None:
    g.pop("task_store", None)
