from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Optional

from taskboard.errors import ValidationFailure, Violation


@dataclass
class Task:
    id: int
    title: str
    description: str = ""
    deadline: Optional[datetime] = None
    is_completed: bool = False
    priority: int = 0  # 1 (lowest) .. 5 (highest)
    tags: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "deadline": self.deadline.isoformat() if self.deadline else None,
            "isCompleted": self.is_completed,
            "priority": self.priority,
            "tags": list(self.tags),
        }

    @classmethod
    def from_payload(cls, payload: Any) -> "Task":
        """Build a task from a decoded JSON body.

        Missing fields fall back to empty values so the rule set can report
        them. Values of the wrong JSON type are rejected here.
        """
        if not isinstance(payload, dict):
            raise ValidationFailure([Violation("body", "Request body must be a JSON object.")])

        problems = []

        task_id = payload.get("id", 0)
        if not _is_int(task_id):
            problems.append(Violation("id", "ID must be an integer."))

        title = payload.get("title")
        if title is None:
            title = ""
        elif not isinstance(title, str):
            problems.append(Violation("title", "Title must be a string."))

        description = payload.get("description")
        if description is None:
            description = ""
        elif not isinstance(description, str):
            problems.append(Violation("description", "Description must be a string."))

        deadline = None
        raw_deadline = payload.get("deadline")
        if raw_deadline is not None:
            try:
                deadline = parse_datetime(raw_deadline)
            except (TypeError, ValueError):
                problems.append(Violation("deadline", "Deadline must be an ISO-8601 date or date-time."))

        is_completed = payload.get("isCompleted", False)
        if not isinstance(is_completed, bool):
            problems.append(Violation("isCompleted", "This value must be either true or false."))

        priority = payload.get("priority", 0)
        if not _is_int(priority):
            problems.append(Violation("priority", "Priority must be an integer."))

        tags = payload.get("tags")
        if tags is None:
            tags = []
        elif not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
            problems.append(Violation("tags", "Tags must be a list of strings."))

        if problems:
            raise ValidationFailure(problems)

        return cls(
            id=task_id,
            title=title,
            description=description,
            deadline=deadline,
            is_completed=is_completed,
            priority=priority,
            tags=list(tags),
        )


def _is_int(value: Any) -> bool:
    # bool is an int subclass; JSON true/false is never a valid number here
    return isinstance(value, int) and not isinstance(value, bool)


def parse_datetime(raw: Any) -> datetime:
    """Accept "YYYY-MM-DD" or a full ISO timestamp, with or without "Z"."""
    if not isinstance(raw, str):
        raise TypeError("deadline must be a string")
    text = raw.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    # Stored deadlines are naive local times.
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed
