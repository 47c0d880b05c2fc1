from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Iterable, List, Optional

from taskboard.errors import ValidationFailure, Violation
from taskboard.models.task_model import Task

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500
TAG_MAX_LENGTH = 30
PRIORITY_MIN, PRIORITY_MAX = 1, 5


@dataclass(frozen=True)
class Rule:
    """A predicate over one attribute of the validated object.

    ``attr`` is the attribute read from the object; ``field`` is the name
    reported back to the client.
    """

    field: str
    attr: str
    check: Callable[[Any], bool]
    message: str

    def apply(self, obj: Any) -> Optional[Violation]:
        if self.check(getattr(obj, self.attr)):
            return None
        return Violation(self.field, self.message)


class RuleSet:
    """Runs every rule and collects all violations, in rule order."""

    def __init__(self, rules: Iterable[Rule]):
        self.rules = list(rules)

    def validate(self, obj: Any) -> List[Violation]:
        return [v for v in (rule.apply(obj) for rule in self.rules) if v is not None]


def task_rules(today: Optional[date] = None) -> RuleSet:
    """Field rules for a task payload; ``today`` bounds the deadline."""
    today = today or date.today()
    return RuleSet(
        [
            Rule("id", "id", lambda v: bool(v), "ID is required."),
            Rule("id", "id", lambda v: v > 0, "ID must be greater than 0."),
            Rule("title", "title", lambda v: bool(v and v.strip()), "Please provide the title of the task."),
            Rule(
                "title",
                "title",
                lambda v: len(v) <= TITLE_MAX_LENGTH,
                f"Title must be a maximum of {TITLE_MAX_LENGTH} characters.",
            ),
            Rule(
                "description",
                "description",
                lambda v: len(v or "") <= DESCRIPTION_MAX_LENGTH,
                f"Description must not exceed {DESCRIPTION_MAX_LENGTH} characters.",
            ),
            Rule(
                "deadline",
                "deadline",
                lambda v: v is not None and v.date() >= today,
                "Deadline must be today or a future date.",
            ),
            Rule(
                "isCompleted",
                "is_completed",
                lambda v: isinstance(v, bool),
                "This value must be either true or false.",
            ),
            Rule(
                "priority",
                "priority",
                lambda v: PRIORITY_MIN <= v <= PRIORITY_MAX,
                f"Please prioritize the task with a number from {PRIORITY_MIN} to {PRIORITY_MAX}.",
            ),
            Rule(
                "tags",
                "tags",
                lambda v: all(len(tag) <= TAG_MAX_LENGTH for tag in v),
                f"Each tag must not exceed {TAG_MAX_LENGTH} characters.",
            ),
        ]
    )


def validate_task(task: Task, today: Optional[date] = None) -> List[Violation]:
    return task_rules(today).validate(task)


def ensure_valid(task: Task, today: Optional[date] = None) -> Task:
    """Return ``task`` unchanged or raise ValidationFailure with every violation."""
    violations = validate_task(task, today)
    if violations:
        raise ValidationFailure(violations)
    return task
