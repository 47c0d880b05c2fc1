from dataclasses import asdict, dataclass
from typing import Iterable


@dataclass(frozen=True)
class Violation:
    field: str
    message: str

    def to_dict(self) -> dict:
        return asdict(self)


class ValidationFailure(Exception):
    """Request payload or parameters were rejected.

    Carries every violation found so the caller can report them together.
    """

    def __init__(self, violations: Iterable[Violation], message: str = "Validation failed"):
        self.violations = list(violations)
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict:
        return {
            "error": self.message,
            "violations": [v.to_dict() for v in self.violations],
        }


class InvalidSortKey(ValidationFailure):
    def __init__(self, sort_by: str):
        self.sort_by = sort_by
        super().__init__(
            [Violation("sortBy", f"Unknown sort key '{sort_by}'. Use 'deadline' or 'priority'.")],
            message="Invalid sort parameter.",
        )
