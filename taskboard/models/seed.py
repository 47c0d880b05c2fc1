from datetime import datetime, timedelta
from typing import List, Optional

from taskboard.models.task_model import Task


# (id, title, description, days until deadline, completed, priority, tags)
SEED_TASKS = [
    (1, "Pay bills", "Pay electricity, water, and internet bills", 5, False, 4, ["finance", "bills"]),
    (
        2,
        "Write API documentation",
        "Write detailed documentation for the RESTful API endpoints",
        2,
        True,
        2,
        ["documentation", "API", "business"],
    ),
    (3, "Buy groceries", "Buy vegan milk, cucumber and cat food.", 1, False, 1, ["groceries", "home"]),
    (4, "Clean the house", "Vacuum, dust and mop.", 4, False, 4, ["cleaning", "home"]),
    (
        5,
        "Take the cat to the vet",
        "Take the cat to the vet and tell her about her recent condition and ask her to check her kidneys.",
        2,
        True,
        5,
        ["vet", "health", "home", "family"],
    ),
    (6, "Call mom", "Call mom to catch up and see how she's doing.", 1, True, 1, ["family", "communication"]),
    (
        7,
        "Have a meeting with the advisor",
        "Have a meeting with the advisor and ask her what you need to do and the documents "
        "you need to submit in order for your graduation to be finalized.",
        8,
        False,
        5,
        ["graduation", "education"],
    ),
    (
        8,
        "Volunteer at shelter",
        "Help out at a local animal shelter for a few hours.",
        3,
        True,
        2,
        ["volunteering", "animals"],
    ),
    (
        9,
        "Add unit tests",
        "Write comprehensive unit tests for the core functionality",
        4,
        False,
        3,
        ["testing", "unit tests", "business"],
    ),
    (
        10,
        "Create monthly budget",
        "Review income and expenses to create a detailed monthly budget for better financial planning.",
        6,
        False,
        2,
        ["finance", "budgeting"],
    ),
]


def seed_tasks(now: Optional[datetime] = None) -> List[Task]:
    """Fresh copies of the seed tasks, deadlines counted from ``now``."""
    now = now or datetime.now()
    return [
        Task(
            id=task_id,
            title=title,
            description=description,
            deadline=now + timedelta(days=days),
            is_completed=completed,
            priority=priority,
            tags=list(tags),
        )
        for task_id, title, description, days, completed, priority, tags in SEED_TASKS
    ]
