from datetime import datetime, timedelta

import pytest

from taskboard.app import create_app
from taskboard.models.task_model import Task


@pytest.fixture
def app():
    """A fresh app per test so every test starts from the seed data."""
    app = create_app(TESTING=True)
    yield app


@pytest.fixture
def client(app):
    with app.test_client() as c:
        yield c


@pytest.fixture
def future_deadline():
    return (datetime.now() + timedelta(days=3)).replace(microsecond=0)


@pytest.fixture
def new_task_payload(future_deadline):
    """A valid task body that does not collide with the seed ids."""
    return {
        "id": 11,
        "title": "Renew passport",
        "description": "Book an appointment at the consulate.",
        "deadline": future_deadline.isoformat(),
        "isCompleted": False,
        "priority": 3,
        "tags": ["errands", "travel"],
    }


@pytest.fixture
def make_task(future_deadline):
    def _make(**fields):
        defaults = dict(
            id=1,
            title="Task",
            description="",
            deadline=future_deadline,
            is_completed=False,
            priority=3,
            tags=[],
        )
        defaults.update(fields)
        return Task(**defaults)

    return _make
