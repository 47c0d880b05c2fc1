from datetime import datetime, timedelta

import pytest

from taskboard.errors import InvalidSortKey, ValidationFailure
from taskboard.models.seed import seed_tasks
from taskboard.services import task_query


NOW = datetime(2030, 6, 1, 9, 30)


@pytest.fixture
def tasks():
    return seed_tasks(NOW)


def ids(tasks):
    return [t.id for t in tasks]


def test_filter_by_completion_partitions_the_set(tasks):
    done = task_query.filter_by_completion(tasks, True)
    todo = task_query.filter_by_completion(tasks, False)
    assert all(t.is_completed for t in done)
    assert not any(t.is_completed for t in todo)
    assert sorted(ids(done) + ids(todo)) == sorted(ids(tasks))
    assert 3 in ids(todo)


def test_filter_by_priority_exact_match(tasks):
    assert ids(task_query.filter_by_priority(tasks, 1)) == [3, 6]
    assert task_query.filter_by_priority(tasks, 9) == []


def test_filter_by_deadline_ignores_time_of_day(tasks):
    day = (NOW + timedelta(days=1)).date()
    assert ids(task_query.filter_by_deadline(tasks, day)) == [3, 6]
    late_same_day = datetime.combine(day, datetime.max.time())
    assert ids(task_query.filter_by_deadline(tasks, late_same_day)) == [3, 6]


def test_filter_by_tags_requires_every_tag(tasks):
    assert ids(task_query.filter_by_tags(tasks, ["home", "groceries"])) == [3]
    assert ids(task_query.filter_by_tags(tasks, ["home"])) == [3, 4, 5]
    assert 3 not in ids(task_query.filter_by_tags(tasks, ["vet"]))
    assert task_query.filter_by_tags(tasks, ["home", "finance"]) == []


def test_filter_tasks_intersects_supplied_criteria(tasks):
    assert ids(task_query.filter_tasks(tasks, is_completed=True, tags=["family"])) == [5, 6]
    assert ids(task_query.filter_tasks(tasks, is_completed=True, priority=1, tags=["family"])) == [6]


def test_filter_tasks_without_criteria_returns_everything(tasks):
    assert ids(task_query.filter_tasks(tasks)) == ids(tasks)
    assert ids(task_query.filter_tasks(tasks, tags=[])) == ids(tasks)


def test_filter_tasks_no_match_is_empty_list(tasks):
    assert task_query.filter_tasks(tasks, priority=5, tags=["bills"]) == []


def test_sort_by_priority_asc_and_desc_are_reversed(tasks):
    asc = [t.priority for t in task_query.sort_tasks(tasks, "priority", "asc")]
    desc = [t.priority for t in task_query.sort_tasks(tasks, "priority", "DESC")]
    assert asc == sorted(asc)
    assert desc == list(reversed(asc))


def test_sort_by_deadline(tasks):
    result = task_query.sort_tasks(tasks, "deadline", "asc")
    deadlines = [t.deadline for t in result]
    assert deadlines == sorted(deadlines)
    assert result[-1].id == 7


def test_sort_unknown_order_falls_back_to_ascending(tasks):
    result = task_query.sort_tasks(tasks, "priority", "sideways")
    assert [t.priority for t in result] == sorted(t.priority for t in tasks)


@pytest.mark.parametrize("sort_by, sort_order", [(None, "asc"), ("priority", None), ("  ", "asc"), ("priority", "")])
def test_sort_blank_parameters_keep_natural_order(tasks, sort_by, sort_order):
    assert ids(task_query.sort_tasks(tasks, sort_by, sort_order)) == ids(tasks)


def test_sort_unknown_key_is_rejected(tasks):
    with pytest.raises(InvalidSortKey) as excinfo:
        task_query.sort_tasks(tasks, "color", "asc")
    assert isinstance(excinfo.value, ValidationFailure)
    assert excinfo.value.violations[0].field == "sortBy"


def test_queries_do_not_mutate_input(tasks):
    before = ids(tasks)
    task_query.sort_tasks(tasks, "priority", "desc")
    task_query.filter_tasks(tasks, is_completed=True)
    assert ids(tasks) == before
