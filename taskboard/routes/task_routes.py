from datetime import datetime

from flask import Blueprint, current_app, jsonify, request

from taskboard.errors import ValidationFailure, Violation
from taskboard.models.task_model import Task, parse_datetime
from taskboard.services import task_query
from taskboard.utils.store import get_store
from taskboard.validators.task_validator import ensure_valid, validate_task


tasks_bp = Blueprint("tasks", __name__)


def _task_list(tasks):
    return jsonify([t.to_dict() for t in tasks])


def _no_content():
    return "", 204


def _parse_bool(raw, field):
    value = raw.strip().lower()
    if value == "true":
        return True
    if value == "false":
        return False
    raise ValidationFailure([Violation(field, f"The value '{raw}' is not a valid boolean.")])


def _parse_int(raw, field):
    try:
        return int(raw)
    except ValueError:
        raise ValidationFailure([Violation(field, f"The value '{raw}' is not a valid integer.")]) from None


def _parse_deadline(raw) -> datetime:
    try:
        return parse_datetime(raw)
    except ValueError:
        raise ValidationFailure([Violation("deadline", f"The value '{raw}' is not a valid date.")]) from None


@tasks_bp.get("")
def list_tasks():
    return _task_list(get_store().get_all()), 200


@tasks_bp.get("/<int(signed=True):task_id>")
def get_task(task_id):
    task = get_store().get_by_id(task_id)
    if task is None:
        return _no_content()
    return jsonify(task.to_dict()), 200


@tasks_bp.get("/isCompleted/<value>")
def list_by_completion(value):
    is_completed = _parse_bool(value, "isCompleted")
    return _task_list(task_query.filter_by_completion(get_store().get_all(), is_completed)), 200


@tasks_bp.get("/priority/<value>")
def list_by_priority(value):
    priority = _parse_int(value, "priority")
    return _task_list(task_query.filter_by_priority(get_store().get_all(), priority)), 200


@tasks_bp.get("/sort")
def sort_tasks():
    sort_by = request.args.get("sortBy")
    sort_order = request.args.get("sortOrder")
    return _task_list(task_query.sort_tasks(get_store().get_all(), sort_by, sort_order)), 200


@tasks_bp.get("/filter")
def filter_tasks():
    args = request.args
    # Parse every parameter up front so all bad values are reported together.
    criteria = {}
    problems = []
    for name, key, parse in (
        ("isCompleted", "is_completed", lambda raw: _parse_bool(raw, "isCompleted")),
        ("priority", "priority", lambda raw: _parse_int(raw, "priority")),
        ("deadline", "deadline", _parse_deadline),
    ):
        raw = args.get(name)
        if raw is None or not raw.strip():
            continue
        try:
            criteria[key] = parse(raw)
        except ValidationFailure as exc:
            problems.extend(exc.violations)
    if problems:
        raise ValidationFailure(problems)

    tags = args.getlist("tags") + args.getlist("tags[]")
    tasks = task_query.filter_tasks(get_store().get_all(), tags=tags, **criteria)
    return _task_list(tasks), 200


@tasks_bp.post("")
def create_task():
    task = Task.from_payload(request.get_json(silent=True))
    store = get_store()
    violations = validate_task(task)
    if store.contains(task.id):
        violations.append(Violation("id", "A task with this ID already exists."))
    if violations:
        raise ValidationFailure(violations)

    store.insert(task)
    current_app.logger.info("Created task id=%s title=%r", task.id, task.title)
    if len(store) == 0:
        return _no_content()
    return _task_list(store.get_all()), 201


@tasks_bp.delete("/<int(signed=True):task_id>")
def delete_task(task_id):
    store = get_store()
    task = store.get_by_id(task_id)
    if task is None:
        return _no_content()

    store.remove(task)
    current_app.logger.info("Deleted task id=%s", task_id)
    if len(store) == 0:
        return _no_content()
    return _task_list(store.get_all()), 200


@tasks_bp.put("/<int(signed=True):task_id>")
def replace_task(task_id):
    store = get_store()
    if store.get_by_id(task_id) is None:
        return _no_content()

    incoming = ensure_valid(Task.from_payload(request.get_json(silent=True)))
    updated = store.replace_fields(task_id, incoming)
    current_app.logger.info("Replaced task id=%s", task_id)
    return jsonify(updated.to_dict()), 200


@tasks_bp.patch("/<int(signed=True):task_id>/Title")
@tasks_bp.patch("/<int(signed=True):task_id>/title")
def update_task_title(task_id):
    store = get_store()
    if store.get_by_id(task_id) is None:
        return jsonify(error="Task not found."), 404

    new_title = request.get_json(silent=True)
    if not isinstance(new_title, str):
        raise ValidationFailure([Violation("title", "Request body must be a JSON string.")])

    task = store.update_title(task_id, new_title)
    current_app.logger.info("Renamed task id=%s to %r", task_id, new_title)
    return jsonify(task.to_dict()), 200
