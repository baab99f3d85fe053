"""Task CRUD endpoints."""

import logging

from flask import Blueprint, request
from marshmallow import ValidationError

from tareas_api.errors import (
    INVALID_STATUS_FILTER,
    TASK_NOT_FOUND,
    error_response,
    first_error_message,
)
from tareas_api.models import TaskStatus
from tareas_api.schemas import (
    TaskCreateSchema,
    TaskSchema,
    TaskStatusSchema,
    TaskUpdateSchema,
)
from tareas_api.services import get_store
from tareas_api.telemetry import get_meter, get_tracer


logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)
meter = get_meter(__name__)

tasks_created = meter.create_counter(
    name="tasks.created",
    description="Tasks created",
    unit="1",
)

tasks_deleted = meter.create_counter(
    name="tasks.deleted",
    description="Tasks deleted",
    unit="1",
)

tasks_bp = Blueprint("tasks", __name__, url_prefix="/tareas")


def _json_body():
    """Return the request body as parsed JSON.

    Bodies without a JSON content type, or empty ones, read as ``{}``.
    Malformed JSON aborts with 400.
    """
    if not request.is_json or not request.get_data():
        return {}
    return request.get_json()


@tasks_bp.route("", methods=["GET"])
def list_tasks():
    """List all tasks.

    Returns:
        JSON array with every task in creation order.
    """
    return TaskSchema(many=True).jsonify(get_store().list_tasks())


@tasks_bp.route("/titulo/<title>", methods=["GET"])
def get_task_by_title(title: str):
    """Get the first task whose title matches, ignoring case.

    Args:
        title: Task title.

    Returns:
        JSON response with task data.
    """
    task = get_store().find_by_title(title)
    if task is None:
        return error_response(TASK_NOT_FOUND, 404)

    return TaskSchema().jsonify(task)


@tasks_bp.route("/estado/<status>", methods=["GET"])
def list_tasks_by_status(status: str):
    """List tasks with the given status.

    Args:
        status: ``pendiente`` or ``completada``, any case.

    Returns:
        JSON array of matching tasks, possibly empty.
    """
    try:
        wanted = TaskStatus.parse(status)
    except ValueError:
        return error_response(INVALID_STATUS_FILTER, 400)

    return TaskSchema(many=True).jsonify(get_store().filter_by_status(wanted))


@tasks_bp.route("", methods=["POST"])
def create_task():
    """Create a new task.

    Returns:
        JSON response with the created task and its assigned id.
    """
    with tracer.start_as_current_span("task.create") as span:
        try:
            data = TaskCreateSchema().load(_json_body())
        except ValidationError as err:
            span.set_attribute("validation.error", True)
            return error_response(first_error_message(err.messages), 400)

        task = get_store().create(**data)

        span.set_attribute("task.id", task.id)
        tasks_created.add(1, {"status": task.status.value})
        logger.info(f"Task created: {task.id}", extra={"task_id": task.id})

        return TaskSchema().jsonify(task), 201


@tasks_bp.route("/<int:task_id>", methods=["PUT"])
def update_task(task_id: int):
    """Update a task.

    Fields missing from the body keep their current values.

    Args:
        task_id: Task id.

    Returns:
        JSON response with updated task.
    """
    with tracer.start_as_current_span("task.update") as span:
        span.set_attribute("task.id", task_id)
        store = get_store()

        if store.get(task_id) is None:
            return error_response(TASK_NOT_FOUND, 404)

        try:
            data = TaskUpdateSchema().load(_json_body())
        except ValidationError as err:
            span.set_attribute("validation.error", True)
            return error_response(first_error_message(err.messages), 400)

        task = store.update(task_id, **data)
        if task is None:
            return error_response(TASK_NOT_FOUND, 404)

        logger.info(
            f"Task updated: {task_id}",
            extra={"task_id": task_id, "fields": sorted(data)},
        )

        return TaskSchema().jsonify(task)


@tasks_bp.route("/estado/<int:task_id>", methods=["PATCH"])
def update_task_status(task_id: int):
    """Change only the status of a task.

    Args:
        task_id: Task id.

    Returns:
        JSON response with updated task.
    """
    with tracer.start_as_current_span("task.status") as span:
        span.set_attribute("task.id", task_id)
        store = get_store()

        if store.get(task_id) is None:
            return error_response(TASK_NOT_FOUND, 404)

        try:
            data = TaskStatusSchema().load(_json_body())
        except ValidationError as err:
            span.set_attribute("validation.error", True)
            return error_response(first_error_message(err.messages), 400)

        task = store.set_status(task_id, data["status"])
        if task is None:
            return error_response(TASK_NOT_FOUND, 404)

        span.set_attribute("task.status", task.status.value)
        logger.info(
            f"Task status changed: {task_id} -> {task.status.value}",
            extra={"task_id": task_id},
        )

        return TaskSchema().jsonify(task)


@tasks_bp.route("/estado/<task_id>", methods=["PATCH"])
def update_status_of_unknown_task(task_id: str):
    """Answer status updates addressed to a non-integer id with 404."""
    return error_response(TASK_NOT_FOUND, 404)


@tasks_bp.route("/<int:task_id>", methods=["DELETE"])
def delete_task(task_id: int):
    """Delete a task.

    Args:
        task_id: Task id.

    Returns:
        Empty response with 204 status.
    """
    with tracer.start_as_current_span("task.delete") as span:
        span.set_attribute("task.id", task_id)

        if not get_store().delete(task_id):
            return error_response(TASK_NOT_FOUND, 404)

        tasks_deleted.add(1)
        logger.info(f"Task deleted: {task_id}", extra={"task_id": task_id})

        return "", 204
