"""Task-related Marshmallow schemas."""

from marshmallow import EXCLUDE, fields, validate

from tareas_api.errors import (
    INVALID_BODY,
    INVALID_STATUS,
    INVALID_STEPS,
    MISSING_TITLE_OR_DESCRIPTION,
)
from tareas_api.extensions import ma
from tareas_api.models import TaskStatus


class StatusField(fields.Field):
    """Task status, read case-insensitively and written as its wire value."""

    default_error_messages = {
        "invalid": INVALID_STATUS,
        "required": INVALID_STATUS,
        "null": INVALID_STATUS,
    }

    def _serialize(self, value, attr, obj, **kwargs):
        if value is None:
            return None
        return TaskStatus(value).value

    def _deserialize(self, value, attr, data, **kwargs):
        try:
            return TaskStatus.parse(value)
        except ValueError as error:
            raise self.make_error("invalid") from error


def _required_text(message: str, required: bool) -> fields.Str:
    return fields.Str(
        required=required,
        validate=validate.Length(min=1, error=message),
        error_messages={"required": message, "null": message, "invalid": message},
    )


def _steps() -> fields.List:
    return fields.List(
        fields.Str(error_messages={"invalid": INVALID_STEPS}),
        error_messages={"invalid": INVALID_STEPS, "null": INVALID_STEPS},
    )


class _TaskBodySchema(ma.Schema):
    """Base for schemas that load request bodies."""

    error_messages = {"type": INVALID_BODY}

    class Meta:
        unknown = EXCLUDE


class TaskSchema(ma.Schema):
    """Schema for task serialization."""

    id = fields.Int(dump_only=True)
    title = fields.Str(dump_only=True)
    description = fields.Str(dump_only=True)
    status = StatusField(dump_only=True)
    steps = fields.List(fields.Str(), dump_only=True)


class TaskCreateSchema(_TaskBodySchema):
    """Schema for task creation validation."""

    title = _required_text(MISSING_TITLE_OR_DESCRIPTION, required=True)
    description = _required_text(MISSING_TITLE_OR_DESCRIPTION, required=True)
    status = StatusField(load_default=TaskStatus.PENDING)
    steps = _steps()


class TaskUpdateSchema(_TaskBodySchema):
    """Schema for full task update validation.

    Absent fields are left out of the loaded data so the stored values
    are kept.
    """

    title = _required_text("El título no puede estar vacío.", required=False)
    description = _required_text("La descripción no puede estar vacía.", required=False)
    status = StatusField()
    steps = _steps()


class TaskStatusSchema(_TaskBodySchema):
    """Schema for status-only updates."""

    status = StatusField(required=True)
