"""Marshmallow schemas for serialization and validation."""

from tareas_api.schemas.task import (
    StatusField,
    TaskCreateSchema,
    TaskSchema,
    TaskStatusSchema,
    TaskUpdateSchema,
)


__all__ = [
    "StatusField",
    "TaskSchema",
    "TaskCreateSchema",
    "TaskUpdateSchema",
    "TaskStatusSchema",
]
