"""Domain models."""

from tareas_api.models.task import Task, TaskStatus


__all__ = ["Task", "TaskStatus"]
