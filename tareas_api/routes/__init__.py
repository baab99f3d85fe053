"""API route blueprints."""

from tareas_api.routes.health import health_bp
from tareas_api.routes.tasks import tasks_bp


__all__ = ["health_bp", "tasks_bp"]
