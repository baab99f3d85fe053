"""WSGI entry point, e.g. ``gunicorn tareas_api.wsgi:app``."""

from tareas_api import create_app


app = create_app()
