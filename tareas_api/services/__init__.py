"""Service modules."""

from tareas_api.services.store import (
    InMemoryTaskStore,
    TaskStore,
    get_store,
    init_store,
)


__all__ = ["TaskStore", "InMemoryTaskStore", "init_store", "get_store"]
