"""Task storage service.

The store is the only owner of task state. Routes talk to the abstract
``TaskStore`` so the in-memory implementation can be replaced by a
persistent one without touching the HTTP layer.
"""

import logging
import threading
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

from flask import Flask, current_app

from tareas_api.models import Task, TaskStatus


logger = logging.getLogger(__name__)

STORE_EXTENSION_KEY = "task_store"

SEED_TASKS: tuple[dict[str, Any], ...] = (
    {
        "title": "Configurar Servidor",
        "description": "Instalar y levantar Express",
        "status": TaskStatus.COMPLETED,
        "steps": ["npm init", "npm install express"],
    },
    {
        "title": "Implementar GET",
        "description": "Crear la ruta para obtener tareas",
        "status": TaskStatus.PENDING,
        "steps": ["app.get('/tareas', ...)"],
    },
    {
        "title": "Probar API",
        "description": "Usar Postman para todas las rutas",
        "status": TaskStatus.PENDING,
        "steps": [],
    },
)

UPDATABLE_FIELDS = frozenset({"title", "description", "status", "steps"})


class TaskStore(ABC):
    """Interface for task storage backends."""

    @abstractmethod
    def list_tasks(self) -> list[Task]:
        """Return all tasks in insertion order."""

    @abstractmethod
    def find_by_title(self, title: str) -> Task | None:
        """Return the first task whose title matches, ignoring case."""

    @abstractmethod
    def filter_by_status(self, status: TaskStatus) -> list[Task]:
        """Return the tasks with the given status."""

    @abstractmethod
    def get(self, task_id: int) -> Task | None:
        """Return the task with the given id, if any."""

    @abstractmethod
    def create(
        self,
        title: str,
        description: str,
        status: TaskStatus = TaskStatus.PENDING,
        steps: Iterable[str] | None = None,
    ) -> Task:
        """Store a new task and return it with its assigned id."""

    @abstractmethod
    def update(self, task_id: int, **changes: Any) -> Task | None:
        """Replace the given fields of a task, keeping the others."""

    @abstractmethod
    def set_status(self, task_id: int, status: TaskStatus) -> Task | None:
        """Change only the status of a task."""

    @abstractmethod
    def delete(self, task_id: int) -> bool:
        """Remove a task. Returns False if it did not exist."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored tasks."""


class InMemoryTaskStore(TaskStore):
    """Process-local task store guarded by a single lock.

    Ids come from a counter that only moves forward, so ids of deleted
    tasks are never handed out again. Tasks leave the store as copies.
    """

    def __init__(self, seed: Iterable[dict[str, Any]] | None = None) -> None:
        self._lock = threading.RLock()
        self._tasks: list[Task] = []
        self._next_id = 1
        for data in seed or ():
            self.create(**data)
        logger.debug("InMemoryTaskStore ready total=%s", len(self._tasks))

    @property
    def next_id(self) -> int:
        with self._lock:
            return self._next_id

    def _find(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def list_tasks(self) -> list[Task]:
        with self._lock:
            return [task.copy() for task in self._tasks]

    def find_by_title(self, title: str) -> Task | None:
        wanted = title.lower()
        with self._lock:
            for task in self._tasks:
                if task.title.lower() == wanted:
                    return task.copy()
        return None

    def filter_by_status(self, status: TaskStatus) -> list[Task]:
        with self._lock:
            return [task.copy() for task in self._tasks if task.status == status]

    def get(self, task_id: int) -> Task | None:
        with self._lock:
            task = self._find(task_id)
            return task.copy() if task else None

    def create(
        self,
        title: str,
        description: str,
        status: TaskStatus = TaskStatus.PENDING,
        steps: Iterable[str] | None = None,
    ) -> Task:
        with self._lock:
            task = Task(
                id=self._next_id,
                title=title,
                description=description,
                status=TaskStatus(status),
                steps=list(steps or []),
            )
            self._next_id += 1
            self._tasks.append(task)
            return task.copy()

    def update(self, task_id: int, **changes: Any) -> Task | None:
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise TypeError(f"Cannot update task fields: {', '.join(sorted(unknown))}")

        with self._lock:
            task = self._find(task_id)
            if task is None:
                return None
            if "title" in changes:
                task.title = changes["title"]
            if "description" in changes:
                task.description = changes["description"]
            if "status" in changes:
                task.status = TaskStatus(changes["status"])
            if "steps" in changes:
                task.steps = list(changes["steps"])
            return task.copy()

    def set_status(self, task_id: int, status: TaskStatus) -> Task | None:
        with self._lock:
            task = self._find(task_id)
            if task is None:
                return None
            task.status = TaskStatus(status)
            return task.copy()

    def delete(self, task_id: int) -> bool:
        with self._lock:
            task = self._find(task_id)
            if task is None:
                return False
            self._tasks.remove(task)
            return True

    def count(self) -> int:
        with self._lock:
            return len(self._tasks)


def init_store(app: Flask, store: TaskStore | None = None) -> TaskStore:
    """Attach a task store to the Flask app.

    Args:
        app: Flask application instance.
        store: Store to attach. Defaults to a fresh InMemoryTaskStore,
            seeded unless SEED_TASKS is disabled.

    Returns:
        The attached store.
    """
    if store is None:
        seed = SEED_TASKS if app.config.get("SEED_TASKS", True) else None
        store = InMemoryTaskStore(seed=seed)
    app.extensions[STORE_EXTENSION_KEY] = store
    return store


def get_store() -> TaskStore:
    """Return the task store of the current app."""
    return current_app.extensions[STORE_EXTENSION_KEY]
