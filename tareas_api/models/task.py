"""Task model."""

from dataclasses import dataclass, field
from enum import Enum


class TaskStatus(str, Enum):
    """Task lifecycle status.

    Values are the wire representation used by the HTTP API.
    """

    PENDING = "pendiente"
    COMPLETED = "completada"

    @classmethod
    def parse(cls, raw: str) -> "TaskStatus":
        """Parse a status case-insensitively.

        Args:
            raw: Status as received from a client.

        Returns:
            The matching TaskStatus.

        Raises:
            ValueError: If raw is not a known status.
        """
        if not isinstance(raw, str):
            raise ValueError(f"Invalid status: {raw!r}")
        return cls(raw.lower())

    @classmethod
    def choices(cls) -> list[str]:
        return [status.value for status in cls]


@dataclass
class Task:
    """A single task record."""

    id: int
    title: str
    description: str
    status: TaskStatus = TaskStatus.PENDING
    steps: list[str] = field(default_factory=list)

    def copy(self) -> "Task":
        """Return a detached copy, steps included."""
        return Task(
            id=self.id,
            title=self.title,
            description=self.description,
            status=self.status,
            steps=list(self.steps),
        )

    def __repr__(self) -> str:
        return f"<Task {self.id} {self.status.value}>"
