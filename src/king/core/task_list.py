"""Ordered, index-addressable task container."""

from typing import Iterator

from .tasks import Task


class TaskList:
    """
    Ordered list of tasks, 0-based.

    Removing a task shifts every later index down by one. Negative indices
    are out of range and never wrap around.
    """

    def __init__(self, tasks: list[Task] | None = None):
        self._tasks: list[Task] = list(tasks) if tasks else []

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._tasks):
            raise IndexError(f"Task index {index} out of range (size {len(self._tasks)})")

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def delete(self, index: int) -> Task:
        """Remove and return the task at index."""
        self._check_index(index)
        return self._tasks.pop(index)

    def clear(self) -> None:
        self._tasks.clear()

    def size(self) -> int:
        return len(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)
