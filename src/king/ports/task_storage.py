"""Task storage interface."""

from typing import Protocol

from king.core.task_list import TaskList


class TaskStorage(Protocol):
    """Interface for persisting the task list to any backend."""

    def load(self) -> TaskList:
        """Load the saved task list. Missing data loads as an empty list."""
        ...

    def persist_task_list(self, task_list: TaskList) -> None:
        """Save the entire task list. Raises StorageError on failure."""
        ...

    def find(self, keywords: list[str]) -> TaskList:
        """Return the saved tasks matching any of the keywords."""
        ...
