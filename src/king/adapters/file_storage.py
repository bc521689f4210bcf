"""File-based task storage adapter."""

import json
import logging
import os
from pathlib import Path

from king.core.task_list import TaskList
from king.core.tasks import matches_keywords, task_from_dict, task_to_dict
from king.errors import StorageError

logger = logging.getLogger(__name__)


class FileTaskStorage:
    """
    JSON file task storage.

    Implements TaskStorage protocol. The whole list is rewritten on every
    save; the new content goes to a temporary sibling first and is swapped
    in, so a failed write leaves the previous save intact.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def load(self) -> TaskList:
        """Load tasks from disk. Missing file -> empty list."""
        if not self.path.exists():
            logger.debug(f"No task file at {self.path}, starting empty")
            return TaskList()
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            tasks = [task_from_dict(item) for item in data]
        except OSError as e:
            raise StorageError(f"Could not read {self.path}: {e}") from e
        except (json.JSONDecodeError, AttributeError, TypeError, KeyError, ValueError) as e:
            raise StorageError(f"Task file {self.path} is corrupt: {e}") from e
        logger.debug(f"Loaded {len(tasks)} tasks from {self.path}")
        return TaskList(tasks)

    def persist_task_list(self, task_list: TaskList) -> None:
        """Write the entire task list to disk (pretty-printed)."""
        tmp_path = self.path.with_name(f"{self.path.name}.tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(
                json.dumps([task_to_dict(t) for t in task_list], indent=2, ensure_ascii=False),
                encoding="utf-8",
            )
            os.replace(tmp_path, self.path)
        except OSError as e:
            tmp_path.unlink(missing_ok=True)
            logger.error(f"Failed to save tasks to {self.path}: {e}")
            raise StorageError(f"Could not save tasks to {self.path}: {e}") from e
        logger.debug(f"Saved {len(task_list)} tasks to {self.path}")

    def find(self, keywords: list[str]) -> TaskList:
        """Saved tasks whose description contains any keyword (case-insensitive)."""
        return TaskList([t for t in self.load() if matches_keywords(t, keywords)])
