"""Functional core - pure task logic and reply formatting with no I/O."""

from .tasks import (
    Deadline,
    Event,
    Task,
    ToDo,
    mark_done,
    matches_keywords,
    render_task,
    task_from_dict,
    task_to_dict,
)
from .task_list import TaskList
from .formatter import BUFFER, CHAT_WIDTH, border, error_box, wrap_text

__all__ = [
    # Tasks
    "Task",
    "ToDo",
    "Deadline",
    "Event",
    "mark_done",
    "matches_keywords",
    "render_task",
    "task_from_dict",
    "task_to_dict",
    # Task list
    "TaskList",
    # Formatting
    "CHAT_WIDTH",
    "BUFFER",
    "border",
    "error_box",
    "wrap_text",
]
