"""Pure task domain logic - no I/O dependencies."""

from dataclasses import dataclass
from datetime import datetime

DONE_MARKER = "✓"
NOT_DONE_MARKER = "✗"


@dataclass
class ToDo:
    """A plain task with only a description."""

    description: str
    done: bool = False


@dataclass
class Deadline:
    """A task that must be finished by a point in time."""

    description: str
    by: datetime
    done: bool = False


@dataclass
class Event:
    """A task happening during a free-text time window."""

    description: str
    at: str
    done: bool = False


Task = ToDo | Deadline | Event


def mark_done(task: Task) -> None:
    """Mark a task as done. Marking an already-done task is a no-op."""
    task.done = True


def format_deadline(when: datetime) -> str:
    # strftime has no portable unpadded day
    return f"{when.day} {when.strftime('%b %Y %H:%M')}"


def _status(task: Task) -> str:
    return DONE_MARKER if task.done else NOT_DONE_MARKER


def render_task(task: Task) -> str:
    """
    Single-line rendering used verbatim in replies.

    Format: [type-marker][done-marker] description (+ type-specific suffix)
    Pure function - no I/O.
    """
    match task:
        case ToDo():
            return f"[T][{_status(task)}] {task.description}"
        case Deadline():
            return f"[D][{_status(task)}] {task.description} (by: {format_deadline(task.by)})"
        case Event():
            return f"[E][{_status(task)}] {task.description} (at: {task.at})"
    raise TypeError(f"Not a task: {task!r}")


def matches_keywords(task: Task, keywords: list[str]) -> bool:
    """
    Case-insensitive substring match against the description.

    Keywords are OR-combined; blank keywords are ignored, so an empty
    keyword list matches nothing.
    """
    description = task.description.lower()
    return any(k.lower() in description for k in keywords if k.strip())


def task_to_dict(task: Task) -> dict:
    """Serialize a task for storage."""
    match task:
        case ToDo():
            return {"type": "todo", "description": task.description, "done": task.done}
        case Deadline():
            return {
                "type": "deadline",
                "description": task.description,
                "done": task.done,
                "by": task.by.isoformat(),
            }
        case Event():
            return {
                "type": "event",
                "description": task.description,
                "done": task.done,
                "at": task.at,
            }
    raise TypeError(f"Not a task: {task!r}")


def task_from_dict(data: dict) -> Task:
    """Create a Task from its stored mapping."""
    kind = data.get("type")
    done = bool(data.get("done", False))
    match kind:
        case "todo":
            return ToDo(data["description"], done=done)
        case "deadline":
            return Deadline(data["description"], datetime.fromisoformat(data["by"]), done=done)
        case "event":
            return Event(data["description"], data["at"], done=done)
    raise ValueError(f"Unknown task type: {kind!r}")
