"""Command parsing - validates user commands and applies them to the task list."""

import logging
import re
from datetime import datetime

from .core import formatter
from .core.task_list import TaskList
from .core.tasks import Deadline, Event, Task, ToDo, mark_done, render_task
from .errors import ErrorKind, ParseError, StorageError
from .ports.task_storage import TaskStorage

logger = logging.getLogger(__name__)

EVENT_SEPARATOR = " /at "
DEADLINE_SEPARATOR = " /by "
DEADLINE_INPUT_FORMAT = "%d/%m/%Y %H%M"
EXIT_KEYWORDS = ("bye", "exit")

_NUMBER_RE = re.compile(r"[+-]?\d+")
_DATETIME_RE = re.compile(r"[0-9]{1,2}/[0-9]{1,2}/[0-9]{4} [0-9]{4}")


def parse_datetime(text: str) -> datetime:
    """Parse `day/month/year hourminute`, e.g. `2/12/2019 1800`."""
    text = text.strip()
    error = ParseError(
        ErrorKind.BAD_DATE_TIME,
        f"I don't understand the date '{text}'. "
        "Use day/month/year time, e.g. 2/12/2019 1800.",
    )
    # strptime alone would read "180" as 18:00
    if not _DATETIME_RE.fullmatch(text):
        raise error
    try:
        return datetime.strptime(text, DEADLINE_INPUT_FORMAT)
    except ValueError as e:
        raise error from e


def is_exit(line: str) -> bool:
    """True if the line ends the conversation."""
    return line.strip().lower() in EXIT_KEYWORDS


class CommandParser:
    """
    Applies one command at a time to a borrowed task list.

    Every mutating command validates first, then mutates, then persists the
    whole list before formatting the reply. A failed save does NOT roll the
    in-memory change back, so memory and disk can disagree until the next
    successful save.
    """

    def __init__(self, task_list: TaskList, storage: TaskStorage):
        self.task_list = task_list
        self.storage = storage

    def dispatch(self, line: str) -> str:
        """Route a raw input line to the operation named by its first word."""
        parts = line.split(maxsplit=1)
        keyword = parts[0].lower() if parts else ""
        args = parts[1] if len(parts) > 1 else ""

        match keyword:
            case "":
                raise ParseError(ErrorKind.EMPTY_COMMAND, "Please type a command.")
            case "bye" | "exit":
                return self.parse_bye()
            case "list":
                return self.parse_list()
            case "clear":
                if args.strip().lower() not in ("", "list"):
                    raise ParseError(
                        ErrorKind.UNKNOWN_COMMAND,
                        f"Did you mean 'clear'? I don't know 'clear {args.strip()}'.",
                    )
                return self.parse_clear()
            case "todo":
                return self.parse_todo(args)
            case "event":
                return self.parse_event(args)
            case "deadline":
                return self.parse_deadline(args)
            case "delete":
                return self.parse_delete(args)
            case "done":
                return self.parse_done(args)
            case "find":
                return self.parse_find(args)
        raise ParseError(
            ErrorKind.UNKNOWN_COMMAND, f"Sorry, I don't know what '{keyword}' means."
        )

    def parse_bye(self) -> str:
        return formatter.farewell()

    def parse_clear(self) -> str:
        """Empty the list and save it."""
        self.task_list.clear()
        self._persist("clear")
        return formatter.chat_box("I have cleared the list!")

    def parse_list(self) -> str:
        return formatter.task_list_reply(render_task(t) for t in self.task_list)

    def parse_todo(self, args: str) -> str:
        description = args.strip()
        if not description:
            raise ParseError(
                ErrorKind.EMPTY_DESCRIPTION, "The description of a todo cannot be empty."
            )
        return self._add(ToDo(description))

    def parse_event(self, args: str) -> str:
        """`<description> /at <window>`"""
        tokens = args.strip().split(EVENT_SEPARATOR)
        if len(tokens) != 2:
            raise ParseError(
                ErrorKind.BAD_EVENT_SYNTAX,
                "An event needs exactly one '/at', e.g. event party /at Sat 2-4pm.",
            )
        description, window = (t.strip() for t in tokens)
        if not description:
            raise ParseError(
                ErrorKind.EMPTY_DESCRIPTION, "The description of an event cannot be empty."
            )
        return self._add(Event(description, window))

    def parse_deadline(self, args: str) -> str:
        """`<description> /by <d/m/yyyy HHMM>`"""
        tokens = args.strip().split(DEADLINE_SEPARATOR)
        if len(tokens) != 2:
            raise ParseError(
                ErrorKind.BAD_DEADLINE_SYNTAX,
                "A deadline needs exactly one '/by', e.g. deadline essay /by 2/12/2019 1800.",
            )
        description = tokens[0].strip()
        if not description:
            raise ParseError(
                ErrorKind.EMPTY_DESCRIPTION, "The description of a deadline cannot be empty."
            )
        return self._add(Deadline(description, parse_datetime(tokens[1])))

    def parse_delete(self, args: str) -> str:
        index = self._parse_index(args, "delete")
        try:
            task = self.task_list.delete(index)
        except IndexError as e:
            raise ParseError(ErrorKind.BAD_DELETE_SYNTAX, f"Could not delete item {args.strip()}.") from e
        self._persist("delete")
        return formatter.delete_item_reply(render_task(task), self.task_list.size())

    def parse_done(self, args: str) -> str:
        """Mark a task done. Repeating it on a done task is harmless."""
        index = self._parse_index(args, "done")
        try:
            task = self.task_list.get(index)
        except IndexError as e:
            raise ParseError(ErrorKind.BAD_DONE_SYNTAX, f"Could not mark item {args.strip()} as done.") from e
        mark_done(task)
        self._persist("done")
        return formatter.done_reply(render_task(task))

    def parse_find(self, args: str) -> str:
        keywords = args.split()
        return formatter.found_items_reply(render_task(t) for t in self.storage.find(keywords))

    def _add(self, task: Task) -> str:
        self.task_list.add(task)
        self._persist("add")
        return formatter.add_item_reply(render_task(task), self.task_list.size())

    def _parse_index(self, args: str, command: str) -> int:
        """
        Turn a 1-based item number into a valid 0-based index.

        Checked in order: missing number, non-numeric number, then
        out-of-range number.
        """
        text = args.strip()
        if not text:
            raise ParseError(
                ErrorKind.MISSING_NUMBER, f"'{command}' must be followed by an item number."
            )
        if not _NUMBER_RE.fullmatch(text):
            raise ParseError(ErrorKind.INVALID_NUMBER, f"'{text}' is not a valid item number.")

        index = int(text) - 1
        if not 0 <= index < self.task_list.size():
            raise ParseError(ErrorKind.ITEM_NOT_FOUND, f"There is no item number {text}.")
        return index

    def _persist(self, action: str) -> None:
        try:
            self.storage.persist_task_list(self.task_list)
        except StorageError:
            # in-memory list is not rolled back
            logger.error(f"'{action}' applied in memory but not saved")
            raise
        logger.debug(f"'{action}' saved, {self.task_list.size()} tasks")
