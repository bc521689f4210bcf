"""Shared conversation layer between the CLI and Telegram front-ends."""

import logging
from dataclasses import dataclass
from pathlib import Path

from .adapters.file_storage import FileTaskStorage
from .config import Config
from .core.formatter import error_box, welcome
from .errors import ParseError, StorageError
from .parser import CommandParser, is_exit
from .ports.task_storage import TaskStorage

logger = logging.getLogger(__name__)


@dataclass
class Response:
    """Formatted reply plus whether the conversation should end."""

    text: str
    exit: bool = False


class Assistant:
    """
    Owns the task list for the lifetime of a session.

    The list is loaded once from storage; each call to respond() handles
    exactly one command. Not safe for concurrent use.
    """

    def __init__(self, storage: TaskStorage):
        self.storage = storage
        self.task_list = storage.load()
        self.parser = CommandParser(self.task_list, storage)

    def greeting(self) -> str:
        return welcome()

    def respond(self, line: str) -> Response:
        """Run one command and render the reply or the error."""
        try:
            text = self.parser.dispatch(line)
        except ParseError as e:
            logger.info(f"Rejected command ({e.kind.value}): {line!r}")
            return Response(error_box(e.message))
        except StorageError as e:
            logger.info(f"Storage failure while handling {line!r}: {e}")
            return Response(error_box(f"I couldn't save your tasks: {e}"))
        return Response(text, exit=is_exit(line))


def build_assistant(config: Config) -> Assistant:
    """Resolve the task file from config and load the session."""
    return Assistant(FileTaskStorage(Path(config.data_file).expanduser()))
