"""Error taxonomy for King."""

from enum import Enum


class ErrorKind(Enum):
    """Why a command was rejected."""

    EMPTY_DESCRIPTION = "empty_description"
    BAD_EVENT_SYNTAX = "bad_event_syntax"
    BAD_DEADLINE_SYNTAX = "bad_deadline_syntax"
    BAD_DATE_TIME = "bad_date_time"
    MISSING_NUMBER = "missing_number"
    INVALID_NUMBER = "invalid_number"
    ITEM_NOT_FOUND = "item_not_found"
    BAD_DELETE_SYNTAX = "bad_delete_syntax"
    BAD_DONE_SYNTAX = "bad_done_syntax"
    EMPTY_COMMAND = "empty_command"
    UNKNOWN_COMMAND = "unknown_command"


class KingError(Exception):
    """Base class for errors shown to the user."""

    pass


class ParseError(KingError):
    """Raised when a command is malformed. `kind` says exactly how."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message


class StorageError(KingError):
    """Raised when the task list cannot be loaded or persisted."""

    pass
