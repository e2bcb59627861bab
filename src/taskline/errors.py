"""Error taxonomy for taskline.

Every recoverable failure is described by one member of ``ErrorKind``. Code
that detects a failure raises ``TasklineError`` carrying the kind; the
dispatcher catches it and hands the kind back to the caller as a plain value.
"""

from enum import Enum
from typing import Optional


class ErrorCategory(Enum):
    """Broad grouping of error kinds."""
    FORMAT = "format"
    TASK_MODIFICATION = "task_modification"
    FILE = "file"


class ErrorKind(Enum):
    """Closed set of failure kinds with their default messages."""

    # Format errors: raised before any mutation
    EMPTY_TITLE = ("empty_title", ErrorCategory.FORMAT,
                   "The title of a task cannot be empty.")
    EMPTY_DATE = ("empty_date", ErrorCategory.FORMAT,
                  "The date of a deadline or event cannot be empty.")
    EMPTY_KEYWORD = ("empty_keyword", ErrorCategory.FORMAT,
                     "Please give me a keyword to search for.")
    UNRECOGNISED_COMMAND = ("unrecognised_command", ErrorCategory.FORMAT,
                            "Sorry, I don't know what that means. Type 'help' to see the commands.")

    # Task modification errors
    TASK_NOT_FOUND = ("task_not_found", ErrorCategory.TASK_MODIFICATION,
                      "There is no task with that number.")
    INVALID_TASK_ID = ("invalid_task_id", ErrorCategory.TASK_MODIFICATION,
                       "A task number must be a whole number.")
    TASK_ALREADY_MARKED = ("task_already_marked", ErrorCategory.TASK_MODIFICATION,
                           "That task is already marked as done.")
    TASK_ALREADY_UNMARKED = ("task_already_unmarked", ErrorCategory.TASK_MODIFICATION,
                             "That task is already marked as not done.")

    # File errors: raised at the storage boundary
    FILE_READ = ("file_read", ErrorCategory.FILE,
                 "Could not read the save-file.")
    FILE_WRITE = ("file_write", ErrorCategory.FILE,
                  "Could not write the save-file.")
    TASK_DECODING = ("task_decoding", ErrorCategory.FILE,
                     "Could not decode a task in the save-file.")

    def __init__(self, code: str, category: ErrorCategory, default_message: str):
        self.code = code
        self.category = category
        self.default_message = default_message


class TasklineError(Exception):
    """Raised for any recoverable failure.

    Attributes:
        kind: The ``ErrorKind`` describing the failure.
        message: Human-readable text, ready to show the user.
    """

    def __init__(self, kind: ErrorKind, message: Optional[str] = None):
        self.kind = kind
        self.message = message or kind.default_message
        super().__init__(self.message)

    @property
    def category(self) -> ErrorCategory:
        return self.kind.category

    def __repr__(self) -> str:
        return f"TasklineError({self.kind.name}, {self.message!r})"


def file_error(kind: ErrorKind, detail: str) -> TasklineError:
    """Build a file error whose message carries the underlying detail."""
    return TasklineError(
        kind, f"Encountered an issue while handling save-file: {kind.default_message} {detail}".rstrip()
    )
