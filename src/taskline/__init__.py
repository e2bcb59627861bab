"""taskline - a single-line command interpreter for personal task tracking."""

__version__ = "0.1.0"

from .errors import ErrorCategory, ErrorKind, TasklineError
from .task import Task, TaskKind
from .task_list import TaskList
from .dispatcher import DispatchResult, dispatch

__all__ = [
    "ErrorCategory",
    "ErrorKind",
    "TasklineError",
    "Task",
    "TaskKind",
    "TaskList",
    "DispatchResult",
    "dispatch",
    "__version__",
]
