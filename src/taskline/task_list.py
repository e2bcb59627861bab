"""The session's ordered task collection and its validated operations."""

import logging
import re
from typing import Iterator, List, Optional, Sequence

from .errors import ErrorKind, TasklineError
from .storage import Storage, TaskFileFormat
from .task import Task


logger = logging.getLogger(__name__)

TASK_ID_RE = re.compile(r"[+-]?[0-9]+")

DEADLINE_DELIMITER = "/by"
EVENT_DELIMITER = "/at"


def split_at_delimiter(args: Sequence[str], delimiter: str):
    """Split tokens at the first token equal to ``delimiter``.

    Returns ``(title, date)``, each joined by single spaces. Later tokens
    equal to the delimiter are dropped from the date. Without a delimiter the
    date is empty.
    """
    args = list(args)
    if delimiter not in args:
        return " ".join(args), ""
    index = args.index(delimiter)
    date_words = [word for word in args[index + 1:] if word != delimiter]
    return " ".join(args[:index]), " ".join(date_words)


def parse_task_id(args: Sequence[str]) -> int:
    """Parse the 1-based task id from the first argument."""
    if not args:
        raise TasklineError(ErrorKind.INVALID_TASK_ID, "Please tell me the number of the task.")
    token = args[0]
    if not TASK_ID_RE.fullmatch(token):
        raise TasklineError(
            ErrorKind.INVALID_TASK_ID, f"'{token}' is not a valid task number."
        )
    return int(token)


class TaskList:
    """Ordered list of tasks; position + 1 is the task's display id.

    When a ``Storage`` is attached, the full list is written back after every
    mutating operation. Reads never touch storage.
    """

    def __init__(self, tasks: Optional[List[Task]] = None, storage: Optional[Storage] = None):
        self.tasks: List[Task] = list(tasks) if tasks else []
        self.storage = storage

    @classmethod
    def load(cls, storage: Storage) -> "TaskList":
        """Build the list from persisted state."""
        return cls(storage.load(), storage)

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def __getitem__(self, index: int) -> Task:
        return self.tasks[index]

    def get_task(self, task_id: int) -> Task:
        """Resolve a 1-based id to its task."""
        index = task_id - 1
        if index < 0 or index >= len(self.tasks):
            raise TasklineError(ErrorKind.TASK_NOT_FOUND, f"There is no task number {task_id}.")
        return self.tasks[index]

    def add_todo(self, args: Sequence[str]) -> Task:
        """Add a todo titled by the joined arguments."""
        title = " ".join(args)
        if not title:
            raise TasklineError(ErrorKind.EMPTY_TITLE)
        return self._add(Task.todo(title))

    def add_deadline(self, args: Sequence[str]) -> Task:
        """Add a deadline from ``<title...> /by <date...>``."""
        title, by = split_at_delimiter(args, DEADLINE_DELIMITER)
        if not title:
            raise TasklineError(ErrorKind.EMPTY_TITLE)
        if not by:
            raise TasklineError(ErrorKind.EMPTY_DATE)
        return self._add(Task.deadline(title, by))

    def add_event(self, args: Sequence[str]) -> Task:
        """Add an event from ``<title...> /at <date...>``."""
        title, at = split_at_delimiter(args, EVENT_DELIMITER)
        if not title:
            raise TasklineError(ErrorKind.EMPTY_TITLE)
        if not at:
            raise TasklineError(ErrorKind.EMPTY_DATE)
        return self._add(Task.event(title, at))

    def mark_task(self, args: Sequence[str]) -> Task:
        task = self.get_task(parse_task_id(args))
        task.mark_done()
        self.persist()
        return task

    def unmark_task(self, args: Sequence[str]) -> Task:
        task = self.get_task(parse_task_id(args))
        task.mark_undone()
        self.persist()
        return task

    def delete_task(self, args: Sequence[str]) -> Task:
        """Remove a task permanently; ids of later tasks shift down by one."""
        task_id = parse_task_id(args)
        task = self.get_task(task_id)
        del self.tasks[task_id - 1]
        self.persist()
        return task

    def find_tasks(self, args: Sequence[str]) -> List[Task]:
        """Return tasks whose title contains the joined keywords (case-sensitive)."""
        if not args:
            raise TasklineError(ErrorKind.EMPTY_KEYWORD)
        search_term = " ".join(args)
        return [task for task in self.tasks if search_term in task.title]

    def render(self) -> str:
        """Numbered listing of every task, or a notice when there are none."""
        if not self.tasks:
            return "No tasks found! (trust me, I've looked everywhere)"
        return "\n".join(f"{i}. {task}" for i, task in enumerate(self.tasks, start=1))

    def encode(self) -> str:
        return TaskFileFormat.to_text(self.tasks)

    def persist(self) -> None:
        """Write the full list back to storage, if attached."""
        if self.storage is None:
            return
        self.storage.save(self.tasks)

    def _add(self, task: Task) -> Task:
        self.tasks.append(task)
        logger.debug("Added %s task %r", task.kind.name.lower(), task.title)
        self.persist()
        return task
