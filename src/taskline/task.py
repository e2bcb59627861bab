"""Task data model for taskline."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import ErrorKind, TasklineError, file_error


FIELD_SEPARATOR = "|"


class TaskKind(Enum):
    """Task variants, valued by their one-letter tag in the save-file."""
    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @property
    def has_date(self) -> bool:
        return self is not TaskKind.TODO

    @property
    def date_label(self) -> Optional[str]:
        """Label shown before the date when rendering (``by`` / ``at``)."""
        return {TaskKind.DEADLINE: "by", TaskKind.EVENT: "at"}.get(self)


@dataclass
class Task:
    """A titled unit of work with a done/undone state.

    ``date`` holds the opaque ``by`` token of a deadline or the ``at`` token
    of an event; it is always None for a todo.
    """

    kind: TaskKind
    title: str
    date: Optional[str] = None
    is_done: bool = False

    def __post_init__(self):
        if not self.title:
            raise TasklineError(ErrorKind.EMPTY_TITLE)
        if self.kind.has_date and not self.date:
            raise TasklineError(ErrorKind.EMPTY_DATE)
        if not self.kind.has_date:
            self.date = None

    @classmethod
    def todo(cls, title: str) -> "Task":
        return cls(TaskKind.TODO, title)

    @classmethod
    def deadline(cls, title: str, by: str) -> "Task":
        return cls(TaskKind.DEADLINE, title, by)

    @classmethod
    def event(cls, title: str, at: str) -> "Task":
        return cls(TaskKind.EVENT, title, at)

    @property
    def by(self) -> Optional[str]:
        return self.date if self.kind is TaskKind.DEADLINE else None

    @property
    def at(self) -> Optional[str]:
        return self.date if self.kind is TaskKind.EVENT else None

    def mark_done(self):
        """Mark the task as done."""
        if self.is_done:
            raise TasklineError(ErrorKind.TASK_ALREADY_MARKED)
        self.is_done = True

    def mark_undone(self):
        """Mark the task as not done."""
        if not self.is_done:
            raise TasklineError(ErrorKind.TASK_ALREADY_UNMARKED)
        self.is_done = False

    def render(self) -> str:
        """Human-readable form, e.g. ``[D][X] return book (by: Sunday)``."""
        status = "X" if self.is_done else " "
        text = f"[{self.kind.value}][{status}] {self.title}"
        if self.kind.has_date:
            text += f" ({self.kind.date_label}: {self.date})"
        return text

    def __str__(self) -> str:
        return self.render()

    def encode(self) -> str:
        """Serialize to a single save-file line (without line separator)."""
        fields = [self.kind.value, "1" if self.is_done else "0", self.title]
        if self.kind.has_date:
            fields.append(self.date)
        return FIELD_SEPARATOR.join(fields)

    @classmethod
    def decode(cls, line: str, line_no: Optional[int] = None) -> "Task":
        """Rebuild a task from a line produced by ``encode``.

        ``line_no``, when given, is included in the error message.

        Raises:
            TasklineError: TASK_DECODING naming the offending line.
        """
        raw = line.rstrip("\r\n")

        def fail(reason: str) -> TasklineError:
            where = f"Line {line_no}: " if line_no is not None else ""
            return file_error(ErrorKind.TASK_DECODING, f"{where}{reason}: {raw!r}")

        parts = raw.split(FIELD_SEPARATOR, 2)
        if len(parts) < 3:
            raise fail("Missing fields")

        tag, done_flag, rest = parts
        try:
            kind = TaskKind(tag)
        except ValueError:
            raise fail(f"Unknown task kind {tag!r}") from None

        if done_flag not in ("0", "1"):
            raise fail(f"Invalid done flag {done_flag!r}")

        date = None
        title = rest
        if kind.has_date:
            # Titles may contain the separator; the date is always the last field
            title, sep, date = rest.rpartition(FIELD_SEPARATOR)
            if not sep:
                raise fail("Missing date field")

        try:
            return cls(kind, title, date, is_done=(done_flag == "1"))
        except TasklineError as e:
            raise fail(e.message) from e
