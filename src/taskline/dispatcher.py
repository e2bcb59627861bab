"""Maps command lines onto task list operations.

``dispatch`` is the boundary used by front ends: it never raises for
recoverable failures and instead returns a ``DispatchResult`` describing
either the confirmation text or the error.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from .errors import ErrorKind, TasklineError
from .parser import CommandKeyword, ParsedCommand, parse_command
from .task import Task
from .task_list import TaskList


logger = logging.getLogger(__name__)

CommandHandler = Callable[[TaskList, List[str]], str]

GOODBYE_MESSAGE = "Bye. Hope to see you again soon!"


@dataclass
class DispatchResult:
    """Outcome of one command line."""
    message: str
    error: Optional[ErrorKind] = None
    is_exit: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


def _count_line(task_list: TaskList) -> str:
    noun = "task" if len(task_list) == 1 else "tasks"
    return f"Now you have {len(task_list)} {noun} in the list."


def _added(kind_name: str, task: Task, task_list: TaskList) -> str:
    return f"Got it, I've added this {kind_name}:\n   {task}\n{_count_line(task_list)}"


def cmd_todo(task_list: TaskList, args: List[str]) -> str:
    return _added("todo", task_list.add_todo(args), task_list)


def cmd_deadline(task_list: TaskList, args: List[str]) -> str:
    return _added("deadline", task_list.add_deadline(args), task_list)


def cmd_event(task_list: TaskList, args: List[str]) -> str:
    return _added("event", task_list.add_event(args), task_list)


def cmd_mark(task_list: TaskList, args: List[str]) -> str:
    task = task_list.mark_task(args)
    return f"Awesome! I've marked this task as done:\n   {task}"


def cmd_unmark(task_list: TaskList, args: List[str]) -> str:
    task = task_list.unmark_task(args)
    return f"Okay, I've marked this task as not done yet:\n   {task}"


def cmd_delete(task_list: TaskList, args: List[str]) -> str:
    task = task_list.delete_task(args)
    return f"Noted. I've removed this task:\n   {task}\n{_count_line(task_list)}"


def cmd_list(task_list: TaskList, args: List[str]) -> str:
    return task_list.render()


def cmd_find(task_list: TaskList, args: List[str]) -> str:
    matches = task_list.find_tasks(args)
    if not matches:
        return "No matching tasks found."
    lines = ["Here are the matching tasks in your list:"]
    lines.extend(f"{i}. {task}" for i, task in enumerate(matches, start=1))
    return "\n".join(lines)


def cmd_help(task_list: TaskList, args: List[str]) -> str:
    lines = ["Available commands:"]
    for _, usage in COMMANDS.values():
        lines.append(f"  {usage}")
    lines.append(f"  {CommandKeyword.BYE.value} - Exit.")
    return "\n".join(lines)


COMMANDS: Dict[CommandKeyword, Tuple[CommandHandler, str]] = {
    CommandKeyword.TODO: (cmd_todo, "todo <title> - Add a todo."),
    CommandKeyword.DEADLINE: (cmd_deadline, "deadline <title> /by <date> - Add a deadline."),
    CommandKeyword.EVENT: (cmd_event, "event <title> /at <date> - Add an event."),
    CommandKeyword.LIST: (cmd_list, "list - Show all tasks."),
    CommandKeyword.MARK: (cmd_mark, "mark <number> - Mark a task as done."),
    CommandKeyword.UNMARK: (cmd_unmark, "unmark <number> - Mark a task as not done."),
    CommandKeyword.DELETE: (cmd_delete, "delete <number> - Remove a task."),
    CommandKeyword.FIND: (cmd_find, "find <keyword> - Search task titles."),
    CommandKeyword.HELP: (cmd_help, "help - Show this list."),
}


def execute(command: ParsedCommand, task_list: TaskList) -> DispatchResult:
    """Run an already parsed command against ``task_list``."""
    if command.keyword is CommandKeyword.BYE:
        return DispatchResult(GOODBYE_MESSAGE, is_exit=True)

    entry = COMMANDS.get(command.keyword)
    try:
        if entry is None:
            raise TasklineError(ErrorKind.UNRECOGNISED_COMMAND)
        handler, _ = entry
        message = handler(task_list, command.args)
    except TasklineError as e:
        logger.debug("Command %r failed: %s", command.raw, e.kind.name)
        return DispatchResult(e.message, error=e.kind)

    logger.debug("Command %r succeeded", command.raw)
    return DispatchResult(message)


def dispatch(line: str, task_list: TaskList) -> DispatchResult:
    """Parse and execute one command line."""
    return execute(parse_command(line), task_list)
