"""Command-line interface for taskline."""

import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel

from .config import Config, ConfigModel
from .dispatcher import DispatchResult, dispatch
from .errors import ErrorCategory, TasklineError
from .logging_setup import setup_logging
from .storage import Storage
from .task_list import TaskList


logger = logging.getLogger(__name__)

PROMPT = "> "


def get_console(config: ConfigModel) -> Console:
    """Console honouring the user's colour preference."""
    return Console(no_color=config.no_color, highlight=False)


def print_result(console: Console, result: DispatchResult) -> None:
    """Print a dispatch result; errors in red. Task renders contain brackets, so markup is off."""
    style = "red" if result.error else None
    console.print(result.message, style=style, markup=False, soft_wrap=True)


def show_banner(console: Console) -> None:
    console.print(Panel(
        "Hello! I'm taskline.\nWhat can I do for you? (type [bold]help[/bold] for commands)",
        title="taskline",
        border_style="cyan",
        expand=False,
    ))


def load_task_list(storage: Storage, console: Console, reset: bool) -> Optional[TaskList]:
    """Load the session's task list, or None if the save-file is unusable.

    With ``reset`` an undecodable save-file is backed up and replaced by an
    empty list instead of aborting.
    """
    try:
        return TaskList.load(storage)
    except TasklineError as e:
        console.print(f"Error: {e.message}", style="red", markup=False, soft_wrap=True)
        if not reset or e.category is not ErrorCategory.FILE:
            console.print("Run again with --reset to back up the save-file and start over.",
                          style="yellow", markup=False)
            return None

    task_list = TaskList(storage=storage)
    try:
        backup_path = storage.backup()
        task_list.persist()
    except TasklineError as e:
        console.print(f"Error: {e.message}", style="red", markup=False, soft_wrap=True)
        return None
    if backup_path is not None:
        console.print(f"Backed up the old save-file to {backup_path}", style="yellow", markup=False)
    return task_list


def run_loop(task_list: TaskList, console: Console) -> None:
    """Read commands until ``bye`` or end of input."""
    while True:
        try:
            line = console.input(PROMPT)
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        if not line.strip():
            continue

        result = dispatch(line, task_list)
        print_result(console, result)
        if result.is_exit:
            break


@click.group(invoke_without_command=True)
@click.option("--config", type=click.Path(dir_okay=False), help="Path to config file")
@click.option("--data-file", type=click.Path(dir_okay=False), help="Path to the save-file")
@click.option("--reset", is_flag=True, help="Back up an unreadable save-file and start empty")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def main(ctx, config, data_file, reset, verbose):
    """taskline - track todos, deadlines and events from the command line."""
    cfg = Config.reload(Path(config) if config else None)
    setup_logging("DEBUG" if verbose else cfg.log_level, cfg.log_file)

    console = get_console(cfg)
    storage = Storage(cfg, Path(data_file) if data_file else None)
    task_list = load_task_list(storage, console, reset)
    if task_list is None:
        ctx.exit(1)
    logger.debug("Session started with %d tasks from %s", len(task_list), storage.path)

    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg
    ctx.obj["console"] = console
    ctx.obj["task_list"] = task_list

    if ctx.invoked_subcommand is None:
        if cfg.greeting:
            show_banner(console)
        run_loop(task_list, console)


@main.command()
@click.argument("words", nargs=-1, required=True)
@click.pass_context
def run(ctx, words):
    """Run a single command, e.g. ``taskline run todo read book``."""
    result = dispatch(" ".join(words), ctx.obj["task_list"])
    print_result(ctx.obj["console"], result)
    if result.error:
        ctx.exit(1)


if __name__ == "__main__":
    main()
