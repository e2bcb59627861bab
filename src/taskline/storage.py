"""Storage layer for taskline using a flat, line-per-task save-file."""

import logging
import os
import shutil
from pathlib import Path
from typing import List, Optional
from datetime import datetime

from .config import ConfigModel
from .errors import ErrorKind, file_error
from .task import Task


logger = logging.getLogger(__name__)


class TaskFileFormat:
    """Handles conversion between Task objects and save-file text."""

    @staticmethod
    def to_text(tasks: List[Task]) -> str:
        """Encode tasks, one per line, each line terminated."""
        return "".join(task.encode() + "\n" for task in tasks)

    @staticmethod
    def from_text(content: str) -> List[Task]:
        """Decode save-file text back to tasks.

        Blank lines are skipped. The first malformed line aborts the whole
        decode with a TASK_DECODING error naming its line number.
        """
        return [
            Task.decode(line, line_no)
            for line_no, line in enumerate(content.splitlines(), start=1)
            if line.strip()
        ]


class Storage:
    """File-based storage for a single task list."""

    def __init__(self, config: ConfigModel, path: Optional[Path] = None):
        self.config = config
        self.path = Path(path) if path is not None else config.get_data_path()

    def _ensure_directories(self):
        """Ensure the save-file directory exists."""
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> List[Task]:
        """Load all tasks from the save-file.

        An absent file yields an empty list.

        Raises:
            TasklineError: FILE_READ if the file cannot be read,
                TASK_DECODING if a line cannot be decoded.
        """
        if not self.path.exists():
            logger.info("No save-file at %s, starting with an empty list", self.path)
            return []

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Error reading save-file %s: %s", self.path, e)
            raise file_error(ErrorKind.FILE_READ, str(e)) from e

        tasks = TaskFileFormat.from_text(content)
        logger.info("Loaded %d tasks from %s", len(tasks), self.path)
        return tasks

    def save(self, tasks: List[Task]) -> None:
        """Rewrite the whole save-file with the given tasks.

        The content goes to a temporary sibling first, which then replaces
        the save-file, so a failed write leaves the previous file intact.

        Raises:
            TasklineError: FILE_WRITE if the file cannot be written.
        """
        content = TaskFileFormat.to_text(tasks)
        temp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self._ensure_directories()
            with open(temp_path, "w", encoding="utf-8") as f:
                f.write(content)
            os.replace(temp_path, self.path)
        except OSError as e:
            logger.error("Error saving tasks to %s: %s", self.path, e)
            if temp_path.is_file():
                temp_path.unlink()
            raise file_error(ErrorKind.FILE_WRITE, str(e)) from e
        logger.debug("Saved %d tasks to %s", len(tasks), self.path)

    def backup(self, backup_path: Optional[Path] = None) -> Optional[Path]:
        """Copy the save-file aside. Returns the copy's path, or None if there is no file."""
        if not self.path.exists():
            return None

        if backup_path is None:
            timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
            backup_dir = self.config.get_backup_path(timestamp)
            backup_path = backup_dir / self.path.name

        try:
            backup_path.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(self.path, backup_path)
        except OSError as e:
            logger.error("Error backing up %s: %s", self.path, e)
            raise file_error(ErrorKind.FILE_WRITE, str(e)) from e

        logger.info("Backed up %s to %s", self.path, backup_path)
        return backup_path
