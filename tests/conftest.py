"""Pytest configuration and shared fixtures."""

import logging
import sys
from pathlib import Path

import pytest

# Ensure src directory is in Python path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from taskline.config import ConfigModel, reset_config  # noqa: E402
from taskline.storage import Storage  # noqa: E402
from taskline.task_list import TaskList  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep every test away from the real ~/.taskline directory."""
    monkeypatch.setenv("TASKLINE_DATA_DIR", str(tmp_path / "home"))
    reset_config()
    yield
    reset_config()
    # CLI runs attach handlers to streams that are closed afterwards
    logger = logging.getLogger("taskline")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def config(tmp_path):
    return ConfigModel(data_dir=str(tmp_path))


@pytest.fixture
def storage(config):
    return Storage(config)


@pytest.fixture
def task_list(storage):
    """An empty task list backed by a save-file in tmp_path."""
    return TaskList(storage=storage)
