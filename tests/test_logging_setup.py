"""Tests for logging configuration."""

import logging

from taskline.logging_setup import setup_logging


class TestSetupLogging:

    def test_level_from_name(self):
        setup_logging("info")

        assert logging.getLogger("taskline").level == logging.INFO

    def test_unknown_level_falls_back_to_warning(self):
        setup_logging("chatty")

        assert logging.getLogger("taskline").level == logging.WARNING

    def test_repeated_setup_does_not_duplicate_handlers(self):
        setup_logging()
        setup_logging()

        assert len(logging.getLogger("taskline").handlers) == 1

    def test_file_handler_records_debug(self, tmp_path):
        log_file = tmp_path / "logs" / "taskline.log"
        setup_logging("WARNING", log_file)

        logging.getLogger("taskline.storage").debug("saved %d tasks", 3)

        assert "saved 3 tasks" in log_file.read_text(encoding="utf-8")
