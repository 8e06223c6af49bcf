"""Tests for log_setup module."""

import logging
import os

from rich.logging import RichHandler

from log_setup import QUIET_LOGGERS, setup_logging


class TestConsoleOnly:
    def test_default_level_is_info(self):
        setup_logging()
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert root.handlers[0].level == logging.INFO

    def test_verbose_sets_console_to_debug(self):
        setup_logging(verbose=True)
        assert logging.getLogger().handlers[0].level == logging.DEBUG

    def test_no_file_handler_without_data_dir(self):
        assert setup_logging() is None
        assert len(logging.getLogger().handlers) == 1

    def test_clears_previous_handlers(self):
        setup_logging()
        setup_logging()
        assert len(logging.getLogger().handlers) == 1

    def test_rich_console_handler(self):
        setup_logging(use_rich=True)
        handler = logging.getLogger().handlers[0]
        assert isinstance(handler, RichHandler)
        assert handler.level == logging.INFO

    def test_http_loggers_quietened(self):
        setup_logging(verbose=True)
        for name in QUIET_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING


class TestFileLogging:
    def test_file_handler_created(self, tmp_path):
        log_path = setup_logging(data_dir=str(tmp_path), command_name="recommend")
        assert log_path is not None
        assert os.path.exists(log_path)
        assert len(logging.getLogger().handlers) == 2

    def test_log_file_named_after_command(self, tmp_path):
        log_path = setup_logging(data_dir=str(tmp_path), command_name="onboard")
        assert os.path.basename(os.path.dirname(log_path)) == "logs"
        assert os.path.basename(log_path).startswith("onboard_")
        assert log_path.endswith(".log")

    def test_file_handler_captures_debug(self, tmp_path):
        setup_logging(data_dir=str(tmp_path), command_name="test")
        assert logging.getLogger().handlers[1].level == logging.DEBUG

    def test_log_message_written_to_file(self, tmp_path):
        log_path = setup_logging(data_dir=str(tmp_path), command_name="test")
        logging.getLogger("test_write").debug("hello from test")
        for h in logging.getLogger().handlers:
            h.flush()
        with open(log_path, encoding="utf-8") as f:
            assert "hello from test" in f.read()

    def test_repeated_calls_dont_accumulate_handlers(self, tmp_path):
        setup_logging(data_dir=str(tmp_path), command_name="a")
        setup_logging(data_dir=str(tmp_path), command_name="b")
        assert len(logging.getLogger().handlers) == 2
