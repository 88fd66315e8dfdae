"""
Tests for logging setup.
"""

import logging

import pytest

from export_tracker.core.logging import NOISY_LOGGERS, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_console_only(restore_root_logger):
    root = setup_logging(level="warning")
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1


def test_file_handler_creates_directory(restore_root_logger, tmp_path):
    log_file = tmp_path / "logs" / "export_tracker.log"
    root = setup_logging(log_file=log_file, level="INFO")

    logging.getLogger("export_tracker.test").info("order EXP-2025-001 created")
    for handler in root.handlers:
        handler.flush()

    assert len(root.handlers) == 2
    assert "order EXP-2025-001 created" in log_file.read_text(encoding="utf-8")


def test_http_clients_quieted(restore_root_logger):
    setup_logging(level="INFO")
    assert all(logging.getLogger(name).level == logging.WARNING for name in NOISY_LOGGERS)

    setup_logging(level="DEBUG")
    assert all(logging.getLogger(name).level == logging.DEBUG for name in NOISY_LOGGERS)


def test_unknown_level_falls_back_to_info(restore_root_logger):
    assert setup_logging(level="chatty").level == logging.INFO
