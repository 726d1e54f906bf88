"""
Tests for logging configuration.
"""

import logging

import pytest

from devgraph.utils.logging_config import configure_api_logging, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            handler.close()
            root.removeHandler(handler)
    root.setLevel(level)


def test_console_only():
    setup_logging(level="warning")
    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1


def test_file_handler(tmp_path):
    setup_logging(log_file="api.log", level="INFO", log_dir=str(tmp_path / "logs"))
    logging.getLogger("devgraph.test").info("hello")
    for handler in logging.getLogger().handlers:
        handler.flush()

    content = (tmp_path / "logs" / "api.log").read_text()
    assert "hello" in content
    assert "devgraph.test" in content


def test_debug_overrides_level():
    configure_api_logging(level="ERROR", debug=True)
    assert logging.getLogger().level == logging.DEBUG
