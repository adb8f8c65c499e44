"""
Tests for logging setup.
"""

import logging

import pytest

from core.logging_config import NOISY_LOGGERS, get_logger, set_log_level, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


class TestSetupLogging:
    """Handler installation"""

    def test_console_only(self):
        setup_logging('WARNING')
        root = logging.getLogger()

        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)

    def test_repeated_setup_does_not_duplicate(self):
        setup_logging('INFO')
        setup_logging('INFO')
        assert len(logging.getLogger().handlers) == 1

    def test_file_handler(self, tmp_path):
        setup_logging('INFO', log_file='directory.log', log_dir=str(tmp_path / "logs"))
        get_logger('tests.logging').info("hello from the listing")

        handlers = logging.getLogger().handlers
        assert any(isinstance(h, logging.FileHandler) for h in handlers)
        for handler in handlers:
            handler.flush()
        assert "hello from the listing" in (tmp_path / "logs" / "directory.log").read_text()

    def test_noisy_loggers_capped_unless_debug(self):
        setup_logging('INFO')
        assert all(logging.getLogger(name).level == logging.WARNING for name in NOISY_LOGGERS)

        set_log_level('DEBUG')
        assert logging.getLogger().level == logging.DEBUG
        assert all(logging.getLogger(name).level == logging.DEBUG for name in NOISY_LOGGERS)

    def test_unknown_level_falls_back_to_info(self):
        setup_logging('CHATTY')
        assert logging.getLogger().level == logging.INFO
