"""
Logging setup for Provider Directory.

The console always gets a handler. A file handler under ``logs/`` is added
when ``[state] log_file`` names one. The Dash dev server and the HTTP stack
log every request at INFO, so they stay at WARNING unless the app runs at
DEBUG.
"""

import logging
import os
from pathlib import Path
from typing import Optional

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

NOISY_LOGGERS = ('werkzeug', 'urllib3', 'requests')


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def _cap_noisy_loggers(level: int) -> None:
    capped = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(capped)


def setup_logging(
    level: str = 'INFO',
    log_file: Optional[str] = None,
    log_dir: Optional[str] = None,
    format_string: Optional[str] = None
) -> None:
    """
    Install the application's log handlers on the root logger.

    Existing root handlers are removed first, so calling this twice does not
    duplicate output.

    Args:
        level: Logging level name ('DEBUG', 'INFO', ...)
        log_file: File name for a file handler (optional)
        log_dir: Directory for the log file (defaults to 'logs')
        format_string: Custom format string (optional)
    """
    numeric_level = _level(level)
    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handlers = [logging.StreamHandler()]
    log_path = None
    if log_file:
        Path(log_dir or 'logs').mkdir(parents=True, exist_ok=True)
        log_path = os.path.join(log_dir or 'logs', log_file)
        handlers.append(logging.FileHandler(log_path))

    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    _cap_noisy_loggers(numeric_level)

    if log_path:
        logging.info(f"Logging to file: {log_path}")
    logging.info(f"Logging configured with level: {level}")


def get_logger(name: str) -> logging.Logger:
    """Logger for a module (pass __name__)."""
    return logging.getLogger(name)


def set_log_level(level: str) -> None:
    """Change the level of the root logger and its handlers after setup."""
    numeric_level = _level(level)
    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers:
        handler.setLevel(numeric_level)
    _cap_noisy_loggers(numeric_level)

    logging.info(f"Log level set to: {level}")
