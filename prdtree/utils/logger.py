"""
Logging utilities for the PRD task tree compiler.

Library code only ever asks for loggers under the ``prdtree`` hierarchy,
which carries a NullHandler, so importing or calling the compiler writes
nothing. Applications (the CLI) opt in to output with ``setup_logging``.
"""

import logging
import sys
from pathlib import Path
from typing import Optional
from datetime import datetime


DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER_NAME = "prdtree"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
    log_file: Optional[Path | str] = None,
    console: bool = True,
) -> logging.Logger:
    """
    Route ``prdtree`` log records to the console and/or a file.

    Replaces handlers installed by a previous call. Console output goes
    to stderr so stdout stays free for JSON reports.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string (uses DEFAULT_FORMAT if None)
        log_file: Optional path to log file
        console: Whether to log to stderr

    Returns:
        The configured package logger
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    formatter = logging.Formatter(format_string or DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT)

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(numeric_level)
    package_logger.handlers.clear()

    handlers = []
    if console:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    if not handlers:
        package_logger.addHandler(logging.NullHandler())

    return package_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the ``prdtree`` hierarchy.

    Args:
        name: Module name (typically __name__)
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


class LogContext:
    """
    Context manager timing an operation in the log.

    Example:
        with LogContext(logger, "Processing PRD", level=logging.DEBUG, input_size=1024):
            ...
    """

    def __init__(self, logger: logging.Logger, operation: str, level: int = logging.INFO, **context):
        self.logger = logger
        self.operation = operation
        self.level = level
        self.context = context
        self.start_time = None

    def __enter__(self):
        self.start_time = datetime.now()
        if self.logger.isEnabledFor(self.level):
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            self.logger.log(self.level, f"Starting: {self.operation} ({context_str})")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration = (datetime.now() - self.start_time).total_seconds()

        if exc_type is None:
            self.logger.log(self.level, f"Completed: {self.operation} ({duration:.3f}s)")
        else:
            self.logger.error(
                f"Failed: {self.operation} ({duration:.3f}s) - {exc_type.__name__}: {exc_val}"
            )

        return False


def log_exception(logger: logging.Logger, message: str, exc: Exception) -> None:
    """Log an exception with full traceback at ERROR level."""
    logger.error(f"{message}: {type(exc).__name__}: {exc}", exc_info=True)
