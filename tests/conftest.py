"""Shared fixtures."""

import logging

import pytest


@pytest.fixture
def restore_package_logger():
    """Undo handler and level changes made by setup_logging."""
    package_logger = logging.getLogger("prdtree")
    handlers = package_logger.handlers[:]
    level = package_logger.level
    yield package_logger
    for handler in package_logger.handlers:
        if handler not in handlers:
            handler.close()
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
