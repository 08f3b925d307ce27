"""
Utilities module - Common helper functions and classes.
"""

from .id_generator import (
    generate_uuid,
    IDGenerator,
)
from .logger import (
    setup_logging,
    get_logger,
    LogContext,
    log_exception,
)

__all__ = [
    # ID generation
    'generate_uuid',
    'IDGenerator',
    # Logging
    'setup_logging',
    'get_logger',
    'LogContext',
    'log_exception',
]
