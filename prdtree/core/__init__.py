"""
Core module - Application configuration.
"""

from .config import (
    AppConfig,
    InputConfig,
    OutputConfig,
    LoggingConfig,
    DEFAULT_MAX_INPUT_BYTES,
    get_default_config,
    load_config,
)

__all__ = [
    # Config classes
    'AppConfig',
    'InputConfig',
    'OutputConfig',
    'LoggingConfig',
    # Constants
    'DEFAULT_MAX_INPUT_BYTES',
    # Config functions
    'get_default_config',
    'load_config',
]
