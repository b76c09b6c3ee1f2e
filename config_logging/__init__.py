"""
Logging configuration package for the protection calculator.

This package provides logging setup and path utilities for run output.

Modules:
    configure_logging: Path resolution, logging setup and decorators
"""

from config_logging.configure_logging import (
    LOG_FORMAT,
    getpath,
    configure_logging,
    log_arguments,
)

__all__ = [
    'LOG_FORMAT',
    'getpath',
    'configure_logging',
    'log_arguments',
]
