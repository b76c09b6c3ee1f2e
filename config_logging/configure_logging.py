"""
Logging configuration and path utilities for calculator scripts.

This module provides path resolution for saving run logs and logging
utilities for tracing calculations.

Functions:
    getpath: Resolve the output folder for logs
    configure_logging: Set up root logging with the project format
    log_arguments: Decorator to log function calls with arguments
"""

import functools
import logging
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def getpath(subdir: str = "ProtectionCalcResults", base: Optional[Path] = None) -> Path:
    """
    Return a path for calculator output.

    Args:
        subdir: Subdirectory name to create under the base path.
            Defaults to "ProtectionCalcResults".
        base: Base folder. Defaults to the user's home directory.

    Returns:
        Path object pointing to the output directory. The directory
        is created if it does not exist.

    Example:
        >>> output_path = getpath()
        >>> print(output_path)
        PosixPath('/home/dan.park/ProtectionCalcResults')
    """
    basepath = Path(base) if base is not None else Path.home()
    clientpath = basepath / subdir
    clientpath.mkdir(parents=True, exist_ok=True)

    return clientpath


def configure_logging(
    level: int = logging.INFO,
    filename: Optional[Union[str, Path]] = None
) -> None:
    """
    Configure root logging for a calculator run.

    Args:
        level: Logging level, e.g. logging.INFO or logging.DEBUG.
        filename: Log file. Logs go to stderr when None.

    Note:
        Replaces any handlers already installed on the root logger so
        repeated runs in one session do not duplicate output.
    """
    logging.basicConfig(
        filename=str(filename) if filename is not None else None,
        level=level,
        format=LOG_FORMAT,
        force=True,
    )


def log_arguments(func):
    """
    Decorator to log function calls with their arguments.

    Wraps a function to log its name and arguments at INFO level
    each time it is called.

    Args:
        func: The function to wrap with logging.

    Returns:
        Wrapped function that logs calls before executing.

    Example:
        >>> @log_arguments
        ... def run_study(network, fault_type):
        ...     return solve_fault(network, fault_type)
        >>>
        >>> run_study(network, ThreePhase())
        # Logs: "Function run_study called with arguments: ..."
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        # Build argument string for logging
        arg_repr = [repr(a) for a in args]
        kwarg_repr = [f"{k}={v!r}" for k, v in kwargs.items()]
        arg_str = ', '.join(arg_repr + kwarg_repr)

        logging.info(
            f"Function {func.__name__} called with arguments: {arg_str}"
        )
        return func(*args, **kwargs)

    return wrapper
