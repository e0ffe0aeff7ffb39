"""Logging configuration for calculagraph."""

import logging
import sys

# Below DEBUG, used by timer_log_trace
TRACE = 5
logging.addLevelName(TRACE, "TRACE")


def setup_logging(
    level: int | str = logging.INFO, log_file: str | None = None
) -> logging.Logger:
    """Configure logging for an application that uses the timer decorators.

    Nothing in calculagraph calls this on import; it is a convenience for
    scripts that want timing records on the console without further setup.

    The log decorators write to the logger of the decorated function's
    module, so the handlers are installed on the root logger. This module
    registers a TRACE level (5) below DEBUG for timer_log_trace; its records
    only appear when level is TRACE or lower.

    Args:
        level: Logging level as a number or a registered name such as
            "INFO" or "TRACE" (default: INFO)
        log_file: Optional file path for logging output

    Returns:
        The calculagraph package logger

    Raises:
        ValueError: If level is a name the logging module does not know
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown logging level {level!r}")
        level = resolved

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        root_logger.addHandler(file_handler)

    package_logger = logging.getLogger("calculagraph")
    package_logger.setLevel(level)

    return package_logger
