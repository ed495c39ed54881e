"""
Logging setup for the daily forecast command line application.

Console output is always enabled; a detailed log file is written only when a
path is configured (``logging.file`` or ``LOG_FILE``).
"""

import logging
import time
from pathlib import Path
from typing import Optional


CONSOLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_log_level(log_level: str) -> int:
    """
    Resolve a level name such as 'info' or 'DEBUG' to its numeric value.

    Raises:
        ValueError: If the name is not a standard logging level
    """
    level = logging.getLevelName(str(log_level).upper())
    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {log_level}")
    return level


def setup_logger(
    name: str = "streamflow_daily",
    log_file: Optional[str] = None,
    log_level: str = "INFO"
) -> logging.Logger:
    """
    Configure the application logger.

    Calling it again replaces the handlers from a previous call, so one
    process can build several apps without duplicated output.

    Args:
        name: Logger name
        log_file: Detailed DEBUG log destination. No file is written when None
        log_level: Level for the logger and its console output

    Returns:
        Configured logger instance
    """
    level = parse_log_level(log_level)

    logger = logging.getLogger(name)
    logger.setLevel(min(level, logging.DEBUG) if log_file else level)

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, DATE_FORMAT))
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, DATE_FORMAT))
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger


class LoggerContext:
    """Log the start, duration and outcome of one unit of work, such as a horizon."""

    def __init__(self, logger: logging.Logger, operation: str):
        self.logger = logger
        self.operation = operation
        self.elapsed: Optional[float] = None
        self._started: Optional[float] = None

    def __enter__(self):
        self._started = time.perf_counter()
        self.logger.info(f"Starting {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.elapsed = time.perf_counter() - self._started

        if exc_type is not None:
            self.logger.error(
                f"Failed {self.operation} after {self.elapsed:.2f}s: {exc_val}",
                exc_info=(exc_type, exc_val, exc_tb)
            )
        else:
            self.logger.info(f"Completed {self.operation} in {self.elapsed:.2f}s")

        # Never suppress the exception
        return False
