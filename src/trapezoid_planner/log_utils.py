"""Logger initialisation for applications embedding the planner.

The library itself only creates module loggers; handlers are attached by the
application, typically once at start-up through `init_logger`.
"""

import logging
import os
import sys
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from typing import Optional


class MicrosecondFormatter(logging.Formatter):
    """Formatter whose datefmt supports %f (microseconds)."""

    def formatTime(self, record, datefmt=None):
        ct = datetime.fromtimestamp(record.created)
        if datefmt:
            return ct.strftime(datefmt)
        return super().formatTime(record, datefmt)


def init_logger(
    name: str = "trapezoid_planner",
    level: int = logging.INFO,
    console: bool = True,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Initialize a logger writing to the console and/or a daily rotating file.

    Calling this again for the same name returns the configured logger
    without adding duplicate handlers.

    Args:
        name: Logger name (empty string refers to the root logger)
        level: Logging level, e.g. logging.INFO or logging.DEBUG
        console: If True, log to sys.stdout
        log_file: Optional path of a log file. Parent directories are created
            if needed.

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False

    if not logger.handlers:
        formatter = MicrosecondFormatter(
            fmt="%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S.%f",
        )

        if log_file is not None:
            directory = os.path.dirname(log_file)
            if directory:
                os.makedirs(directory, exist_ok=True)
            file_handler = TimedRotatingFileHandler(
                log_file, when="midnight", backupCount=7, encoding="utf-8"
            )
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        if console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(formatter)
            logger.addHandler(console_handler)

    return logger
