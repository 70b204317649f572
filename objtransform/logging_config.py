"""
Logging for command-line runs.

Status lines go to stderr so a run can be piped or scripted. A log file,
when requested, gets the full record with timestamps.
"""
import logging
import sys
from typing import Optional

CONSOLE_FORMAT = "%(levelname)s: %(message)s"
VERBOSE_CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the 'objtransform' logger for one batch run.

    Args:
        verbose: Log DEBUG records (dropped lines, parse totals) and module names.
        log_file: Optional path; opened for writing, so an unwritable path
            raises OSError before any handler is installed.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger("objtransform")

    file_handler = None
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(VERBOSE_CONSOLE_FORMAT if verbose else CONSOLE_FORMAT))
    logger.addHandler(console_handler)
    if file_handler is not None:
        logger.addHandler(file_handler)

    logger.debug(f"Logging at {logging.getLevelName(level)}" + (f", copying to {log_file}" if log_file else ""))
    return logger
