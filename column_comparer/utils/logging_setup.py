"""
Shared logging setup for Column Comparer.

Console logging goes to stderr because stdout carries the comparison report.
"""
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Union


class ColourFormatter(logging.Formatter):
    """
    Custom formatter with colour support for console output.
    """

    # ANSI colour codes
    COLOURS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m', # Magenta
        'RESET': '\033[0m',     # Reset
    }

    def format(self, record):
        """Format log record with colour for console."""
        levelname = record.levelname
        if levelname in self.COLOURS:
            # Work on a copy so the file handler sees the plain level name
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = f"{self.COLOURS[levelname]}{levelname:<8}{self.COLOURS['RESET']}"

        return super().format(record)


def setup_logging(
    log_level: str = 'WARNING',
    log_dir: Optional[Union[str, Path]] = None,
    component: str = 'column-comparer',
):
    """
    Set up logging for the application.

    Configures:
    - Console: coloured output on stderr at the given log level
    - File: detailed DEBUG output, only when log_dir is given

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_dir: Directory for log files (None = no log file)
        component: Component name for log filename

    Returns:
        Logger instance
    """
    level = getattr(logging, log_level.upper())

    # Get root logger
    logger = logging.getLogger()
    logger.setLevel(logging.DEBUG if log_dir is not None else level)

    # Remove existing handlers
    logger.handlers = []

    # Console handler (with colour)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_formatter = ColourFormatter(
        '[%(asctime)s] %(levelname)s | %(name)-12s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    # File handler (no colour)
    log_file = None
    if log_dir is not None:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        log_file = log_path / f'{component}_{timestamp}.log'

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)  # Always DEBUG in file
        file_formatter = logging.Formatter(
            '[%(asctime)s] %(levelname)-8s | %(name)-12s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    logger.debug(f"Logging initialised (level: {log_level}, file: {log_file})")

    return logger
