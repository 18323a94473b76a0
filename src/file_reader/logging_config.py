"""Centralized logging configuration for the file reader package."""
import logging
from pathlib import Path
from typing import Optional, Union

from rich.logging import RichHandler

LOGGER_NAME = 'file_reader'


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[Union[str, Path]] = None) -> logging.Logger:
    """Set up logging for all file reader modules.

    Safe to call more than once; handlers installed by a previous call are
    replaced.

    Args:
        level: Level of the console handler
        log_file: Optional file that receives DEBUG and above

    Returns:
        The package logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    package_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    # Create console handler
    console_handler = RichHandler(level=level, rich_tracebacks=True, show_path=False)
    console_handler.setFormatter(logging.Formatter('%(name)s - %(message)s'))
    package_logger.addHandler(console_handler)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        )
        package_logger.addHandler(file_handler)

    package_logger.setLevel(logging.DEBUG if log_file is not None else level)

    # Prevent propagation to root logger to avoid duplicate logs
    package_logger.propagate = False

    return package_logger
