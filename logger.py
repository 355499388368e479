"""Logging configuration for Tally.

Command output (balances, account lists, ratios) is written through the
"tally" logger, so the console shows INFO lines as bare messages and only
prefixes warnings and errors. The dated log file keeps the full format.
"""

import logging
from datetime import date
from pathlib import Path
from config import Config

LOGGER_NAME = "tally"


class ConsoleFormatter(logging.Formatter):
    """Print INFO and below as plain output, prefix anything louder."""

    def __init__(self):
        super().__init__("%(levelname)s - %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        if record.levelno <= logging.INFO:
            return record.getMessage()
        return super().format(record)


def get_log_path(config: Config) -> Path:
    """Get today's log file path (log_dir/tally-YYYY-MM-DD.log)."""
    return config.log_dir / f"{LOGGER_NAME}-{date.today().isoformat()}.log"


def setup_logging(config: Config) -> logging.Logger:
    """Set up application logging with file and console handlers.

    Args:
        config: Application configuration containing log settings.

    Returns:
        Configured logger instance.
    """
    config.log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.log_level)

    # Clear any existing handlers (in case this is called multiple times)
    logger.handlers.clear()

    detailed_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    file_handler = logging.FileHandler(get_log_path(config))
    file_handler.setLevel(config.log_level)
    file_handler.setFormatter(detailed_formatter)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(config.log_level)
    console_handler.setFormatter(ConsoleFormatter())

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger


def get_logger() -> logging.Logger:
    """Get the application logger.

    Returns:
        The tally logger instance.
    """
    return logging.getLogger(LOGGER_NAME)
