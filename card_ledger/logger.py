"""Logging configuration for the card ledger.

Logs to the console and, when a log directory is configured, to a
date-named file as well.
"""

import logging
from datetime import date

from .config import Settings

LOGGER_NAME = "card_ledger"


def setup_logging(settings: Settings) -> logging.Logger:
    """Set up application logging with console and optional file handlers.

    Args:
        settings: Application settings containing log level and directory.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(settings.LOG_LEVEL)

    # Clear any existing handlers (create_app may run more than once)
    logger.handlers.clear()

    detailed_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_formatter = logging.Formatter("%(levelname)s - %(name)s - %(message)s")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(settings.LOG_LEVEL)
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    log_dir = settings.log_dir
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / f"card-ledger-{date.today().isoformat()}.log")
        file_handler.setLevel(settings.LOG_LEVEL)
        file_handler.setFormatter(detailed_formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = "") -> logging.Logger:
    """Get the application logger, or one of its children.

    Args:
        name: Optional child name, e.g. "services.categories".

    Returns:
        The card_ledger logger instance.
    """
    if name:
        return logging.getLogger(f"{LOGGER_NAME}.{name}")
    return logging.getLogger(LOGGER_NAME)
