"""Logging setup for orgfolders.

Module loggers live under the ``orgfolders`` namespace so a single console
handler on the parent logger covers the whole package.
"""

import logging

ROOT_LOGGER_NAME = "orgfolders"

LOG_FORMAT = "[%(asctime)s.%(msecs)03d][%(levelname)s][%(filename)s:%(lineno)d]: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """
    Configure the orgfolders parent logger with a console handler.

    Calling it again only updates the level; handlers are not duplicated.

    Args:
        level: Logging level name (e.g. "INFO", "DEBUG").

    Returns:
        The configured parent logger.
    """
    app_logger = logging.getLogger(ROOT_LOGGER_NAME)

    has_formatted_handler = any(
        isinstance(h, logging.StreamHandler) and getattr(h, "_orgfolders", False)
        for h in app_logger.handlers
    )
    if not has_formatted_handler:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        console_handler._orgfolders = True
        app_logger.addHandler(console_handler)
        app_logger.propagate = False

    app_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    return app_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name, typically __name__ of the calling module

    Returns:
        Logger instance
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
