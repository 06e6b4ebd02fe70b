"""
Centralized logging configuration for the Venmo request manager.
The form app, the JSON API and the core modules all log through the
"venmo_request_manager" logger tree, configured here.
"""

import logging

ROOT_LOGGER = 'venmo_request_manager'


def setup_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """
    Set up a logger with consistent formatting and a console handler.

    Args:
        name: Name of the logger (typically module name)
        level: Logging level (default: INFO)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid adding handlers multiple times
    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger


def get_core_logger() -> logging.Logger:
    """Get logger for roster/ledger operations; handled by whichever front end is running."""
    return logging.getLogger(f'{ROOT_LOGGER}.core')


def get_app_logger(level: int = logging.INFO) -> logging.Logger:
    """Get logger for the Flask form app."""
    return setup_logger(ROOT_LOGGER, level=level)


def get_api_logger(level: int = logging.INFO) -> logging.Logger:
    """Get logger for the JSON API; also configures the shared parent so core records are kept."""
    setup_logger(ROOT_LOGGER, level=level)
    return logging.getLogger(f'{ROOT_LOGGER}.api')
