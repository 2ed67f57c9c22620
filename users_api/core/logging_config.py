"""
Logging configuration for the Users API.

Configures the root logger once at startup and quiets chatty
third-party loggers.
"""

import logging

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"

# Third-party loggers kept at WARNING to reduce noise
_QUIET_LOGGERS = (
    "sqlalchemy.engine",
    "sqlalchemy.pool",
    "aiosqlite",
    "asyncpg",
)


def configure_logging(level_name: str = "INFO") -> None:
    """Configure logging for the application."""
    log_level = getattr(logging, level_name.upper(), logging.INFO)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    logging.basicConfig(level=log_level, format=LOG_FORMAT)

    for logger_name in _QUIET_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
