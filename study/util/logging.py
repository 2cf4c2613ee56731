"""Logging configuration for the application."""

import logging
import sys

from study.config import Settings

# Library loggers that are chatty at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "asyncpg")


def log_level(settings: Settings) -> int:
    """Root log level for the configured environment."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "production":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure the stdlib root logger.

    Application events go through Logfire; this covers what libraries
    (uvicorn, sqlalchemy, httpx) write to the standard logging tree.

    Args:
        settings: Application settings
    """
    level = log_level(settings)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    # SQL echo only when debugging
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.debug else logging.WARNING
    )
    logging.getLogger("study").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
