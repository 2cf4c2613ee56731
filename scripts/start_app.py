#!/usr/bin/env python3
"""Run the API under uvicorn, reporting startup failures to Logfire."""

import logging
import sys

import logfire
import uvicorn

from study.config import Settings
from study.util.logging import log_level, setup_logging
from study.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Starting study group API",
        environment=settings.environment,
        port=settings.port,
        git_sha=settings.git_sha,
    )
    try:
        uvicorn.run(
            "study.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level=logging.getLevelName(log_level(settings)).lower(),
        )
    except Exception:
        logfire.exception("API failed to start")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
