#!/usr/bin/env python3
"""Serve the API with uvicorn.

Logging and Logfire are configured here, before the app factory runs, so
errors raised while building the app (e.g. an unsafe production JWT secret)
are reported too.
"""

import sys

import logfire
import uvicorn

from skillsphere.config import Settings
from skillsphere.util.logging import setup_logging
from skillsphere.util.observability import configure_logfire

APP_FACTORY = "skillsphere.interface.api.app:create_app"


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    logfire.info(
        "Starting SkillSphere API",
        host=settings.host,
        port=settings.port,
        environment=settings.environment,
    )
    try:
        uvicorn.run(
            APP_FACTORY,
            factory=True,
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception:
        logfire.exception("Application startup failed")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
