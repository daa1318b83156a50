#!/usr/bin/env python3
"""Apply Alembic migrations up to head.

The pair-uniqueness index and the NOTIFY channel are rendered from the
current ``INVITATIONS__*`` settings, so run this with the same environment
as the API.
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from skillsphere.config import Settings
from skillsphere.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main() -> int:
    settings = Settings()
    configure_logfire(settings)

    with logfire.span(
        "run_migrations",
        uniqueness_scope=settings.invitations.uniqueness_scope.value,
        change_channel=settings.invitations.change_channel,
    ):
        try:
            command.upgrade(Config(str(ALEMBIC_INI)), "head")
        except Exception:
            # Fail the deploy rather than start the API on a stale schema
            logfire.exception("Database migration failed")
            raise

    logfire.info("Database migrations completed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
