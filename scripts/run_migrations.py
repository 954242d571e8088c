#!/usr/bin/env python3
"""Apply forum schema migrations, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py <revision> # upgrade to a revision
    python scripts/run_migrations.py -1         # step back one revision
"""

import sys
import logfire
from alembic import command
from alembic.config import Config

from forum.config import Settings
from forum.util.logging import setup_logging
from forum.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Migrate the forum database to the requested revision."""
    settings = Settings()
    target = argv[1] if len(argv) > 1 else "head"

    setup_logging(settings)
    configure_logfire(settings)

    alembic_cfg = Config("alembic.ini")

    with logfire.span("run_migrations", target=target):
        try:
            if not target.startswith("-"):
                command.upgrade(alembic_cfg, target)
            else:
                command.downgrade(alembic_cfg, target)
        except Exception as e:
            logfire.error(
                "Forum schema migration failed",
                target=target,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Re-raise so the deploy stops before serving a broken schema
            raise

        logfire.info("Forum schema migrated", target=target)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
