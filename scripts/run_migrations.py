#!/usr/bin/env python3
"""Apply the Conduit schema migrations.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3c1f0a9b   # upgrade to a revision

The database URL comes from Settings (DATABASE__URL), not alembic.ini.
"""

import sys

import logfire
from alembic import command
from alembic.config import Config
from alembic.script import ScriptDirectory

from conduit.config import Settings
from conduit.util.logging import setup_logging
from conduit.util.observability import configure_logfire

ALEMBIC_INI = "alembic.ini"


def main(argv: list[str]) -> int:
    """Upgrade the schema to the requested revision and report failures."""
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    alembic_cfg = Config(ALEMBIC_INI)
    target = argv[0] if argv else "head"
    head = ScriptDirectory.from_config(alembic_cfg).get_current_head()

    with logfire.span("migrations.upgrade", target=target, head=head):
        try:
            command.upgrade(alembic_cfg, target)
        except Exception as e:
            logfire.error(
                "Schema migration failed",
                target=target,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail the deploy rather than serve against a half-migrated schema
            raise
        logfire.info("Schema migrated", target=target, head=head)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
