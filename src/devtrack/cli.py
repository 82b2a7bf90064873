"""CLI entry point for devtrack database administration."""

import argparse
import asyncio
import logging
import sys

from devtrack.config import Settings, resolve_connection_string
from devtrack.db.engine import create_db_engine, create_tables
from devtrack.errors.exceptions import ConfigurationError, PersistenceError
from devtrack.logging_config import configure_logging
from devtrack.repositories.base import STORE_ERRORS

logger = logging.getLogger(__name__)


async def _init_db(connection_string: str, settings: Settings) -> None:
    engine = create_db_engine(connection_string, settings)
    try:
        await create_tables(engine)
    except STORE_ERRORS as exc:
        raise PersistenceError(f"Error creating tables: {exc}") from exc
    finally:
        await engine.dispose()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="devtrack-db",
        description="devtrack database tools",
    )
    parser.add_argument("--database-url", help="Connection string (overrides settings)")
    parser.add_argument("--settings-file", help="JSON settings file holding ConnectionStrings.DefaultConnection")
    parser.add_argument("--log-level", help="Log level (default from DEVTRACK_LOG_LEVEL or info)")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("init", help="Create the proyek and developer tables if missing")
    args = parser.parse_args(argv)

    overrides = {}
    if args.database_url:
        overrides["database_url"] = args.database_url
    if args.settings_file:
        overrides["settings_file"] = args.settings_file
    if args.log_level:
        overrides["log_level"] = args.log_level
    settings = Settings(**overrides)
    configure_logging(
        log_level=settings.log_level,
        json_output=settings.json_logs,
        echo_sql=settings.echo_sql,
    )

    try:
        connection_string = resolve_connection_string(settings)
        if args.command == "init":
            asyncio.run(_init_db(connection_string, settings))
    except ConfigurationError as exc:
        print(f"devtrack-db: configuration error: {exc.message}", file=sys.stderr)
        return 2
    except PersistenceError as exc:
        logger.error("Command %s failed: %s", args.command, exc.message)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
