"""Async SQLAlchemy engine creation and schema bootstrap."""

import logging

from sqlalchemy.exc import ArgumentError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from devtrack.config import Settings, settings as default_settings, to_database_url
from devtrack.errors.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def create_db_engine(connection_string: str | None, settings: Settings | None = None) -> AsyncEngine:
    """Create an async SQLAlchemy engine for the given connection string.

    Raises:
        ConfigurationError: if the connection string is blank or malformed.
    """
    if connection_string is None or not connection_string.strip():
        raise ConfigurationError("Connection string is blank")
    cfg = settings or default_settings
    url = to_database_url(connection_string)

    engine_kwargs: dict = {"echo": False}
    # SQLite does not support pool_size / max_overflow
    if not url.startswith("sqlite"):
        engine_kwargs.update(pool_size=cfg.pool_size, max_overflow=cfg.max_overflow)

    try:
        return create_async_engine(url, **engine_kwargs)
    except ArgumentError as exc:
        raise ConfigurationError(f"Invalid connection string: {exc}") from exc


async def create_tables(engine: AsyncEngine) -> None:
    """Create the proyek and developer tables if they do not exist."""
    from devtrack.db.base import Base
    import devtrack.db.models  # noqa: F401 - register all ORM models

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Tables ensured: %s", ", ".join(sorted(Base.metadata.tables)))
