"""Shared test fixtures."""

import pytest
from sqlalchemy import event

from devtrack.db.engine import create_db_engine, create_tables
from devtrack.repositories.developer_repo import DeveloperRepository
from devtrack.repositories.project_repo import ProjectRepository
from devtrack.services.developer_service import DeveloperService


@pytest.fixture
async def db_engine(tmp_path):
    """File-backed SQLite async engine with the schema created."""
    engine = create_db_engine(f"sqlite+aiosqlite:///{tmp_path / 'devtrack.db'}")
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def fk_engine(tmp_path):
    """Like db_engine, but SQLite enforces the developer -> proyek foreign key."""
    engine = create_db_engine(f"sqlite+aiosqlite:///{tmp_path / 'devtrack_fk.db'}")

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def broken_engine(tmp_path):
    """Engine over a database with no tables: every statement fails."""
    engine = create_db_engine(f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}")
    yield engine
    await engine.dispose()


@pytest.fixture
def project_repo(db_engine):
    return ProjectRepository(db_engine)


@pytest.fixture
def developer_repo(db_engine):
    return DeveloperRepository(db_engine)


@pytest.fixture
def service(db_engine):
    return DeveloperService.from_engine(db_engine)


@pytest.fixture
def broken_service(broken_engine):
    return DeveloperService.from_engine(broken_engine)
