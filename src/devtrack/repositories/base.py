"""Base repository with connection scoping and strict row mapping."""

import logging
from collections.abc import AsyncIterator, Callable, Iterable, Sequence
from contextlib import asynccontextmanager
from typing import Any, TypeVar

from sqlalchemy import Table
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from devtrack.errors.exceptions import PersistenceError

logger = logging.getLogger(__name__)

R = TypeVar("R")

# Failures surfaced as PersistenceError; OSError covers refused connections and timeouts
STORE_ERRORS = (SQLAlchemyError, OSError)


def column_value(row: Sequence[Any], index: int, expected: type, name: str) -> Any:
    """Return ``row[index]`` if it is exactly of the expected column type.

    Raises:
        TypeError: on NULL or on any value of another type.
    """
    value = row[index]
    # bool is an int subclass but never a valid integer column value
    if not isinstance(value, expected) or isinstance(value, bool):
        raise TypeError(
            f"column {name!r} expected {expected.__name__}, got {type(value).__name__}"
        )
    return value


class BaseRepository:
    """Generic async repository over a single table.

    Every operation opens its own connection from the engine and gives
    it back on exit, whatever the outcome.
    """

    table: Table

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    @asynccontextmanager
    async def _connection(self, operation: str, write: bool = False) -> AsyncIterator[AsyncConnection]:
        """Scope a connection to one statement, translating store failures."""
        ctx = self.engine.begin() if write else self.engine.connect()
        try:
            async with ctx as conn:
                yield conn
        except PersistenceError:
            raise
        except STORE_ERRORS as exc:
            logger.warning("%s on %s failed: %s", operation, self.table.name, exc)
            raise PersistenceError(
                f"Error during {operation} on {self.table.name}: {exc}",
                details={"operation": operation, "table": self.table.name},
            ) from exc

    def _map_rows(self, operation: str, rows: Iterable[Sequence[Any]], mapper: Callable[[Sequence[Any]], R]) -> list[R]:
        try:
            return [mapper(row) for row in rows]
        except TypeError as exc:
            logger.warning("%s on %s returned an unmappable row: %s", operation, self.table.name, exc)
            raise PersistenceError(
                f"Error mapping {self.table.name} row: {exc}",
                details={"operation": operation, "table": self.table.name},
            ) from exc

    async def _insert_returning_id(self, operation: str, id_column: str, values: dict[str, Any]) -> int:
        """Insert one row and return its generated id, or 0 if none is reported."""
        stmt = self.table.insert().values(**values).returning(self.table.c[id_column])
        async with self._connection(operation, write=True) as conn:
            result = await conn.execute(stmt)
            new_id = result.scalar_one_or_none()
        if new_id is None:
            return 0
        return self._map_rows(operation, [(new_id,)], lambda row: column_value(row, 0, int, id_column))[0]

    async def _update_by_id(self, operation: str, id_column: str, row_id: int, values: dict[str, Any]) -> bool:
        stmt = self.table.update().where(self.table.c[id_column] == row_id).values(**values)
        async with self._connection(operation, write=True) as conn:
            result = await conn.execute(stmt)
            affected = result.rowcount
        return affected > 0

    async def _delete_by_id(self, operation: str, id_column: str, row_id: int) -> bool:
        stmt = self.table.delete().where(self.table.c[id_column] == row_id)
        async with self._connection(operation, write=True) as conn:
            result = await conn.execute(stmt)
            affected = result.rowcount
        return affected > 0

    async def _fetch(self, operation: str, stmt, mapper: Callable[[Sequence[Any]], R]) -> list[R]:
        async with self._connection(operation) as conn:
            result = await conn.execute(stmt)
            rows = result.all()
        return self._map_rows(operation, rows, mapper)
