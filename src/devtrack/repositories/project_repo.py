"""Project repository."""

from typing import NamedTuple

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncEngine

from devtrack.db.models.proyek import ProyekRow
from devtrack.repositories.base import BaseRepository, column_value


class ProjectRecord(NamedTuple):
    id_proyek: int
    nama_proyek: str
    client: str
    budget: int


def _to_record(row) -> ProjectRecord:
    return ProjectRecord(
        column_value(row, 0, int, "id_proyek"),
        column_value(row, 1, str, "nama_proyek"),
        column_value(row, 2, str, "client"),
        column_value(row, 3, int, "budget"),
    )


class ProjectRepository(BaseRepository):
    table = ProyekRow.__table__

    def __init__(self, engine: AsyncEngine):
        super().__init__(engine)
        c = self.table.c
        self._columns = (c.id_proyek, c.nama_proyek, c.client, c.budget)

    async def add(self, name: str, client: str, budget: int) -> int:
        """Insert a project and return the id the store generated for it."""
        return await self._insert_returning_id(
            "add", "id_proyek", {"nama_proyek": name, "client": client, "budget": budget}
        )

    async def update(self, project_id: int, name: str, client: str, budget: int) -> bool:
        return await self._update_by_id(
            "update",
            "id_proyek",
            project_id,
            {"nama_proyek": name, "client": client, "budget": budget},
        )

    async def delete(self, project_id: int) -> bool:
        return await self._delete_by_id("delete", "id_proyek", project_id)

    async def get_all(self) -> list[ProjectRecord]:
        stmt = select(*self._columns).order_by(self.table.c.id_proyek)
        return await self._fetch("get_all", stmt, _to_record)

    async def get_by_id(self, project_id: int) -> ProjectRecord | None:
        stmt = select(*self._columns).where(self.table.c.id_proyek == project_id)
        records = await self._fetch("get_by_id", stmt, _to_record)
        return records[0] if records else None

    async def exists(self, project_id: int) -> bool:
        """Return True if a project with this id is currently stored."""
        stmt = select(func.count()).select_from(self.table).where(self.table.c.id_proyek == project_id)
        counts = await self._fetch("exists", stmt, lambda row: column_value(row, 0, int, "count"))
        return bool(counts) and counts[0] > 0
