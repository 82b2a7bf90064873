"""Developer repository."""

from typing import NamedTuple

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncEngine

from devtrack.db.models.developer import DeveloperRow
from devtrack.repositories.base import BaseRepository, column_value


class DeveloperRecord(NamedTuple):
    id_dev: int
    id_proyek: int
    nama_dev: str
    status_kontrak: str
    fitur_selesai: str
    jumlah_bug: int


def _to_record(row) -> DeveloperRecord:
    return DeveloperRecord(
        column_value(row, 0, int, "id_dev"),
        column_value(row, 1, int, "id_proyek"),
        column_value(row, 2, str, "nama_dev"),
        column_value(row, 3, str, "status_kontrak"),
        column_value(row, 4, str, "fitur_selesai"),
        column_value(row, 5, int, "jumlah_bug"),
    )


class DeveloperRepository(BaseRepository):
    table = DeveloperRow.__table__

    def __init__(self, engine: AsyncEngine):
        super().__init__(engine)
        c = self.table.c
        self._columns = (
            c.id_dev,
            c.id_proyek,
            c.nama_dev,
            c.status_kontrak,
            c.fitur_selesai,
            c.jumlah_bug,
        )

    @staticmethod
    def _values(project_id, name, contract_status, features_completed, bug_count) -> dict:
        return {
            "id_proyek": project_id,
            "nama_dev": name,
            "status_kontrak": contract_status,
            "fitur_selesai": features_completed,
            "jumlah_bug": bug_count,
        }

    async def add(
        self,
        project_id: int,
        name: str,
        contract_status: str,
        features_completed: str,
        bug_count: int,
    ) -> int:
        return await self._insert_returning_id(
            "add",
            "id_dev",
            self._values(project_id, name, contract_status, features_completed, bug_count),
        )

    async def update(
        self,
        developer_id: int,
        project_id: int,
        name: str,
        contract_status: str,
        features_completed: str,
        bug_count: int,
    ) -> bool:
        return await self._update_by_id(
            "update",
            "id_dev",
            developer_id,
            self._values(project_id, name, contract_status, features_completed, bug_count),
        )

    async def delete(self, developer_id: int) -> bool:
        return await self._delete_by_id("delete", "id_dev", developer_id)

    async def get_all(self) -> list[DeveloperRecord]:
        stmt = select(*self._columns).order_by(self.table.c.id_dev)
        return await self._fetch("get_all", stmt, _to_record)

    async def get_by_id(self, developer_id: int) -> DeveloperRecord | None:
        stmt = select(*self._columns).where(self.table.c.id_dev == developer_id)
        records = await self._fetch("get_by_id", stmt, _to_record)
        return records[0] if records else None

    async def get_by_project(self, project_id: int) -> list[DeveloperRecord]:
        stmt = (
            select(*self._columns)
            .where(self.table.c.id_proyek == project_id)
            .order_by(self.table.c.id_dev)
        )
        return await self._fetch("get_by_project", stmt, _to_record)
