"""Validation and orchestration over the project and developer repositories.

Every public method is fail-soft: validation rejections, missing projects
and store failures all come back as ``False``, ``None`` or ``[]``. The
``try_*`` variants return the underlying :class:`OperationResult` for
callers that need to tell those cases apart.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncEngine
from structlog.contextvars import bound_contextvars

from devtrack.errors.exceptions import PersistenceError
from devtrack.models.common import is_blank
from devtrack.models.developer import Developer
from devtrack.models.project import Project
from devtrack.repositories.developer_repo import DeveloperRecord, DeveloperRepository
from devtrack.repositories.project_repo import ProjectRecord, ProjectRepository
from devtrack.services.result import OperationResult, Outcome

logger = logging.getLogger(__name__)

T = TypeVar("T")


def project_from_record(record: ProjectRecord) -> Project:
    return Project(
        id=record.id_proyek,
        name=record.nama_proyek,
        client=record.client,
        budget=record.budget,
    )


def developer_from_record(record: DeveloperRecord) -> Developer:
    return Developer(
        id=record.id_dev,
        project_id=record.id_proyek,
        name=record.nama_dev,
        contract_status=record.status_kontrak,
        features_completed=record.fitur_selesai,
        bug_count=record.jumlah_bug,
    )


def _is_integer(value) -> bool:
    # bool is an int subclass but never a count, an id or an amount
    return isinstance(value, int) and not isinstance(value, bool)


def _id_rejection(label: str, value) -> str | None:
    if not _is_integer(value):
        return f"{label} must be an integer"
    if value <= 0:
        return f"{label} must be positive"
    return None


def _text_rejection(label: str, value) -> str | None:
    if value is not None and not isinstance(value, str):
        return f"{label} must be a string"
    if is_blank(value):
        return f"{label} is blank"
    return None


def _project_fields_rejection(name, client, budget) -> str | None:
    reason = _text_rejection("project name", name) or _text_rejection("client", client)
    if reason:
        return reason
    if not _is_integer(budget):
        return "budget must be an integer"
    if budget <= 0:
        return "budget must be positive"
    return None


def _developer_fields_rejection(project_id, name, contract_status, features_completed, bug_count) -> str | None:
    reason = (
        _id_rejection("project id", project_id)
        or _text_rejection("developer name", name)
        or _text_rejection("contract status", contract_status)
        or _text_rejection("features completed", features_completed)
    )
    if reason:
        return reason
    if not _is_integer(bug_count):
        return "bug count must be an integer"
    if bug_count < 0:
        return "bug count must not be negative"
    return None


def _is_integrity_violation(result: OperationResult) -> bool:
    cause = result.cause
    return (
        result.outcome is Outcome.FAILED
        and isinstance(cause, PersistenceError)
        and isinstance(cause.cause, IntegrityError)
    )


class DeveloperService:
    """Gatekeeper between callers and the two repositories."""

    def __init__(self, project_repo: ProjectRepository, developer_repo: DeveloperRepository):
        self._projects = project_repo
        self._developers = developer_repo

    @classmethod
    def from_engine(cls, engine: AsyncEngine) -> "DeveloperService":
        return cls(ProjectRepository(engine), DeveloperRepository(engine))

    # ------------------------------------------------------------------
    # Result plumbing
    # ------------------------------------------------------------------

    @staticmethod
    def _reject(operation: str, reason: str) -> OperationResult:
        logger.info("%s rejected: %s", operation, reason)
        return OperationResult.rejected(reason)

    @staticmethod
    async def _attempt(operation: str, call: Callable[[], Awaitable[T]]) -> OperationResult[T]:
        """Run one store call, turning any exception into a FAILED result."""
        with bound_contextvars(operation=operation):
            try:
                value = await call()
            except PersistenceError as exc:
                logger.warning("%s failed: %s", operation, exc)
                return OperationResult.failed(exc.message, exc)
            except Exception as exc:
                logger.exception("%s failed unexpectedly", operation)
                return OperationResult.failed(str(exc), exc)
        return OperationResult.ok(value)

    async def _require_project(self, operation: str, project_id: int) -> OperationResult[bool]:
        found = await self._attempt(operation, lambda: self._projects.exists(project_id))
        if found.succeeded and not found.value:
            return self._reject(operation, f"project {project_id} does not exist")
        return found

    def _developer_write_outcome(self, operation: str, project_id: int, result: OperationResult) -> OperationResult:
        # The check-then-write is not atomic; a foreign key violation means
        # the project vanished in between.
        if _is_integrity_violation(result):
            return self._reject(operation, f"project {project_id} no longer exists")
        return result

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------

    async def try_add_project(self, name: str, client: str, budget: int) -> OperationResult[int]:
        reason = _project_fields_rejection(name, client, budget)
        if reason:
            return self._reject("add_project", reason)
        result = await self._attempt("add_project", lambda: self._projects.add(name, client, budget))
        if result.succeeded and result.value <= 0:
            return OperationResult.failed("store reported no generated id")
        return result

    async def add_project(self, name: str, client: str, budget: int) -> bool:
        return (await self.try_add_project(name, client, budget)).succeeded

    async def try_update_project(self, project_id: int, name: str, client: str, budget: int) -> OperationResult[bool]:
        reason = _id_rejection("project id", project_id) or _project_fields_rejection(name, client, budget)
        if reason:
            return self._reject("update_project", reason)
        return await self._attempt(
            "update_project", lambda: self._projects.update(project_id, name, client, budget)
        )

    async def update_project(self, project_id: int, name: str, client: str, budget: int) -> bool:
        result = await self.try_update_project(project_id, name, client, budget)
        return result.succeeded and bool(result.value)

    async def try_delete_project(self, project_id: int) -> OperationResult[bool]:
        return await self._attempt("delete_project", lambda: self._projects.delete(project_id))

    async def delete_project(self, project_id: int) -> bool:
        result = await self.try_delete_project(project_id)
        return result.succeeded and bool(result.value)

    async def try_get_all_projects(self) -> OperationResult[list[Project]]:
        async def load() -> list[Project]:
            return [project_from_record(r) for r in await self._projects.get_all()]

        return await self._attempt("get_all_projects", load)

    async def get_all_projects(self) -> list[Project]:
        result = await self.try_get_all_projects()
        return result.value if result.succeeded else []

    async def try_get_project_by_id(self, project_id: int) -> OperationResult[Project | None]:
        async def load() -> Project | None:
            record = await self._projects.get_by_id(project_id)
            return project_from_record(record) if record else None

        return await self._attempt("get_project_by_id", load)

    async def get_project_by_id(self, project_id: int) -> Project | None:
        result = await self.try_get_project_by_id(project_id)
        return result.value if result.succeeded else None

    # ------------------------------------------------------------------
    # Developers
    # ------------------------------------------------------------------

    async def try_add_developer(
        self,
        project_id: int,
        name: str,
        contract_status: str,
        features_completed: str,
        bug_count: int,
    ) -> OperationResult[int]:
        reason = _developer_fields_rejection(project_id, name, contract_status, features_completed, bug_count)
        if reason:
            return self._reject("add_developer", reason)
        found = await self._require_project("add_developer", project_id)
        if not found.succeeded:
            return found

        result = await self._attempt(
            "add_developer",
            lambda: self._developers.add(project_id, name, contract_status, features_completed, bug_count),
        )
        result = self._developer_write_outcome("add_developer", project_id, result)
        if result.succeeded and result.value <= 0:
            return OperationResult.failed("store reported no generated id")
        return result

    async def add_developer(
        self,
        project_id: int,
        name: str,
        contract_status: str,
        features_completed: str,
        bug_count: int,
    ) -> bool:
        result = await self.try_add_developer(project_id, name, contract_status, features_completed, bug_count)
        return result.succeeded

    async def try_update_developer(
        self,
        developer_id: int,
        project_id: int,
        name: str,
        contract_status: str,
        features_completed: str,
        bug_count: int,
    ) -> OperationResult[bool]:
        reason = _id_rejection("developer id", developer_id) or _developer_fields_rejection(
            project_id, name, contract_status, features_completed, bug_count
        )
        if reason:
            return self._reject("update_developer", reason)
        found = await self._require_project("update_developer", project_id)
        if not found.succeeded:
            return found

        result = await self._attempt(
            "update_developer",
            lambda: self._developers.update(
                developer_id, project_id, name, contract_status, features_completed, bug_count
            ),
        )
        return self._developer_write_outcome("update_developer", project_id, result)

    async def update_developer(
        self,
        developer_id: int,
        project_id: int,
        name: str,
        contract_status: str,
        features_completed: str,
        bug_count: int,
    ) -> bool:
        result = await self.try_update_developer(
            developer_id, project_id, name, contract_status, features_completed, bug_count
        )
        return result.succeeded and bool(result.value)

    async def try_delete_developer(self, developer_id: int) -> OperationResult[bool]:
        return await self._attempt("delete_developer", lambda: self._developers.delete(developer_id))

    async def delete_developer(self, developer_id: int) -> bool:
        result = await self.try_delete_developer(developer_id)
        return result.succeeded and bool(result.value)

    async def try_get_all_developers(self) -> OperationResult[list[Developer]]:
        async def load() -> list[Developer]:
            return [developer_from_record(r) for r in await self._developers.get_all()]

        return await self._attempt("get_all_developers", load)

    async def get_all_developers(self) -> list[Developer]:
        result = await self.try_get_all_developers()
        return result.value if result.succeeded else []

    async def try_get_developer_by_id(self, developer_id: int) -> OperationResult[Developer | None]:
        async def load() -> Developer | None:
            record = await self._developers.get_by_id(developer_id)
            return developer_from_record(record) if record else None

        return await self._attempt("get_developer_by_id", load)

    async def get_developer_by_id(self, developer_id: int) -> Developer | None:
        result = await self.try_get_developer_by_id(developer_id)
        return result.value if result.succeeded else None

    async def try_get_developers_by_project(self, project_id: int) -> OperationResult[list[Developer]]:
        async def load() -> list[Developer]:
            return [developer_from_record(r) for r in await self._developers.get_by_project(project_id)]

        return await self._attempt("get_developers_by_project", load)

    async def get_developers_by_project(self, project_id: int) -> list[Developer]:
        result = await self.try_get_developers_by_project(project_id)
        return result.value if result.succeeded else []
