"""Repositories for status definitions and free-text status updates."""

from sqlalchemy import delete, update
from sqlmodel import col, select

from src.fundtrack.models import ActiveFlag, StatusDefinition, StatusUpdate
from src.fundtrack.models.base import utc_now
from src.fundtrack.repositories.base import BaseRepository


class StatusDefinitionRepository(BaseRepository[StatusDefinition]):
    """Read-only access to the status catalogue."""

    model = StatusDefinition
    id_field = "status_id"

    async def list_active(self) -> list[StatusDefinition]:
        """Active definitions in order of progress."""
        result = await self.session.execute(
            select(StatusDefinition)
            .where(StatusDefinition.active == ActiveFlag.YES.value)
            .order_by(
                col(StatusDefinition.percentage_completion),
                col(StatusDefinition.status_id),
            )
        )
        return list(result.scalars().all())


class StatusUpdateRepository(BaseRepository[StatusUpdate]):
    """Repository for the status update log (no soft delete)."""

    model = StatusUpdate
    id_field = "status_id"

    async def list_all(self) -> list[StatusUpdate]:
        result = await self.session.execute(
            select(StatusUpdate).order_by(col(StatusUpdate.status_id))
        )
        return list(result.scalars().all())

    async def list_for_project(self, project_id: int) -> list[StatusUpdate]:
        """Updates for one project, newest first."""
        result = await self.session.execute(
            select(StatusUpdate)
            .where(StatusUpdate.project_id == project_id)
            .order_by(
                col(StatusUpdate.status_timestamp).desc(),
                col(StatusUpdate.status_id).desc(),
            )
        )
        return list(result.scalars().all())

    async def rewrite(self, status_id: int, status: str) -> int:
        """Replace the text of an update and stamp it with the current time."""
        result = await self.session.execute(
            update(StatusUpdate)
            .where(StatusUpdate.status_id == status_id)
            .values(status=status, status_timestamp=utc_now())
        )
        return result.rowcount

    async def delete(self, status_id: int) -> int:
        """Hard delete one update."""
        result = await self.session.execute(
            delete(StatusUpdate).where(StatusUpdate.status_id == status_id)
        )
        return result.rowcount
