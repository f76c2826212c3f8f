"""Status catalogue and free-text status update log."""

from sqlalchemy.ext.asyncio import AsyncSession

from src.fundtrack.core.logging import get_logger
from src.fundtrack.models import StatusDefinition, StatusUpdate
from src.fundtrack.repositories import StatusDefinitionRepository, StatusUpdateRepository
from src.fundtrack.schemas.status import StatusUpdateCreate

logger = get_logger(__name__)


class StatusService:
    """Status updates are rewritten in place and hard deleted.

    This is the one table without a soft-delete flag.
    """

    def __init__(
        self,
        definition_repo: StatusDefinitionRepository,
        update_repo: StatusUpdateRepository,
        session: AsyncSession,
    ):
        self.definition_repo = definition_repo
        self.update_repo = update_repo
        self.session = session

    async def list_definitions(self) -> list[StatusDefinition]:
        return await self.definition_repo.list_active()

    async def list_updates(self) -> list[StatusUpdate]:
        return await self.update_repo.list_all()

    async def list_project_updates(self, project_id: int) -> list[StatusUpdate]:
        return await self.update_repo.list_for_project(project_id)

    async def create_update(self, data: StatusUpdateCreate) -> StatusUpdate:
        """Log a status note stamped with the current time."""
        entry = StatusUpdate(project_id=data.project_id, status=data.status)
        self.update_repo.add(entry)
        try:
            await self.session.commit()
            await self.session.refresh(entry)
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Status update created", status_id=entry.status_id, project_id=entry.project_id)
        return entry

    async def rewrite_update(self, status_id: int, status: str) -> bool:
        affected = await self.update_repo.rewrite(status_id, status)
        await self.session.commit()
        if affected:
            logger.info("Status update rewritten", status_id=status_id)
        return affected > 0

    async def delete_update(self, status_id: int) -> bool:
        affected = await self.update_repo.delete(status_id)
        await self.session.commit()
        if affected:
            logger.info("Status update deleted", status_id=status_id)
        return affected > 0
