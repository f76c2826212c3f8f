"""Project lifecycle: creation with an initial status, updates, soft delete."""

from sqlalchemy import RowMapping
from sqlalchemy.ext.asyncio import AsyncSession

from src.fundtrack.core.logging import get_logger
from src.fundtrack.models import Project
from src.fundtrack.repositories import ProjectRepository
from src.fundtrack.schemas.project import ProjectCreate, ProjectUpdate

logger = get_logger(__name__)


class ProjectService:
    """Project business logic.

    Multi-statement operations (create, update with a status change) run in
    one transaction: either every row is written or none is.
    """

    def __init__(
        self,
        project_repo: ProjectRepository,
        session: AsyncSession,
        initial_status_id: int,
    ):
        self.project_repo = project_repo
        self.session = session
        self.initial_status_id = initial_status_id

    async def list_active(self) -> list[Project]:
        return await self.project_repo.list_active()

    async def list_with_status(self) -> list[RowMapping]:
        return await self.project_repo.list_with_status()

    async def get_with_latest_status(self, project_id: int) -> RowMapping | None:
        return await self.project_repo.get_with_latest_status(project_id)

    async def list_status_history(self, project_id: int) -> list[RowMapping] | None:
        """Status history for a project, or None if the project does not exist."""
        if await self.project_repo.get_by_id(project_id) is None:
            return None
        return await self.project_repo.list_status_history(project_id)

    async def create_project(self, data: ProjectCreate) -> RowMapping:
        """Create a project and record its commencement as the first status.

        Raises:
            ValueError: If title or commencement date is missing.
        """
        if not data.title or not data.commencement_date:
            raise ValueError("Title and Commencement Date are required.")

        project = Project(title=data.title, description=data.description)
        self.project_repo.add(project)
        try:
            await self.session.flush()
            self.project_repo.add_status(
                project.project_id,  # type: ignore[arg-type]
                self.initial_status_id,
                data.commencement_date,
            )
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            "Project created",
            project_id=project.project_id,
            status_id=self.initial_status_id,
        )
        created = await self.project_repo.get_with_latest_status(project.project_id)  # type: ignore[arg-type]
        if created is None:
            raise RuntimeError(f"Project {project.project_id} not readable after commit")
        return created

    async def update_project(self, project_id: int, data: ProjectUpdate) -> RowMapping | None:
        """Overwrite title/description and append a status if it changed.

        A status is appended only when both status id and date are supplied
        and the id differs from the current latest status, so repeating the
        current status never grows the history.

        Returns:
            The updated project with its latest status, or None if not found.

        Raises:
            ValueError: If title is missing.
        """
        if not data.title:
            raise ValueError("Title is required.")

        project = await self.project_repo.get_by_id(project_id)
        if project is None:
            return None

        project.title = data.title
        project.description = data.description
        status_appended = False
        try:
            if data.status_id and data.status_date:
                current_status_id = await self.project_repo.get_latest_status_id(project_id)
                if current_status_id != data.status_id:
                    self.project_repo.add_status(project_id, data.status_id, data.status_date)
                    status_appended = True
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            "Project updated",
            project_id=project_id,
            status_appended=status_appended,
        )
        return await self.project_repo.get_with_latest_status(project_id)

    async def deactivate_project(self, project_id: int) -> bool:
        """Soft delete. False if the project is missing or already inactive."""
        affected = await self.project_repo.deactivate(project_id)
        await self.session.commit()
        if affected:
            logger.info("Project deactivated", project_id=project_id)
        return affected > 0
