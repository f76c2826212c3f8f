"""Repository for Project and its status history."""

from datetime import datetime

from sqlalchemy import RowMapping, and_, func, select
from sqlmodel import col

from src.fundtrack.models import ActiveFlag, Investment, Project, ProjectStatus, StatusDefinition
from src.fundtrack.repositories.base import BaseRepository
from src.fundtrack.repositories.latest_status import latest_status_subquery


class ProjectRepository(BaseRepository[Project]):
    """Repository for Project entity."""

    model = Project
    id_field = "project_id"

    async def list_with_status(self) -> list[RowMapping]:
        """Active projects joined to their latest status with investment rollups.

        Projects without a resolvable latest status are omitted. Sums and
        counts only consider active investments and default to zero.
        """
        latest = latest_status_subquery()
        query = (
            select(
                Project.project_id,
                Project.title,
                Project.description,
                latest.c.status_id,
                latest.c.status,
                latest.c.percentage_completion,
                latest.c.status_date,
                func.coalesce(func.sum(Investment.investment_amount), 0).label("total_investment"),
                func.count(func.distinct(Investment.investor_id)).label("total_unique_investors"),
            )
            .select_from(Project)
            .join(latest, latest.c.project_id == Project.project_id)
            .outerjoin(
                Investment,
                and_(
                    Investment.project_id == Project.project_id,
                    Investment.active == ActiveFlag.YES.value,
                ),
            )
            .where(Project.active == ActiveFlag.YES.value)
            .group_by(
                Project.project_id,
                Project.title,
                Project.description,
                latest.c.status_id,
                latest.c.status,
                latest.c.percentage_completion,
                latest.c.status_date,
            )
            .order_by(latest.c.status_date.desc(), col(Project.project_id).desc())
        )
        result = await self.session.execute(query)
        return list(result.mappings().all())

    async def get_with_latest_status(self, project_id: int) -> RowMapping | None:
        """A project (active or not) with its latest status, if it has one."""
        latest = latest_status_subquery()
        query = (
            select(
                Project.project_id,
                Project.title,
                Project.description,
                Project.created_at,
                Project.active,
                latest.c.status_id,
                latest.c.status_date,
                latest.c.status,
                latest.c.percentage_completion,
            )
            .select_from(Project)
            .outerjoin(latest, latest.c.project_id == Project.project_id)
            .where(Project.project_id == project_id)
        )
        result = await self.session.execute(query)
        return result.mappings().one_or_none()

    async def get_latest_status_id(self, project_id: int) -> int | None:
        """Status definition id of the project's current status."""
        latest = latest_status_subquery()
        result = await self.session.execute(
            select(latest.c.status_id).where(latest.c.project_id == project_id)
        )
        return result.scalar_one_or_none()

    def add_status(self, project_id: int, status_id: int, status_date: datetime) -> ProjectStatus:
        """Append a status history row (no flush/commit)."""
        entry = ProjectStatus(project_id=project_id, status_id=status_id, status_date=status_date)
        self.session.add(entry)
        return entry

    async def list_status_history(self, project_id: int) -> list[RowMapping]:
        """All active history rows for a project, newest first."""
        query = (
            select(
                ProjectStatus.project_status_id,
                ProjectStatus.project_id,
                ProjectStatus.status_id,
                StatusDefinition.status,
                StatusDefinition.percentage_completion,
                ProjectStatus.status_date,
                ProjectStatus.active,
            )
            .select_from(ProjectStatus)
            .outerjoin(StatusDefinition, StatusDefinition.status_id == ProjectStatus.status_id)
            .where(
                ProjectStatus.project_id == project_id,
                ProjectStatus.active == ActiveFlag.YES.value,
            )
            .order_by(
                col(ProjectStatus.status_date).desc(),
                col(ProjectStatus.project_status_id).desc(),
            )
        )
        result = await self.session.execute(query)
        return list(result.mappings().all())
