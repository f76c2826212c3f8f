"""Read-only aggregate queries backing the dashboard."""

from sqlalchemy import RowMapping, and_, case, desc, func, literal, null, select, union_all
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import col

from src.fundtrack.models import (
    ActiveFlag,
    EventType,
    Investment,
    Investor,
    Project,
    ProjectStatus,
    StatusDefinition,
)
from src.fundtrack.repositories.latest_status import is_in_progress, latest_status_subquery

TIMELINE_LIMIT = 10


class DashboardRepository:
    """Aggregates over projects, investments and status history.

    Every figure splits into a total and an "active" share, where active
    means the project's latest status is below 100% completion.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def investment_totals(self) -> RowMapping:
        latest = latest_status_subquery()
        active_row = Investment.active == ActiveFlag.YES.value
        amount = Investment.investment_amount
        query = (
            select(
                func.coalesce(func.sum(case((active_row, amount), else_=0)), 0).label(
                    "total_investment"
                ),
                func.coalesce(
                    func.sum(case((and_(active_row, is_in_progress(latest)), amount), else_=0)),
                    0,
                ).label("active_investment"),
            )
            .select_from(Investment)
            .join(Project, Project.project_id == Investment.project_id)
            .join(latest, latest.c.project_id == Project.project_id)
        )
        result = await self.session.execute(query)
        return result.mappings().one()

    async def investor_totals(self) -> RowMapping:
        latest = latest_status_subquery()
        query = (
            select(
                func.count(func.distinct(Investment.investor_id)).label("total_investors"),
                func.count(
                    func.distinct(case((is_in_progress(latest), Investment.investor_id)))
                ).label("active_investors"),
            )
            .select_from(Investment)
            .join(
                Project,
                and_(
                    Project.project_id == Investment.project_id,
                    Project.active == ActiveFlag.YES.value,
                ),
            )
            .join(
                latest,
                and_(
                    latest.c.project_id == Project.project_id,
                    latest.c.status_active == ActiveFlag.YES.value,
                ),
            )
            .where(Investment.active == ActiveFlag.YES.value)
        )
        result = await self.session.execute(query)
        return result.mappings().one()

    async def project_totals(self) -> RowMapping:
        latest = latest_status_subquery()
        query = (
            select(
                func.count(Project.project_id).label("total_projects"),
                func.count(case((is_in_progress(latest), Project.project_id))).label(
                    "active_projects"
                ),
            )
            .select_from(Project)
            .join(latest, latest.c.project_id == Project.project_id)
            .where(Project.active == ActiveFlag.YES.value)
        )
        result = await self.session.execute(query)
        return result.mappings().one()

    async def latest_activities(self, limit: int = TIMELINE_LIMIT) -> list[RowMapping]:
        """Most recent status changes and investments, newest first.

        The status branch comes first so the union's event_date column keeps
        timestamp precision.
        """
        status_events = (
            select(
                literal(EventType.STATUS_CHANGE.value).label("event_type"),
                col(ProjectStatus.status_date).label("event_date"),
                col(Project.project_id).label("project_id"),
                col(Project.title).label("project_title"),
                col(StatusDefinition.status).label("description"),
                null().label("amount"),
            )
            .select_from(ProjectStatus)
            .join(Project, Project.project_id == ProjectStatus.project_id)
            .outerjoin(StatusDefinition, StatusDefinition.status_id == ProjectStatus.status_id)
            .where(ProjectStatus.active == ActiveFlag.YES.value)
        )
        investment_events = (
            select(
                literal(EventType.INVESTMENT.value).label("event_type"),
                col(Investment.investment_date).label("event_date"),
                col(Project.project_id).label("project_id"),
                col(Project.title).label("project_title"),
                col(Investor.name).label("description"),
                col(Investment.investment_amount).label("amount"),
            )
            .select_from(Investment)
            .join(Project, Project.project_id == Investment.project_id)
            .outerjoin(Investor, Investor.investor_id == Investment.investor_id)
            .where(Investment.active == ActiveFlag.YES.value)
        )
        events = union_all(status_events, investment_events).subquery("events")
        query = select(events).order_by(desc(events.c.event_date)).limit(limit)
        result = await self.session.execute(query)
        return list(result.mappings().all())
