"""Repository for Investor entity."""

from sqlalchemy import RowMapping, and_, case, func, select
from sqlmodel import col

from src.fundtrack.models import ActiveFlag, Investment, Investor
from src.fundtrack.repositories.base import BaseRepository
from src.fundtrack.repositories.latest_status import is_in_progress, latest_status_subquery


class InvestorRepository(BaseRepository[Investor]):
    """Repository for Investor entity."""

    model = Investor
    id_field = "investor_id"

    async def list_with_details(self) -> list[RowMapping]:
        """Active investors with their portfolio rollups, ordered by name.

        Only active investments count. A project is "active" while its latest
        status is below 100% completion.
        """
        latest = latest_status_subquery()
        in_progress = is_in_progress(latest)
        query = (
            select(
                Investor.investor_id,
                Investor.name,
                Investor.contact_number,
                Investor.address,
                Investor.alias,
                func.count(func.distinct(Investment.project_id)).label("total_projects"),
                func.count(func.distinct(case((in_progress, Investment.project_id)))).label(
                    "active_projects"
                ),
                func.coalesce(
                    func.sum(case((in_progress, Investment.investment_amount), else_=0)), 0
                ).label("active_investment"),
                func.coalesce(func.sum(Investment.investment_amount), 0).label("total_investment"),
            )
            .select_from(Investor)
            .outerjoin(
                Investment,
                and_(
                    Investment.investor_id == Investor.investor_id,
                    Investment.active == ActiveFlag.YES.value,
                ),
            )
            .outerjoin(latest, latest.c.project_id == Investment.project_id)
            .where(Investor.active == ActiveFlag.YES.value)
            .group_by(
                Investor.investor_id,
                Investor.name,
                Investor.contact_number,
                Investor.address,
                Investor.alias,
            )
            .order_by(col(Investor.name).asc(), col(Investor.investor_id).asc())
        )
        result = await self.session.execute(query)
        return list(result.mappings().all())
