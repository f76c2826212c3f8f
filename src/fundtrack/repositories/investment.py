"""Repository for Investment entity."""

from sqlalchemy import RowMapping, Select, select
from sqlmodel import col

from src.fundtrack.models import ActiveFlag, Investment, Investor, Project
from src.fundtrack.repositories.base import BaseRepository


def _details_query() -> Select:
    """Active investments joined to project title and investor name."""
    return (
        select(
            Investment.investment_id,
            Investment.project_id,
            col(Project.title).label("project_title"),
            Investment.investor_id,
            col(Investor.name).label("investor_name"),
            Investment.investment_amount,
            Investment.investment_date,
            Investment.active,
        )
        .select_from(Investment)
        .join(Project, Project.project_id == Investment.project_id)
        .join(Investor, Investor.investor_id == Investment.investor_id)
        .where(Investment.active == ActiveFlag.YES.value)
    )


class InvestmentRepository(BaseRepository[Investment]):
    """Repository for Investment entity."""

    model = Investment
    id_field = "investment_id"

    async def list_with_details(self) -> list[RowMapping]:
        result = await self.session.execute(
            _details_query().order_by(col(Investment.investment_id))
        )
        return list(result.mappings().all())

    async def get_with_details(self, investment_id: int) -> RowMapping | None:
        result = await self.session.execute(
            _details_query().where(Investment.investment_id == investment_id)
        )
        return result.mappings().one_or_none()
