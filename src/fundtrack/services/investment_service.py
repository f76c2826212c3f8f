"""Investment management service."""

from sqlalchemy import RowMapping
from sqlalchemy.ext.asyncio import AsyncSession

from src.fundtrack.core.logging import get_logger
from src.fundtrack.models import Investment
from src.fundtrack.repositories import InvestmentRepository
from src.fundtrack.schemas.investment import InvestmentCreate, InvestmentUpdate

logger = get_logger(__name__)


class InvestmentService:
    def __init__(self, investment_repo: InvestmentRepository, session: AsyncSession):
        self.investment_repo = investment_repo
        self.session = session

    async def list_with_details(self) -> list[RowMapping]:
        return await self.investment_repo.list_with_details()

    async def get_with_details(self, investment_id: int) -> RowMapping | None:
        return await self.investment_repo.get_with_details(investment_id)

    async def create_investment(self, data: InvestmentCreate) -> Investment:
        """Record a new active investment.

        Raises:
            ValueError: If any field is missing, zero or empty.
        """
        if not data.is_complete():
            raise ValueError("All fields are required.")

        investment = Investment(
            project_id=data.project_id,  # type: ignore[arg-type]
            investor_id=data.investor_id,  # type: ignore[arg-type]
            investment_amount=data.investment_amount,  # type: ignore[arg-type]
            investment_date=data.investment_date,  # type: ignore[arg-type]
        )
        self.investment_repo.add(investment)
        try:
            await self.session.commit()
            await self.session.refresh(investment)
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            "Investment created",
            investment_id=investment.investment_id,
            project_id=investment.project_id,
            investor_id=investment.investor_id,
        )
        return investment

    async def update_investment(self, investment_id: int, data: InvestmentUpdate) -> bool:
        """Apply a partial update; untouched columns keep their values.

        Returns:
            False if the id matched no row.

        Raises:
            ValueError: If the request carries no updatable field.
        """
        changes = data.changes()
        if not changes:
            raise ValueError("At least one field is required.")

        affected = await self.investment_repo.update_fields(investment_id, changes)
        await self.session.commit()
        if affected:
            logger.info(
                "Investment updated",
                investment_id=investment_id,
                fields=sorted(changes),
            )
        return affected > 0

    async def deactivate_investment(self, investment_id: int) -> bool:
        affected = await self.investment_repo.deactivate(investment_id)
        await self.session.commit()
        if affected:
            logger.info("Investment deactivated", investment_id=investment_id)
        return affected > 0
