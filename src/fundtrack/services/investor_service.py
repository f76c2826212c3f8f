"""Investor management service."""

from sqlalchemy import RowMapping
from sqlalchemy.ext.asyncio import AsyncSession

from src.fundtrack.core.logging import get_logger
from src.fundtrack.models import Investor
from src.fundtrack.repositories import InvestorRepository
from src.fundtrack.schemas.investor import InvestorWrite

logger = get_logger(__name__)


class InvestorService:
    """Investor CRUD. No field validation beyond what the database enforces."""

    def __init__(self, investor_repo: InvestorRepository, session: AsyncSession):
        self.investor_repo = investor_repo
        self.session = session

    async def list_active(self) -> list[Investor]:
        return await self.investor_repo.list_active()

    async def get_active(self, investor_id: int) -> Investor | None:
        return await self.investor_repo.get_active(investor_id)

    async def list_with_details(self) -> list[RowMapping]:
        return await self.investor_repo.list_with_details()

    async def create_investor(self, data: InvestorWrite) -> Investor:
        investor = Investor(**data.model_dump())
        self.investor_repo.add(investor)
        try:
            await self.session.commit()
            await self.session.refresh(investor)
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Investor created", investor_id=investor.investor_id)
        return investor

    async def update_investor(self, investor_id: int, data: InvestorWrite) -> bool:
        """Overwrite every editable field. False if no row matched."""
        affected = await self.investor_repo.update_fields(investor_id, data.model_dump())
        await self.session.commit()
        if affected:
            logger.info("Investor updated", investor_id=investor_id)
        return affected > 0

    async def deactivate_investor(self, investor_id: int) -> bool:
        affected = await self.investor_repo.deactivate(investor_id)
        await self.session.commit()
        if affected:
            logger.info("Investor deactivated", investor_id=investor_id)
        return affected > 0
