"""Test helper functions for common data creation patterns."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from src.fundtrack.models import Investment, Investor, Project
from tests.factories import (
    InvestmentFactory,
    InvestorFactory,
    ProjectFactory,
    ProjectStatusFactory,
)

# Mirrors the seeded catalogue: (status_id, status, percentage_completion, active)
STATUS_DEFINITIONS = [
    (1, "Commenced", 0, "Y"),
    (2, "Construction", 50, "Y"),
    (3, "Completed", 100, "Y"),
    (4, "Cancelled", 0, "N"),
]
COMMENCED, CONSTRUCTION, COMPLETED, CANCELLED = 1, 2, 3, 4


async def create_project_with_status(
    session: AsyncSession,
    status_id: int = COMMENCED,
    status_date: datetime | None = None,
    **project_kwargs,
) -> Project:
    """Create a project and its first status history entry.

    Args:
        session: Database session
        status_id: Status definition for the history entry
        status_date: Timestamp of the entry (factory default if None)
        **project_kwargs: Additional args passed to ProjectFactory
    """
    project = ProjectFactory.build(**project_kwargs)
    session.add(project)
    await session.flush()

    status_kwargs = {"status_date": status_date} if status_date else {}
    session.add(
        ProjectStatusFactory.build(
            project_id=project.project_id, status_id=status_id, **status_kwargs
        )
    )
    await session.commit()
    await session.refresh(project)
    return project


async def add_project_status(
    session: AsyncSession, project: Project, status_id: int, status_date: datetime
) -> None:
    """Append a status history entry to an existing project."""
    session.add(
        ProjectStatusFactory.build(
            project_id=project.project_id, status_id=status_id, status_date=status_date
        )
    )
    await session.commit()


async def create_investor(session: AsyncSession, **kwargs) -> Investor:
    investor = InvestorFactory.build(**kwargs)
    session.add(investor)
    await session.commit()
    await session.refresh(investor)
    return investor


async def create_investment(
    session: AsyncSession,
    project: Project,
    investor: Investor,
    amount: str | Decimal = "1000.00",
    **kwargs,
) -> Investment:
    investment = InvestmentFactory.build(
        project_id=project.project_id,
        investor_id=investor.investor_id,
        investment_amount=Decimal(amount),
        **kwargs,
    )
    session.add(investment)
    await session.commit()
    await session.refresh(investment)
    return investment
