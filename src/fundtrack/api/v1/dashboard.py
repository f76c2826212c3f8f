"""Dashboard endpoints - read-only aggregates."""

from fastapi import APIRouter

from src.fundtrack.api.dependencies import DashboardRepo
from src.fundtrack.schemas.dashboard import (
    InvestmentTotals,
    InvestorTotals,
    ProjectTotals,
    TimelineEvent,
)

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get(
    "/total-active-investment",
    response_model=InvestmentTotals,
    summary="Investment totals",
    description="Total active investment and the share in projects still in progress.",
)
async def total_active_investment(dashboard: DashboardRepo) -> InvestmentTotals:
    return InvestmentTotals.model_validate(dict(await dashboard.investment_totals()))


@router.get(
    "/total-active-investors",
    response_model=InvestorTotals,
    summary="Investor counts",
)
async def total_active_investors(dashboard: DashboardRepo) -> InvestorTotals:
    return InvestorTotals.model_validate(dict(await dashboard.investor_totals()))


@router.get(
    "/total-active-projects",
    response_model=ProjectTotals,
    summary="Project counts",
)
async def total_active_projects(dashboard: DashboardRepo) -> ProjectTotals:
    return ProjectTotals.model_validate(dict(await dashboard.project_totals()))


@router.get(
    "/latest-activities-timeline",
    response_model=list[TimelineEvent],
    summary="Recent activity",
    description="The ten most recent investments and status changes, newest first.",
)
async def latest_activities_timeline(dashboard: DashboardRepo) -> list[TimelineEvent]:
    rows = await dashboard.latest_activities()
    return [TimelineEvent.model_validate(dict(row)) for row in rows]
