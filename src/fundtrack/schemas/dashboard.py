"""Dashboard aggregate schemas."""

from datetime import datetime

from src.fundtrack.models.enums import EventType
from src.fundtrack.schemas.common import Money, WireModel


class InvestmentTotals(WireModel):
    total_investment: Money
    active_investment: Money


class InvestorTotals(WireModel):
    total_investors: int
    active_investors: int


class ProjectTotals(WireModel):
    total_projects: int
    active_projects: int


class TimelineEvent(WireModel):
    """One entry of the recent-activity feed."""

    event_type: EventType
    event_date: datetime
    project_id: int
    project_title: str | None = None
    description: str | None = None
    amount: Money | None = None
