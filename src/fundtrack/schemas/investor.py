"""Investor schemas for API request/response."""

from src.fundtrack.schemas.common import Money, WireModel


class InvestorWrite(WireModel):
    """Full set of editable investor fields, used for create and update."""

    name: str | None = None
    contact_number: str | None = None
    address: str | None = None
    alias: str | None = None


class InvestorRead(InvestorWrite):
    investor_id: int
    active: str


class InvestorWithDetails(WireModel):
    """Investor with portfolio rollups."""

    investor_id: int
    name: str | None = None
    contact_number: str | None = None
    address: str | None = None
    alias: str | None = None
    total_projects: int
    active_projects: int
    active_investment: Money
    total_investment: Money
