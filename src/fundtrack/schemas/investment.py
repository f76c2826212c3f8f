"""Investment schemas for API request/response."""

from datetime import date
from decimal import Decimal
from typing import Any

from src.fundtrack.models.enums import ActiveFlag
from src.fundtrack.schemas.common import Money, WireModel


class InvestmentCreate(WireModel):
    """Schema for creating an investment.

    Every field is required and must be truthy; the service enforces this so
    that zero amounts and ids are rejected alongside missing ones.
    """

    project_id: int | None = None
    investor_id: int | None = None
    investment_amount: Decimal | None = None
    investment_date: date | None = None

    def is_complete(self) -> bool:
        return all(
            (self.project_id, self.investor_id, self.investment_amount, self.investment_date)
        )


class InvestmentUpdate(WireModel):
    """Partial update: each field is independently optional."""

    project_id: int | None = None
    investor_id: int | None = None
    investment_amount: Decimal | None = None
    investment_date: date | None = None
    active: ActiveFlag | None = None

    def changes(self) -> dict[str, Any]:
        """Column values for the fields present in the request.

        Explicit nulls are dropped: every column is NOT NULL.
        """
        values = self.model_dump(exclude_unset=True, exclude_none=True)
        if "active" in values:
            values["active"] = ActiveFlag(values["active"]).value
        return values


class InvestmentRead(WireModel):
    investment_id: int
    project_id: int
    investor_id: int
    investment_amount: Money
    investment_date: date
    active: str


class InvestmentWithDetails(InvestmentRead):
    """Investment joined to its project title and investor name."""

    project_title: str
    investor_name: str | None = None
