"""Investment model - links an investor's money to a project."""

from datetime import date
from decimal import Decimal

from sqlmodel import Field, SQLModel

from src.fundtrack.models.enums import ActiveFlag


class Investment(SQLModel, table=True):
    __tablename__ = "project_investments"

    investment_id: int | None = Field(default=None, primary_key=True)
    project_id: int = Field(foreign_key="projects.project_id", index=True)
    investor_id: int = Field(foreign_key="investors.investor_id", index=True)
    investment_amount: Decimal = Field(max_digits=12, decimal_places=2)
    investment_date: date
    active: str = Field(default=ActiveFlag.YES.value, max_length=1, index=True)
