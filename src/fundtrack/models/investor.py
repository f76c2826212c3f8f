"""Investor model."""

from sqlmodel import Field, SQLModel

from src.fundtrack.models.enums import ActiveFlag


class Investor(SQLModel, table=True):
    __tablename__ = "investors"

    investor_id: int | None = Field(default=None, primary_key=True)
    name: str | None = Field(default=None, max_length=255, index=True)
    contact_number: str | None = Field(default=None, max_length=50)
    address: str | None = Field(default=None)
    alias: str | None = Field(default=None, max_length=100)
    active: str = Field(default=ActiveFlag.YES.value, max_length=1, index=True)
