"""Status reference data and the free-text status log."""

from datetime import datetime

from sqlmodel import Field, SQLModel

from src.fundtrack.models.base import NaiveTimestamp, utc_now
from src.fundtrack.models.enums import ActiveFlag


class StatusDefinition(SQLModel, table=True):
    """Read-only catalogue of project stages (Def_Status)."""

    __tablename__ = "def_status"

    status_id: int | None = Field(default=None, primary_key=True)
    status: str = Field(max_length=100)
    percentage_completion: int = Field(default=0, ge=0, le=100)
    active: str = Field(default=ActiveFlag.YES.value, max_length=1)


class StatusUpdate(SQLModel, table=True):
    """Free-text status note attached to a project.

    Unlike the rest of the schema this table has no active flag: rows are
    rewritten in place and deleted outright.
    """

    __tablename__ = "status_updates"

    status_id: int | None = Field(default=None, primary_key=True)
    project_id: int = Field(index=True)
    status: str = Field(max_length=255)
    status_timestamp: datetime = Field(default_factory=utc_now, sa_type=NaiveTimestamp)
