"""Project schemas for API request/response."""

from datetime import datetime

from pydantic import Field, field_validator

from src.fundtrack.schemas.common import Money, WireModel, strip_or_none, to_naive_utc


class ProjectCreate(WireModel):
    """Schema for creating a project.

    Title and commencement date are checked by the service so that a missing
    value yields the same message whichever one is absent.
    """

    title: str | None = Field(default=None, max_length=255)
    description: str | None = None
    commencement_date: datetime | None = None

    @field_validator("title", "description")
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        return strip_or_none(v)

    @field_validator("commencement_date")
    @classmethod
    def normalise_timestamp(cls, v: datetime | None) -> datetime | None:
        return to_naive_utc(v)


class ProjectUpdate(WireModel):
    """Schema for updating a project.

    Title and description are overwritten; a status change is appended to the
    history only when both `Status_ID` and `Status_Date` are given.
    """

    title: str | None = Field(default=None, max_length=255)
    description: str | None = None
    status_id: int | None = None
    status_date: datetime | None = None

    @field_validator("title", "description")
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        return strip_or_none(v)

    @field_validator("status_date")
    @classmethod
    def normalise_timestamp(cls, v: datetime | None) -> datetime | None:
        return to_naive_utc(v)


class ProjectRead(WireModel):
    project_id: int
    title: str
    description: str | None = None
    created_at: datetime | None = None
    active: str


class ProjectWithLatestStatus(ProjectRead):
    """A project joined to its latest status history entry."""

    status_id: int | None = None
    status_date: datetime | None = None
    status: str | None = None
    percentage_completion: int | None = None


class ProjectStatusSummary(WireModel):
    """Row of the projects-with-status rollup."""

    project_id: int
    title: str
    description: str | None = None
    status_id: int
    status: str
    percentage_completion: int
    status_date: datetime
    total_investment: Money
    total_unique_investors: int


class ProjectStatusHistoryEntry(WireModel):
    project_status_id: int
    project_id: int
    status_id: int
    status: str | None = None
    percentage_completion: int | None = None
    status_date: datetime
    active: str
