"""Project and project status history models."""

from datetime import datetime

from sqlmodel import Field, SQLModel

from src.fundtrack.models.base import NaiveTimestamp, utc_now
from src.fundtrack.models.enums import ActiveFlag


class Project(SQLModel, table=True):
    """A fundable project. Soft-deleted by flipping `active` to 'N'."""

    __tablename__ = "projects"

    project_id: int | None = Field(default=None, primary_key=True)
    title: str = Field(max_length=255)
    description: str | None = Field(default=None)
    created_at: datetime = Field(default_factory=utc_now, sa_type=NaiveTimestamp)
    active: str = Field(default=ActiveFlag.YES.value, max_length=1, index=True)


class ProjectStatus(SQLModel, table=True):
    """One entry of a project's status history.

    The project's current status is the entry with the latest `status_date`;
    it is derived at query time and never stored.
    """

    __tablename__ = "project_statuses"

    project_status_id: int | None = Field(default=None, primary_key=True)
    project_id: int = Field(foreign_key="projects.project_id", index=True)
    status_id: int = Field(foreign_key="def_status.status_id")
    status_date: datetime = Field(default_factory=utc_now, sa_type=NaiveTimestamp, index=True)
    active: str = Field(default=ActiveFlag.YES.value, max_length=1)
