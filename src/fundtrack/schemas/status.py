"""Status schemas: definitions and free-text status updates."""

from datetime import datetime

from pydantic import Field

from src.fundtrack.schemas.common import WireModel


class StatusDefinitionRead(WireModel):
    status_id: int
    status: str
    percentage_completion: int
    active: str


class StatusUpdateCreate(WireModel):
    project_id: int
    status: str = Field(min_length=1, max_length=255)


class StatusUpdateChange(WireModel):
    status: str = Field(min_length=1, max_length=255)


class StatusUpdateRead(WireModel):
    status_id: int
    project_id: int
    status: str
    status_timestamp: datetime
