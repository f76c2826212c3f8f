"""Shared schema plumbing.

The public JSON contract keeps the column spelling clients already consume
(`Project_ID`, `Investment_Amount`, ...), while Python code uses snake_case.
"""

from datetime import UTC, datetime
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer


def to_wire_name(field_name: str) -> str:
    """Map a snake_case field to its wire name.

    >>> to_wire_name("project_id")
    'Project_ID'
    >>> to_wire_name("investment_amount")
    'Investment_Amount'
    """
    return "_".join("ID" if part == "id" else part.capitalize() for part in field_name.split("_"))


# Amounts are stored as NUMERIC but emitted as JSON numbers
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class WireModel(BaseModel):
    """Base for request/response bodies using wire names."""

    model_config = ConfigDict(
        alias_generator=to_wire_name,
        populate_by_name=True,
        from_attributes=True,
    )


def strip_or_none(v: str | None) -> str | None:
    """Trim text input; blank strings count as absent."""
    if v is None:
        return None
    v = v.strip()
    return v or None


def to_naive_utc(v: datetime | None) -> datetime | None:
    """Normalise timestamps to naive UTC to match TIMESTAMP WITHOUT TIME ZONE columns."""
    if v is None or v.tzinfo is None:
        return v
    return v.astimezone(UTC).replace(tzinfo=None)


class MessageResponse(BaseModel):
    """Plain acknowledgement body."""

    message: str
