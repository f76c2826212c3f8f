"""Shared enums for models."""

from enum import Enum


class ActiveFlag(str, Enum):
    """Soft-delete marker stored in every `active` column."""

    YES = "Y"
    NO = "N"


class EventType(str, Enum):
    """Kinds of entries in the dashboard activity timeline."""

    INVESTMENT = "investment"
    STATUS_CHANGE = "status_change"
