from datetime import UTC, datetime

from sqlalchemy import DateTime

# Column type for every timestamp field; values are naive UTC
NaiveTimestamp = DateTime(timezone=False)


def utc_now() -> datetime:
    """Return current UTC time as naive datetime (for TIMESTAMP columns).

    Database columns use TIMESTAMP WITHOUT TIME ZONE, so we strip tzinfo.
    All times are stored in UTC by convention.
    """
    return datetime.now(UTC).replace(tzinfo=None)
