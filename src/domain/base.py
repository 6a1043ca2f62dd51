from datetime import UTC, datetime


def utc_now() -> datetime:
    """Current UTC time as a naive datetime, matching the stored column type."""
    return datetime.now(UTC).replace(tzinfo=None)


def to_iso(value: datetime) -> str:
    return value.isoformat() + "Z"
