from datetime import UTC, datetime


def utc_now() -> datetime:
    """Current UTC time as a naive datetime, matching what the store round-trips."""
    return datetime.now(UTC).replace(tzinfo=None)
