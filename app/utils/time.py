from datetime import datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def from_timestamp(value: int) -> datetime:
    return datetime.fromtimestamp(int(value), tz=timezone.utc)
