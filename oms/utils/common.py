# utils/common.py
from datetime import datetime
import pytz


def utcnow() -> datetime:
    """Timezone-aware current time in UTC."""
    return datetime.now(pytz.UTC)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive timestamps, convert aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=pytz.UTC)
    return value.astimezone(pytz.UTC)
