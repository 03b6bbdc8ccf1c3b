"""Date manipulation utilities"""

from datetime import datetime, timedelta, timezone
from typing import Callable

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Current time as an aware UTC datetime"""
    return datetime.now(timezone.utc)


def add_minutes(from_time: datetime, minutes: int) -> datetime:
    return from_time + timedelta(minutes=minutes)


def to_iso(value: datetime) -> str:
    """ISO-8601 with explicit offset; naive values are assumed UTC"""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat(timespec="seconds")
