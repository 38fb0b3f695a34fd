"""
Clock and calendar helpers.

All calendar dates use the device-local timezone, both when they are stored
and when they are compared.
"""
from datetime import date, datetime
from typing import Callable, Optional

Clock = Callable[[], datetime]

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"


def local_now() -> datetime:
    return datetime.now().astimezone()


def local_today(clock: Optional[Clock] = None) -> date:
    """Current calendar date in the device-local timezone."""
    now = (clock or local_now)()
    if now.tzinfo is not None:
        now = now.astimezone()
    return now.date()


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def parse_date(value: str) -> Optional[date]:
    """Parse a stored YYYY-MM-DD string; empty or malformed values give None."""
    if not value:
        return None
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        return None


def to_epoch_millis(value: datetime) -> int:
    if value.tzinfo is None:
        value = value.astimezone()
    return int(value.timestamp() * 1000)


def from_epoch_millis(millis: int) -> datetime:
    """Local-time datetime for an epoch timestamp in milliseconds."""
    return datetime.fromtimestamp(millis / 1000).astimezone()
