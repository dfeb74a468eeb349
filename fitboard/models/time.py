from __future__ import annotations

import calendar
import time
from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime.

    Derived from ``time.time`` so a single clock drives token expiry checks
    and activity windows alike.
    """

    return datetime.fromtimestamp(time.time(), tz=timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC and normalize aware ones to UTC."""

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def months_before(moment: datetime, months: int) -> datetime:
    """Shift ``moment`` back by whole calendar months, clamping the day.

    Args:
        moment: Reference datetime.
        months: Number of calendar months to go back.

    Returns:
        The shifted datetime, e.g. 31 May minus 3 months is 28/29 February.
    """

    month_index = moment.year * 12 + (moment.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)
