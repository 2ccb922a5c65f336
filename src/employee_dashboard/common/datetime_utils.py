from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional, Union
from zoneinfo import ZoneInfo

_WEEKDAYS_SHORT = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_optional_date(value: Optional[str]) -> Optional[date]:
    if value is None or not str(value).strip():
        return None
    return parse_iso_date(str(value).strip()[:10])


def now_local(tz: Optional[ZoneInfo] = None) -> datetime:
    """Current time in ``tz`` (naive local time when omitted).

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(tz) if tz else datetime.now()


def to_local_date(value: Union[date, datetime], tz: Optional[ZoneInfo] = None) -> date:
    """Calendar date of ``value`` as seen in ``tz``.

    Naive datetimes are taken to already be local.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None and tz is not None:
            value = value.astimezone(tz)
        return value.date()
    return value


def last_n_days(today: date, n: int) -> list[date]:
    """The ``n`` calendar days ending at ``today``, oldest first."""
    return [today - timedelta(days=i) for i in range(n - 1, -1, -1)]


def format_us_date(d: date) -> str:
    # M/D/YYYY, no zero padding
    return f"{d.month}/{d.day}/{d.year}"


def weekday_short(d: date) -> str:
    return _WEEKDAYS_SHORT[d.weekday()]
