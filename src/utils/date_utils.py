"""
Date utility functions
"""

from datetime import datetime, timezone, timedelta
from typing import Union

from babel import Locale
from babel.dates import format_datetime, get_timezone
from dateutil.parser import isoparse
from dateutil.relativedelta import relativedelta

DEFAULT_TIME_ZONE = "Asia/Tokyo"
DEFAULT_LOCALE = "ja-JP"


def local_midnight(year: int, month: int = 1, day: int = 1, timezone_offset: float = 0) -> datetime:
    """Get the UTC instant of local midnight on a calendar date

    Month and day may fall outside their usual ranges and roll over into
    the neighbouring month or year (month 13 is January of the next year,
    day 0 is the last day of the previous month).
    """
    return datetime(year, 1, 1, tzinfo=timezone.utc) + relativedelta(
        months=month - 1,
        days=day - 1,
        hours=-timezone_offset
    )


def format_iso_instant(dt: datetime) -> str:
    """Format an aware datetime as a UTC ISO-8601 instant (ms precision, Z suffix)"""
    if dt.tzinfo is None:
        raise ValueError(f"Naive datetime has no instant: {dt!r}")
    utc = dt.astimezone(timezone.utc)
    return utc.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def get_absolute_date(iso_date_string: str, timezone_offset: float = 9) -> datetime:
    """Read an ISO date string as an instant expressed at a fixed UTC offset

    Strings carrying an offset (or Z) keep their instant. Naive strings
    are taken as wall-clock time at ``timezone_offset``.
    """
    tz = timezone(timedelta(hours=timezone_offset))
    parsed = isoparse(iso_date_string)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=tz)
    return parsed.astimezone(tz)


def get_locale_date_time(
    date: Union[str, datetime],
    time_zone: str = DEFAULT_TIME_ZONE,
    locale: str = DEFAULT_LOCALE
) -> str:
    """Format an instant for display in a time zone and locale

    Accepts BCP-47 ("ja-JP") as well as POSIX ("ja_JP") locale tags.
    """
    if isinstance(date, str):
        date = isoparse(date)
    if date.tzinfo is None:
        date = date.replace(tzinfo=timezone.utc)

    sep = '-' if '-' in locale else '_'
    return format_datetime(
        date,
        format='medium',
        tzinfo=get_timezone(time_zone),
        locale=Locale.parse(locale, sep=sep)
    )
