"""
Calendar period boundaries and date-range filter expressions

A period string names a year ("2023"), a month ("2023-06") or a day
("2023-06-08"). Its boundaries are exclusive on both sides so that a
``greater_than start AND less_than end`` filter covers the period exactly:

    >>> compute_boundaries("2023-06-08")
    TimeBoundaryPair(start='2023-06-07T14:59:59.999Z', end='2023-06-08T15:00:00.000Z')

``range`` widens the window by whole units of the period's granularity.
Day windows end at the given day and reach ``range - 1`` days back; month
and year windows start at the given month or year and reach forward.
"""

import logging
from datetime import timedelta
from typing import Optional

from .models import CalendarPeriod, Granularity, RangeOptions, TimeBoundaryPair
from .utils.date_utils import local_midnight, format_iso_instant

logger = logging.getLogger(__name__)

FILTER_TEMPLATE = "{field}[greater_than]{start}[and]{field}[less_than]{end}"

ONE_MILLISECOND = timedelta(milliseconds=1)


class DateRangeError(Exception):
    """Base exception for date range errors"""
    pass


class InvalidPeriodError(DateRangeError):
    """Period string names no valid year, month or day"""

    MESSAGE = "Invalid year or month or day"

    def __init__(self, period: Optional[str] = None):
        super().__init__(self.MESSAGE)
        self.period = period


def parse_period(period: str) -> CalendarPeriod:
    """Parse YYYY, YYYY-MM or YYYY-MM-DD into a CalendarPeriod

    Days are only checked against 1..31, not against the month's length.
    """
    parts = period.split("-")
    if not 1 <= len(parts) <= 3:
        raise InvalidPeriodError(period)

    # ASCII digits only; int() alone would take "+6", " 6", "2_023" or "０６"
    if not all(part.isascii() and part.isdigit() for part in parts):
        raise InvalidPeriodError(period)

    fields = [int(part) for part in parts]
    year = fields[0]
    month = fields[1] if len(fields) > 1 else None
    day = fields[2] if len(fields) > 2 else None

    if year < 0:
        raise InvalidPeriodError(period)
    if month is not None and not 1 <= month <= 12:
        raise InvalidPeriodError(period)
    if day is not None and not 1 <= day <= 31:
        raise InvalidPeriodError(period)

    return CalendarPeriod(year=year, month=month, day=day)


def compute_boundaries(period: str, options: Optional[RangeOptions] = None) -> TimeBoundaryPair:
    """Get the exclusive start and end instants of a period

    Args:
        period: "YYYY", "YYYY-MM" or "YYYY-MM-DD"
        options: window width and timezone offset (default: 1 unit, UTC+9)

    Returns:
        TimeBoundaryPair of ISO-8601 UTC strings. ``start`` is 1 ms before
        the window opens, ``end`` is the instant the next period opens.

    Raises:
        InvalidPeriodError: the period is malformed or out of range, or a
            boundary falls outside datetime's years 1..9999. Year 0 always
            raises, as does year 1 at any offset >= 0 (its start is 1 ms
            before 0001-01-01T00:00Z). "9999" and "9999-12" raise because
            their end falls in year 10000.
    """
    options = options or RangeOptions()
    parsed = parse_period(period)
    offset = options.timezone_offset
    span = options.range

    try:
        if parsed.granularity is Granularity.DAY:
            window_start = local_midnight(parsed.year, parsed.month, parsed.day - span + 1, offset)
            window_end = local_midnight(parsed.year, parsed.month, parsed.day + 1, offset)
        elif parsed.granularity is Granularity.MONTH:
            window_start = local_midnight(parsed.year, parsed.month, 1, offset)
            window_end = local_midnight(parsed.year, parsed.month + span, 1, offset)
        else:
            window_start = local_midnight(parsed.year, 1, 1, offset)
            window_end = local_midnight(parsed.year + span, 1, 1, offset)

        start = window_start - ONE_MILLISECOND
    except (ValueError, OverflowError):
        # year 0, or a boundary outside datetime's year 1..9999
        raise InvalidPeriodError(period) from None

    boundaries = TimeBoundaryPair(format_iso_instant(start), format_iso_instant(window_end))
    logger.debug(f"Boundaries for {period} {options}: {boundaries.start} -> {boundaries.end}")
    return boundaries


def format_filter_range(field_name: str, period: str, options: Optional[RangeOptions] = None) -> str:
    """Get a filter expression selecting field values inside a period

    Returns:
        "{field}[greater_than]{start}[and]{field}[less_than]{end}"
    """
    start, end = compute_boundaries(period, options)
    return FILTER_TEMPLATE.format(field=field_name, start=start, end=end)
