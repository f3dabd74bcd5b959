"""
Split filter windows into day and month sub-periods
"""

import logging
from datetime import date, datetime, timezone
from typing import List, Optional

from dateutil.relativedelta import relativedelta

from ..date_range import compute_boundaries, format_filter_range, parse_period
from ..models import (
    BreakdownEntry, CalendarPeriod, Granularity, PeriodBreakdown, RangeOptions
)

logger = logging.getLogger(__name__)


class PeriodProcessor:
    """Break a period's filter window into finer periods

    Year windows break into months, month windows into days, and day
    windows into their individual days. The sub-period boundaries tile
    the whole window with no gaps or overlaps.
    """

    def __init__(self, options: Optional[RangeOptions] = None):
        self.options = options or RangeOptions()

    def split(self, period: str) -> List[CalendarPeriod]:
        """List the sub-periods covering the window of ``period``"""
        # Validates the period and its window before any date arithmetic
        compute_boundaries(period, self.options)

        parsed = parse_period(period)
        span = self.options.range

        if parsed.granularity is Granularity.DAY:
            # Out-of-month days (Feb 30) roll over like the boundaries do
            anchor = date(parsed.year, parsed.month, 1) + relativedelta(days=parsed.day - 1)
            first = anchor - relativedelta(days=span - 1)
            return self._days_between(first, anchor + relativedelta(days=1))

        if parsed.granularity is Granularity.MONTH:
            first = date(parsed.year, parsed.month, 1)
            return self._days_between(first, first + relativedelta(months=span))

        first = date(parsed.year, 1, 1)
        months = []
        current = first
        stop = first + relativedelta(years=span)
        while current < stop:
            months.append(CalendarPeriod(year=current.year, month=current.month))
            current += relativedelta(months=1)
        return months

    def process(self, field_name: str, period: str) -> PeriodBreakdown:
        """Build the overall filter and one filter per sub-period"""
        boundaries = compute_boundaries(period, self.options)
        expression = format_filter_range(field_name, period, self.options)

        unit = RangeOptions(range=1, timezone_offset=self.options.timezone_offset)
        entries = []
        for sub_period in self.split(period):
            label = sub_period.label
            entries.append(BreakdownEntry(
                period=sub_period,
                boundaries=compute_boundaries(label, unit),
                expression=format_filter_range(field_name, label, unit)
            ))

        logger.info(f"Split {period} (range={self.options.range}) into {len(entries)} periods")

        return PeriodBreakdown(
            field_name=field_name,
            period=parse_period(period),
            options=self.options,
            boundaries=boundaries,
            expression=expression,
            entries=entries,
            generated_at=datetime.now(timezone.utc)
        )

    @staticmethod
    def _days_between(first: date, stop: date) -> List[CalendarPeriod]:
        days = []
        current = first
        while current < stop:
            days.append(CalendarPeriod(year=current.year, month=current.month, day=current.day))
            current += relativedelta(days=1)
        return days
