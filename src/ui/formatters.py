"""
Data formatting utilities for UI display
"""

from datetime import timedelta

import pandas as pd

from ..models import PeriodBreakdown
from ..utils.date_utils import get_locale_date_time

COLUMNS = ['Period', 'Start', 'End', 'Filter']


def breakdown_to_dataframe(breakdown: PeriodBreakdown) -> pd.DataFrame:
    """Convert a breakdown into a table with one row per sub-period"""
    rows = [
        [entry.label, entry.start, entry.end, entry.expression]
        for entry in breakdown.entries
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def localize_boundaries(breakdown: PeriodBreakdown, time_zone: str, locale: str) -> dict:
    """Overall window start and end as local display strings

    The exclusive start is shifted forward 1 ms so that it reads as the
    first local instant of the window.
    """
    start = pd.Timestamp(breakdown.boundaries.start).to_pydatetime() + timedelta(milliseconds=1)
    return {
        'start': get_locale_date_time(start, time_zone, locale),
        'end': get_locale_date_time(breakdown.boundaries.end, time_zone, locale),
    }


def calculate_summary_stats(breakdown: PeriodBreakdown) -> dict:
    """Calculate summary statistics for a breakdown"""
    df = breakdown_to_dataframe(breakdown)
    if df.empty:
        return {'periods': 0, 'hours': 0.0, 'first': None, 'last': None}

    start = pd.Timestamp(breakdown.boundaries.start)
    end = pd.Timestamp(breakdown.boundaries.end)
    hours = (end - start - pd.Timedelta(milliseconds=1)) / pd.Timedelta(hours=1)

    return {
        'periods': len(df),
        'hours': float(hours),
        'first': df['Period'].iloc[0],
        'last': df['Period'].iloc[-1],
    }
