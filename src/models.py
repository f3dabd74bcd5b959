"""
Data models for Date Range Filter
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, NamedTuple, Optional


DEFAULT_RANGE = 1
DEFAULT_TIMEZONE_OFFSET = 9  # JST


class Granularity(Enum):
    """Calendar unit named by a period string"""
    DAY = "day"
    MONTH = "month"
    YEAR = "year"


@dataclass(frozen=True)
class CalendarPeriod:
    """A year, a month or a single day parsed from a period string"""
    year: int
    month: Optional[int] = None
    day: Optional[int] = None

    @property
    def granularity(self) -> Granularity:
        if self.day is not None:
            return Granularity.DAY
        if self.month is not None:
            return Granularity.MONTH
        return Granularity.YEAR

    @property
    def label(self) -> str:
        """Period rendered back to YYYY, YYYY-MM or YYYY-MM-DD"""
        parts = [f"{self.year:04d}"]
        if self.month is not None:
            parts.append(f"{self.month:02d}")
        if self.day is not None:
            parts.append(f"{self.day:02d}")
        return "-".join(parts)

    def __str__(self):
        return self.label


@dataclass(frozen=True)
class RangeOptions:
    """Width of the queried window and the timezone it is read in

    ``range`` counts units of the period's own granularity. Day windows
    end at the given day; month and year windows start at it.
    ``timezone_offset`` is in hours east of UTC.
    """
    range: int = DEFAULT_RANGE
    timezone_offset: float = DEFAULT_TIMEZONE_OFFSET

    def __post_init__(self):
        if isinstance(self.range, bool) or not isinstance(self.range, int):
            raise ValueError(f"Invalid range: {self.range!r}")
        if self.range < 1:
            raise ValueError(f"Invalid range: {self.range} (must be >= 1)")


class TimeBoundaryPair(NamedTuple):
    """Exclusive [start, end] instants as ISO-8601 UTC strings"""
    start: str
    end: str


@dataclass
class BreakdownEntry:
    """Boundaries and filter of one sub-period of a window"""
    period: CalendarPeriod
    boundaries: TimeBoundaryPair
    expression: str

    @property
    def label(self) -> str:
        return self.period.label

    @property
    def start(self) -> str:
        return self.boundaries.start

    @property
    def end(self) -> str:
        return self.boundaries.end

    def to_dict(self) -> dict:
        return {
            'period': self.label,
            'start': self.start,
            'end': self.end,
            'filter': self.expression,
        }


@dataclass
class PeriodBreakdown:
    """Filter window split into its day or month sub-periods"""
    field_name: str
    period: CalendarPeriod
    options: RangeOptions
    boundaries: TimeBoundaryPair
    expression: str
    entries: List[BreakdownEntry] = field(default_factory=list)
    generated_at: Optional[datetime] = None

    @property
    def granularity(self) -> Granularity:
        return self.period.granularity

    @property
    def entry_count(self) -> int:
        return len(self.entries)

    def to_dict(self) -> dict:
        """Serializable form used by the JSON exporter"""
        return {
            'field': self.field_name,
            'period': self.period.label,
            'granularity': self.granularity.value,
            'range': self.options.range,
            'timezone_offset': self.options.timezone_offset,
            'start': self.boundaries.start,
            'end': self.boundaries.end,
            'filter': self.expression,
            'generated_at': self.generated_at.isoformat() if self.generated_at else None,
            'entries': [entry.to_dict() for entry in self.entries],
        }
