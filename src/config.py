"""
Configuration management for Date Range Filter
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .models import DEFAULT_RANGE, DEFAULT_TIMEZONE_OFFSET, RangeOptions
from .utils.date_utils import DEFAULT_LOCALE, DEFAULT_TIME_ZONE

load_dotenv()

DEFAULT_FIELD = "publishedAt"

# Real-world UTC offsets span UTC-12 .. UTC+14
MIN_TIMEZONE_OFFSET = -12
MAX_TIMEZONE_OFFSET = 14


@dataclass
class FilterConfig:
    """Defaults for building filter expressions

    Only the CLI and the web UI read these; compute_boundaries and
    format_filter_range keep their fixed defaults.
    """
    field_name: str = DEFAULT_FIELD
    timezone_offset: int = DEFAULT_TIMEZONE_OFFSET
    range: int = DEFAULT_RANGE
    time_zone: str = DEFAULT_TIME_ZONE
    locale: str = DEFAULT_LOCALE

    @classmethod
    def from_env(cls) -> "FilterConfig":
        """Load configuration from environment variables"""
        offset_str = os.getenv('DATE_RANGE_TIMEZONE_OFFSET', str(DEFAULT_TIMEZONE_OFFSET))
        range_str = os.getenv('DATE_RANGE_RANGE', str(DEFAULT_RANGE))

        try:
            timezone_offset = int(offset_str)
        except ValueError:
            raise ValueError(f"Invalid DATE_RANGE_TIMEZONE_OFFSET: {offset_str}") from None

        try:
            range_ = int(range_str)
        except ValueError:
            raise ValueError(f"Invalid DATE_RANGE_RANGE: {range_str}") from None

        return cls(
            field_name=os.getenv('DATE_RANGE_FIELD', DEFAULT_FIELD).strip(),
            timezone_offset=timezone_offset,
            range=range_,
            time_zone=os.getenv('DATE_RANGE_TIMEZONE', DEFAULT_TIME_ZONE),
            locale=os.getenv('DATE_RANGE_LOCALE', DEFAULT_LOCALE)
        )

    def validate(self) -> bool:
        """Validate configuration"""
        if not self.field_name:
            raise ValueError("Invalid DATE_RANGE_FIELD: field name is empty")

        if not MIN_TIMEZONE_OFFSET <= self.timezone_offset <= MAX_TIMEZONE_OFFSET:
            raise ValueError(f"Invalid DATE_RANGE_TIMEZONE_OFFSET: {self.timezone_offset}")

        if self.range < 1:
            raise ValueError(f"Invalid DATE_RANGE_RANGE: {self.range}")

        return True

    def to_range_options(self) -> RangeOptions:
        return RangeOptions(range=self.range, timezone_offset=self.timezone_offset)


@dataclass
class ExportConfig:
    """Export format configuration"""
    format: str = "csv"  # csv, json
    filename: Optional[str] = None
    output_dir: str = "reports"

    @classmethod
    def from_env(cls) -> "ExportConfig":
        return cls(output_dir=os.getenv('DATE_RANGE_OUTPUT_DIR', 'reports'))

    def get_filename(self, period: str) -> str:
        """Generate filename based on format"""
        if self.filename:
            return self.filename

        extensions = {
            'csv': 'csv',
            'json': 'json'
        }

        ext = extensions.get(self.format, 'csv')
        return f"filter_breakdown_{period}.{ext}"


class Config:
    """Main configuration container"""

    def __init__(
        self,
        filter: Optional[FilterConfig] = None,
        export: Optional[ExportConfig] = None
    ):
        self.filter = filter or FilterConfig.from_env()
        self.export = export or ExportConfig.from_env()

    @classmethod
    def from_env(cls) -> "Config":
        """Load all configuration from environment"""
        return cls(
            filter=FilterConfig.from_env(),
            export=ExportConfig.from_env()
        )

    def validate(self) -> bool:
        """Validate all configuration"""
        return self.filter.validate()
