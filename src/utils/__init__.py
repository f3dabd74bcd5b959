"""
Utility functions
"""

from .date_utils import (
    local_midnight,
    format_iso_instant,
    get_absolute_date,
    get_locale_date_time
)
from .logging_config import setup_logging

__all__ = [
    'local_midnight',
    'format_iso_instant',
    'get_absolute_date',
    'get_locale_date_time',
    'setup_logging'
]
