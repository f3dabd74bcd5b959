"""
UI components for Streamlit interface
"""

from .components import (
    show_config_error,
    display_boundaries,
    display_breakdown_preview
)
from .formatters import (
    breakdown_to_dataframe,
    calculate_summary_stats,
    localize_boundaries
)

__all__ = [
    'show_config_error',
    'display_boundaries',
    'display_breakdown_preview',
    'breakdown_to_dataframe',
    'calculate_summary_stats',
    'localize_boundaries'
]
