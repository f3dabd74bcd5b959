"""
Streamlit UI components
"""

import streamlit as st

from ..models import PeriodBreakdown
from .formatters import breakdown_to_dataframe, calculate_summary_stats, localize_boundaries


def show_config_error(error_msg: str):
    """Display configuration error with helpful instructions"""
    st.error(":warning: Invalid Configuration")
    st.markdown("""
    These environment variables are optional; check any you have set:
    ```
    DATE_RANGE_FIELD=publishedAt
    DATE_RANGE_TIMEZONE_OFFSET=9
    DATE_RANGE_RANGE=1
    DATE_RANGE_TIMEZONE=Asia/Tokyo
    DATE_RANGE_LOCALE=ja-JP
    ```
    """)
    st.error(f"Error details: {error_msg}")
    st.stop()


def display_boundaries(breakdown: PeriodBreakdown, time_zone: str, locale: str):
    """Show the filter expression and its UTC and local boundaries"""
    st.subheader(":mag: Filter")
    st.code(breakdown.expression, language=None)

    local = localize_boundaries(breakdown, time_zone, locale)
    col1, col2 = st.columns(2)
    with col1:
        st.metric("Greater than (UTC)", breakdown.boundaries.start)
        st.caption(f"Window opens {local['start']} ({time_zone})")
    with col2:
        st.metric("Less than (UTC)", breakdown.boundaries.end)
        st.caption(f"Window closes {local['end']} ({time_zone})")


def display_breakdown_preview(breakdown: PeriodBreakdown):
    """Show the per-period table with summary metrics"""
    df = breakdown_to_dataframe(breakdown)
    if df.empty:
        st.info("No sub-periods to show")
        return

    stats = calculate_summary_stats(breakdown)
    col1, col2, col3 = st.columns(3)
    col1.metric("Periods", stats['periods'])
    col2.metric("Hours", f"{stats['hours']:,.0f}")
    col3.metric("Span", f"{stats['first']} → {stats['last']}")

    st.subheader(":calendar: Breakdown")
    st.dataframe(df, use_container_width=True, hide_index=True)
