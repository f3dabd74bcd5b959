import streamlit as st
from datetime import datetime
from typing import Tuple

from ..config import FilterConfig, MIN_TIMEZONE_OFFSET, MAX_TIMEZONE_OFFSET

GRANULARITIES = ["Day", "Month", "Year"]


def _period_string(granularity: str, picked: datetime) -> str:
    if granularity == "Year":
        return f"{picked.year:04d}"
    if granularity == "Month":
        return f"{picked.year:04d}-{picked.month:02d}"
    return picked.strftime('%Y-%m-%d')


def render_sidebar(defaults: FilterConfig) -> Tuple[str, str, int, int]:
    """Render sidebar inputs and return (field_name, period, range, timezone_offset)"""
    st.sidebar.header(":gear: Filter")

    field_name = st.sidebar.text_input(
        "Field",
        value=defaults.field_name,
        help="Name of the date field in the remote API"
    )

    granularity = st.sidebar.radio(
        "Period Type",
        options=GRANULARITIES,
        index=0,
        horizontal=True,
        help="A single day, a whole month or a whole year"
    )

    picked = st.sidebar.date_input(
        "Anchor Date",
        value=datetime.now().date(),
        help="Only the year (and month) are used for year and month periods"
    )

    period_range = st.sidebar.number_input(
        "Range",
        min_value=1,
        max_value=366,
        value=min(max(defaults.range, 1), 366),
        step=1,
        help="Days end at the anchor date; months and years start at it"
    )

    with st.sidebar.expander("Advanced Options"):
        timezone_offset = st.slider(
            "Timezone Offset (hours)",
            min_value=MIN_TIMEZONE_OFFSET,
            max_value=MAX_TIMEZONE_OFFSET,
            value=defaults.timezone_offset,
            help="Hours east of UTC; 9 is JST"
        )

    return field_name.strip(), _period_string(granularity, picked), int(period_range), timezone_offset
