import streamlit as st
from pathlib import Path

from . import display_boundaries, display_breakdown_preview

MIME_TYPES = {
    'csv': "text/csv",
    'json': "application/json"
}


def display_download_buttons(export_paths: dict):
    """Display one download button per exported file"""
    columns = st.columns(len(export_paths))
    for column, (fmt, path) in zip(columns, sorted(export_paths.items())):
        path = Path(path)
        if not path.exists():
            continue
        with column:
            st.download_button(
                label=f":inbox_tray: Download {fmt.upper()}",
                data=path.read_bytes(),
                file_name=path.name,
                mime=MIME_TYPES.get(fmt, "application/octet-stream"),
                use_container_width=True,
                key=f"download_{fmt}"
            )


def display_stored_filter(time_zone: str, locale: str):
    """Display filter from session state if available"""
    breakdown = st.session_state.breakdown
    if breakdown is None:
        return

    display_boundaries(breakdown, time_zone, locale)

    if st.session_state.export_paths:
        display_download_buttons(st.session_state.export_paths)

    display_breakdown_preview(breakdown)
