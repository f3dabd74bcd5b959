#!/usr/bin/env python3
"""
Streamlit web UI for Date Range Filter
"""

import streamlit as st
import sys
import logging
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent))

from src.config import Config
from src.date_range import InvalidPeriodError
from src.exporters import EXPORTER_MAP, get_exporter
from src.models import RangeOptions
from src.processors import PeriodProcessor
from src.ui import show_config_error
from src.ui.sidebar import render_sidebar
from src.ui.filter_view import display_stored_filter
from src.ui.state_manager import initialize_session_state

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


# ============================================================================
# Filter Generation Logic
# ============================================================================

def handle_filter_generation(config: Config, field_name: str, period: str, options: RangeOptions):
    """Build the breakdown, export it and keep it in session state"""
    try:
        breakdown = PeriodProcessor(options).process(field_name, period)
    except InvalidPeriodError as e:
        st.error(f":x: {e}: {period}")
        return

    output_dir = Path(config.export.output_dir)
    export_paths = {}
    for fmt in EXPORTER_MAP:
        config.export.format = fmt
        output_path = output_dir / config.export.get_filename(breakdown.period.label)
        try:
            export_paths[fmt] = str(get_exporter(fmt, output_path).export(breakdown))
        except OSError as e:
            st.warning(f":warning: Could not write {fmt.upper()} export: {e}")
            logger.exception("Export failed")

    st.session_state.breakdown = breakdown
    st.session_state.export_paths = export_paths


# ============================================================================
# Configuration
# ============================================================================

def load_and_validate_config():
    """Load and validate configuration"""
    try:
        config = Config.from_env()
        config.validate()
        return config

    except ValueError as e:
        show_config_error(str(e))
        return None


# ============================================================================
# Main Application
# ============================================================================

def main():
    """Main application entry point"""

    st.set_page_config(
        page_title="Date Range Filter",
        page_icon=":calendar:",
        layout="wide"
    )

    st.title(":calendar: Date Range Filter")
    st.markdown("Build exclusive date-range filter expressions for a day, month or year")

    initialize_session_state()

    config = load_and_validate_config()
    if not config:
        return

    field_name, period, period_range, timezone_offset = render_sidebar(config.filter)

    st.markdown("---")

    if not field_name:
        st.warning(":warning: Enter a field name")
        return

    st.info(f":pushpin: {field_name} | {period} | range {period_range} | UTC{timezone_offset:+d}")

    if st.button(":rocket: Build Filter", type="primary", use_container_width=True):
        options = RangeOptions(range=period_range, timezone_offset=timezone_offset)
        handle_filter_generation(config, field_name, period, options)

    display_stored_filter(config.filter.time_zone, config.filter.locale)


if __name__ == "__main__":
    main()
