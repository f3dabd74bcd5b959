import streamlit as st

def initialize_session_state():
    """Initialize session state variables"""
    if 'breakdown' not in st.session_state:
        st.session_state.breakdown = None
    if 'export_paths' not in st.session_state:
        st.session_state.export_paths = {}
