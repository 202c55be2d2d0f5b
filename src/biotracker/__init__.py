"""Biomarker Tracker: daily wellbeing log with a Streamlit dashboard."""

__version__ = "0.1.0"
