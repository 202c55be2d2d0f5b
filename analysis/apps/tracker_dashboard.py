#!/usr/bin/env python3
"""
Biomarker Tracker Dashboard

A Streamlit page for logging and charting daily wellbeing scores
(Sleep, Mood, Energy, Digestion, Mind). Entries live in the browser
session only.

Usage:
    cd ~/src/biomarker-tracker
    streamlit run analysis/apps/tracker_dashboard.py
"""

import logging
import time
from datetime import date, datetime

import streamlit as st

from biotracker.analysis import build_trend_figure, compute_stats
from biotracker.common import (
    ALL_BIOMARKERS,
    COLORS as BIOMARKER_COLORS,
    MAX_SCORE,
    MIN_SCORE,
    DateRange,
    TrackerError,
    format_display_date,
    get_config,
    parse_selection,
    toggle_biomarker,
)
from biotracker.form import EntryFormController
from biotracker.ingest import build_demo_store
from biotracker.store import RecordStore

from utils.constants import COLORS, VIEWS, default_time_range, get_date_range, time_range_options

log = logging.getLogger(__name__)

# =============================================================================
# Page Configuration
# =============================================================================

st.set_page_config(
    page_title="Biomarker Tracker",
    page_icon="📈",
    layout="wide",
    initial_sidebar_state="expanded",
)


# =============================================================================
# Session State
# =============================================================================


def init_state():
    """Create the session's store, form and selection on first run."""
    if "store" in st.session_state:
        return

    config = get_config()
    # Bad settings fall back to defaults; the page shows what was replaced
    st.session_state.config_problems = config.repair()

    store = build_demo_store() if config.is_demo_enabled() else RecordStore()
    st.session_state.store = store
    st.session_state.form = EntryFormController(store)
    st.session_state.selection = parse_selection(config.get_default_biomarkers())
    st.session_state.view = VIEWS[0]
    st.session_state.next_view = None
    st.session_state.flash = None


def apply_pending_view():
    # The view radio is keyed on "view"; it can only be changed before it renders
    if st.session_state.next_view:
        st.session_state.view = st.session_state.next_view
        st.session_state.next_view = None


def go_to_view(view: str):
    st.session_state.view = view


def on_toggle(biomarker):
    st.session_state.selection = toggle_biomarker(st.session_state.selection, biomarker)


# =============================================================================
# Sidebar Controls
# =============================================================================


def render_sidebar() -> DateRange:
    """Render sidebar controls and return the selected date range."""
    st.sidebar.header("Controls")

    st.sidebar.radio("View", options=VIEWS, key="view")

    st.sidebar.divider()

    default_days = get_config().get_default_range_days()
    options = time_range_options(default_days)
    time_range = st.sidebar.selectbox(
        "Time Range",
        options=list(options.keys()),
        index=list(options.keys()).index(default_time_range(default_days)),
        help="Select time range for the chart and statistics",
    )
    date_range = get_date_range(time_range, options=options)

    if st.sidebar.checkbox("Custom dates", value=False):
        fallback = DateRange.last_days(default_days)
        col1, col2 = st.sidebar.columns(2)
        with col1:
            start = st.date_input("Start", value=date_range.start or fallback.start)
        with col2:
            end = st.date_input("End", value=date_range.end or fallback.end)
        date_range = DateRange(start=start, end=end)
        if date_range.is_inverted:
            st.sidebar.warning("Start date is after end date; nothing will match.")

    st.sidebar.divider()

    st.sidebar.subheader("Biomarkers")
    for biomarker in ALL_BIOMARKERS:
        st.sidebar.checkbox(
            biomarker.value,
            value=biomarker in st.session_state.selection,
            key=f"show_{biomarker.value}",
            on_change=on_toggle,
            args=(biomarker,),
        )

    return date_range


# =============================================================================
# Dashboard View
# =============================================================================


def render_stats_cards(entries, selection):
    """Average / Highest / Lowest for each selected biomarker."""
    try:
        stats = compute_stats(entries, selection)
    except TrackerError as e:
        log.info(f"No statistics: {e}")
        st.info("No entries in this period.")
        return

    cols = st.columns(3)
    for i, biomarker in enumerate(selection):
        with cols[i % 3]:
            st.markdown(
                f'<h4 style="border-left: 4px solid {BIOMARKER_COLORS[biomarker]}; '
                f'padding-left: 0.5rem;">{biomarker.value} Stats</h4>',
                unsafe_allow_html=True,
            )
            summary = stats.get(biomarker)
            if summary is None:
                st.caption("No values recorded")
                continue
            c1, c2, c3 = st.columns(3)
            c1.metric("Average", summary.display_average)
            c2.metric("Highest", summary.display_maximum)
            c3.metric("Lowest", summary.display_minimum)


def render_dashboard(date_range: DateRange):
    st.subheader("Biomarker Dashboard")

    view = st.session_state.store.view()
    selection = st.session_state.selection
    entries = view.query(date_range)

    if not selection:
        st.info("Select at least one biomarker in the sidebar.")
        return

    fig = build_trend_figure(view.to_frame(date_range), selection)
    st.plotly_chart(fig, use_container_width=True)

    render_stats_cards(entries, selection)


# =============================================================================
# Add Entry View
# =============================================================================


def run_save_feedback(form: EntryFormController, placeholder):
    """Step the save button through Saving... / Saved! and back to idle."""
    step = 0
    while form.feedback.busy:
        step += 1
        placeholder.button(form.feedback.label, disabled=True, key=f"save_feedback_{step}")
        wait = form.feedback.seconds_until_next(time.monotonic())
        if wait:
            time.sleep(wait)
        form.feedback.advance(time.monotonic())


def render_add_entry():
    st.subheader("Add New Entry")
    form: EntryFormController = st.session_state.form

    entry_date = st.date_input("Date", value=form.pending_date, max_value=date.today(), key="entry_date")
    try:
        form.set_date(entry_date)
    except TrackerError as e:
        log.warning(f"Rejected date: {e}")
        st.error(str(e))

    cols = st.columns(3)
    for i, biomarker in enumerate(ALL_BIOMARKERS):
        with cols[i % 3]:
            score = st.slider(
                biomarker.value,
                min_value=MIN_SCORE,
                max_value=MAX_SCORE,
                value=int(round(form.pending_values[biomarker])),
                step=1,
                key=f"slider_{biomarker.value}",
            )
            form.set_value(biomarker, score)

    if st.session_state.store.view().get(form.pending_date) is not None:
        st.caption(f"An entry for {format_display_date(form.pending_date)} already exists.")

    # run_save_feedback may have been cut short by a rerun
    form.feedback.advance(time.monotonic())
    placeholder = st.empty()
    clicked = placeholder.button(
        form.feedback.label,
        type="primary",
        disabled=form.feedback.busy,
        key="save_idle",
    )
    if not clicked:
        return

    try:
        entry = form.submit(time.monotonic())
    except TrackerError as e:
        log.info(f"Save failed: {e}")
        st.error(str(e))
        st.button("Go to Manage Entries", on_click=go_to_view, args=(VIEWS[2],))
        return

    if entry is None:
        return

    run_save_feedback(form, placeholder)
    st.session_state.next_view = VIEWS[0]
    st.rerun()


# =============================================================================
# Manage Entries View
# =============================================================================


def delete_entry(entry_date: date):
    if st.session_state.store.delete(entry_date):
        st.session_state.flash = f"Entry for {format_display_date(entry_date)} deleted successfully."


def render_manage_entries():
    st.subheader("Manage Entries")

    if flash := st.session_state.flash:
        st.success(flash)
        st.session_state.flash = None

    limit = get_config().get_recent_limit()
    recent = sorted(st.session_state.store.view().recent(limit), key=lambda e: e.date, reverse=True)

    if not recent:
        st.info("No entries yet.")
        return

    header = st.columns([3, 1])
    header[0].markdown("**Date**")
    header[1].markdown("**Actions**")

    for entry in recent:
        col1, col2 = st.columns([3, 1])
        col1.write(format_display_date(entry.date))
        col2.button(
            "Delete",
            key=f"delete_{entry.date.isoformat()}",
            on_click=delete_entry,
            args=(entry.date,),
        )


# =============================================================================
# Main App
# =============================================================================


def main():
    """Main dashboard application."""
    init_state()
    apply_pending_view()

    date_range = render_sidebar()

    st.title("Biomarker Tracker")

    for problem in st.session_state.config_problems:
        st.warning(f"Config: {problem}. Using a default instead.")

    view = st.session_state.view
    if view == VIEWS[0]:
        render_dashboard(date_range)
    elif view == VIEWS[1]:
        render_add_entry()
    else:
        render_manage_entries()

    # Footer
    st.divider()
    start = date_range.start.isoformat() if date_range.start else "first entry"
    end = date_range.end.isoformat() if date_range.end else "last entry"
    st.caption(
        f"Biomarker Tracker | {len(st.session_state.store)} entries | "
        f"Range: {start} to {end} | {datetime.now().strftime('%Y-%m-%d %H:%M')}"
    )
    st.markdown(
        f'<style>.stButton button[kind="primary"] {{ background-color: {COLORS["primary"]}; }}</style>',
        unsafe_allow_html=True,
    )


if __name__ == "__main__":
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s %(levelname)s [%(message)s]",
        )
    main()
