"""Dashboard constants and configuration."""

from datetime import date

from biotracker.common.dates import DateRange

# Page chrome colors; biomarker line colors live in biotracker.common.biomarkers
COLORS = {
    "primary": "#3B82F6",      # Blue - active tab / save button
    "alert": "#DC143C",        # Crimson red - delete
    "bg_dark": "#0E1117",
    "bg_light": "#262730",
    "text": "#FAFAFA",
}

# Time range options (None = all entries)
TIME_RANGES = {
    "7 days": 7,
    "30 days": 30,
    "90 days": 90,
    "All time": None,
}

VIEWS = ["Dashboard", "Add Entry", "Manage Entries"]


def range_label(days: int) -> str:
    return f"{days} days"


def time_range_options(default_days: int) -> dict:
    """
    TIME_RANGES plus a label for the configured default when it has none.

    The extra option is slotted in by length so the list stays ordered.
    """
    if default_days in TIME_RANGES.values():
        return dict(TIME_RANGES)

    options = {}
    for label, days in TIME_RANGES.items():
        if range_label(default_days) not in options and (days is None or days > default_days):
            options[range_label(default_days)] = default_days
        options[label] = days
    return options


def default_time_range(default_days: int) -> str:
    """Label of the option matching dashboard.default_range_days."""
    options = time_range_options(default_days)
    return next(label for label, days in options.items() if days == default_days)


def get_date_range(time_range: str, today: date | None = None, options: dict | None = None) -> DateRange:
    """Convert time range label to a DateRange ending today."""
    days = (options or TIME_RANGES).get(time_range, 30)
    if days is None:
        return DateRange()
    return DateRange.last_days(days, today=today)
