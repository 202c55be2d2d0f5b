"""Common utilities for Biomarker Tracker."""

from biotracker.common.biomarkers import (
    ALL_BIOMARKERS,
    COLORS,
    MAX_SCORE,
    MIN_SCORE,
    Biomarker,
    parse_selection,
    toggle_biomarker,
    validate_score,
)
from biotracker.common.config import Config, get_config
from biotracker.common.dates import DateRange, format_display_date, parse_date
from biotracker.common.errors import (
    DuplicateDateError,
    EmptyInputError,
    FutureDateError,
    OutOfRangeError,
    TrackerError,
    UnknownBiomarkerError,
)

__all__ = [
    "ALL_BIOMARKERS",
    "COLORS",
    "MAX_SCORE",
    "MIN_SCORE",
    "Biomarker",
    "parse_selection",
    "toggle_biomarker",
    "validate_score",
    "Config",
    "get_config",
    "DateRange",
    "format_display_date",
    "parse_date",
    "DuplicateDateError",
    "EmptyInputError",
    "FutureDateError",
    "OutOfRangeError",
    "TrackerError",
    "UnknownBiomarkerError",
]
