"""Dashboard utility modules."""

from .constants import (
    COLORS,
    TIME_RANGES,
    VIEWS,
    default_time_range,
    get_date_range,
    range_label,
    time_range_options,
)

__all__ = [
    "COLORS",
    "TIME_RANGES",
    "VIEWS",
    "default_time_range",
    "get_date_range",
    "range_label",
    "time_range_options",
]
