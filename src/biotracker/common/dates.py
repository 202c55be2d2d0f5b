"""
Date handling utilities for Biomarker Tracker.

Entries are keyed by calendar date. Dates are stored as ``datetime.date``,
exchanged as ISO 8601 (YYYY-MM-DD) and shown to humans as MM-DD-YY.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional, Union

DISPLAY_FORMAT = "%m-%d-%y"

DateLike = Union[date, str]


def parse_date(value: DateLike) -> date:
    """
    Normalize a date or ISO 8601 string to ``datetime.date``.

    Args:
        value: ``date``, ``datetime`` or 'YYYY-MM-DD' string

    Returns:
        The calendar date

    Raises:
        ValueError: if the string is not an ISO date
        TypeError: for any other type
    """
    # datetime is a date subclass; keep only the calendar part
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value.strip())
    raise TypeError(f"Expected date or ISO string, got {type(value).__name__}")


def format_display_date(value: DateLike) -> str:
    """Render a date as MM-DD-YY (two-digit year)."""
    return parse_date(value).strftime(DISPLAY_FORMAT)


@dataclass(frozen=True)
class DateRange:
    """
    Inclusive [start, end] filter over entry dates.

    Either bound may be None, meaning unbounded on that side. An inverted
    range (start > end) matches nothing.
    """
    start: Optional[date] = None
    end: Optional[date] = None

    @classmethod
    def of(cls, start: Optional[DateLike] = None, end: Optional[DateLike] = None) -> "DateRange":
        """Build a range from dates or ISO strings."""
        return cls(
            start=parse_date(start) if start is not None else None,
            end=parse_date(end) if end is not None else None,
        )

    @classmethod
    def last_days(cls, days: int, today: Optional[date] = None) -> "DateRange":
        """Range covering ``days`` days before today through today."""
        end = today or date.today()
        return cls(start=end - timedelta(days=days), end=end)

    @property
    def is_unbounded(self) -> bool:
        return self.start is None and self.end is None

    @property
    def is_inverted(self) -> bool:
        return self.start is not None and self.end is not None and self.start > self.end

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, date):
            return False
        if self.start is not None and value < self.start:
            return False
        if self.end is not None and value > self.end:
            return False
        return True

    def days(self) -> Optional[int]:
        """Number of calendar days covered, or None when unbounded."""
        if self.start is None or self.end is None:
            return None
        return max(0, (self.end - self.start).days + 1)
