"""
Error types for Biomarker Tracker.

Every error is recoverable at the call site; the dashboard shows the message
and carries on.
"""
from __future__ import annotations

from datetime import date


class TrackerError(Exception):
    """Base class for all tracker errors."""


class DuplicateDateError(TrackerError):
    """An entry for this date is already stored."""

    def __init__(self, entry_date: date, message: str | None = None):
        self.date = entry_date
        if message is None:
            from biotracker.common.dates import format_display_date
            message = (
                f"An entry already exists for {format_display_date(entry_date)}. "
                "Please delete the existing entry first."
            )
        super().__init__(message)


class UnknownBiomarkerError(TrackerError, ValueError):
    """Name does not match any tracked biomarker."""

    def __init__(self, name: object):
        self.name = name
        super().__init__(f"Unknown biomarker: {name!r}")


class OutOfRangeError(TrackerError, ValueError):
    """Score outside the closed [1, 10] scale."""

    def __init__(self, biomarker: object, score: object, low: float, high: float):
        self.biomarker = biomarker
        self.score = score
        super().__init__(f"{biomarker} score must be between {low:g} and {high:g}, got {score!r}")


class FutureDateError(TrackerError, ValueError):
    """Staged date lies after today."""

    def __init__(self, entry_date: date, today: date):
        self.date = entry_date
        self.today = today
        super().__init__(f"Cannot log an entry for {entry_date.isoformat()}: it is after today ({today.isoformat()})")


class EmptyInputError(TrackerError):
    """Statistics requested over zero entries."""
