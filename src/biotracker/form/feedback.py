"""
Save button feedback.

IDLE -> SAVING -> CONFIRMED -> IDLE, driven by explicit timestamps so the
sequence can be stepped in tests and on each dashboard rerun. The machine
only tracks presentation; whether the commit succeeded is decided elsewhere.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

log = logging.getLogger(__name__)


class FeedbackState(str, Enum):
    IDLE = "idle"
    SAVING = "saving"
    CONFIRMED = "confirmed"


LABELS = {
    FeedbackState.IDLE: "Save Entry",
    FeedbackState.SAVING: "Saving...",
    FeedbackState.CONFIRMED: "Saved!",
}


class SaveFeedback:
    """
    Timed three-state machine behind the save button.

    Args:
        saving_seconds: Time spent in SAVING before CONFIRMED
        confirmed_seconds: Time spent in CONFIRMED before returning to IDLE
    """

    def __init__(self, saving_seconds: float = 0.5, confirmed_seconds: float = 1.0):
        if saving_seconds < 0 or confirmed_seconds < 0:
            raise ValueError("Feedback durations must not be negative")
        self.saving_seconds = saving_seconds
        self.confirmed_seconds = confirmed_seconds
        self._state = FeedbackState.IDLE
        self._started_at: Optional[float] = None

    @property
    def state(self) -> FeedbackState:
        return self._state

    @property
    def busy(self) -> bool:
        return self._state is not FeedbackState.IDLE

    @property
    def label(self) -> str:
        return LABELS[self._state]

    def start(self, now: float) -> bool:
        """
        Enter SAVING.

        Returns:
            False (and does nothing) if a previous sequence is still running
        """
        if self.busy:
            log.debug(f"Save feedback already {self._state.value}; ignoring start")
            return False
        self._state = FeedbackState.SAVING
        self._started_at = now
        return True

    def advance(self, now: float) -> FeedbackState:
        """Apply every transition due by ``now`` and return the resulting state."""
        if self._started_at is None:
            return self._state

        elapsed = now - self._started_at
        if elapsed >= self.saving_seconds + self.confirmed_seconds:
            self._state = FeedbackState.IDLE
            self._started_at = None
        elif elapsed >= self.saving_seconds:
            self._state = FeedbackState.CONFIRMED
        return self._state

    def seconds_until_next(self, now: float) -> Optional[float]:
        """Time left in the current phase, or None when idle."""
        if self._started_at is None:
            return None
        elapsed = now - self._started_at
        if self._state is FeedbackState.SAVING:
            return max(0.0, self.saving_seconds - elapsed)
        return max(0.0, self.saving_seconds + self.confirmed_seconds - elapsed)
