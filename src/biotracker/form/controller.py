"""
Entry form controller.

Stages a pending entry (date + one score per biomarker), validates each
change as it is made, and commits the result to a RecordStore.
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Mapping, Optional

from biotracker.common.biomarkers import ALL_BIOMARKERS, Biomarker, BiomarkerLike, validate_score
from biotracker.common.config import get_config
from biotracker.common.dates import DateLike, parse_date
from biotracker.common.errors import DuplicateDateError, FutureDateError
from biotracker.form.feedback import SaveFeedback
from biotracker.store.records import Entry, RecordStore

log = logging.getLogger(__name__)


class EntryFormController:
    """
    Mutable staging area for a new entry.

    Args:
        store: Store that commit() writes to
        today: Clock returning the current date (injectable for tests)
        default_score: Starting score for every biomarker (config default when None)
        feedback: Save button state machine (built from config when None)

    Example:
        >>> form = EntryFormController(RecordStore())
        >>> form.set_value("Sleep", 8)
        >>> entry = form.commit()
    """

    def __init__(
        self,
        store: RecordStore,
        today: Callable[[], date] = date.today,
        default_score: Optional[float] = None,
        feedback: Optional[SaveFeedback] = None,
    ):
        config = get_config()
        if default_score is None:
            default_score = config.get_default_score()
        if feedback is None:
            feedback = SaveFeedback(*config.get_feedback_durations())

        self._store = store
        self._today = today
        self.feedback = feedback
        self.pending_date: date = today()
        self._pending_values: dict[Biomarker, float] = {
            b: validate_score(b, default_score) for b in ALL_BIOMARKERS
        }

    @property
    def pending_values(self) -> Mapping[Biomarker, float]:
        return dict(self._pending_values)

    def set_value(self, biomarker: BiomarkerLike, score: float) -> float:
        """
        Stage one score.

        Returns:
            The stored (rounded) score

        Raises:
            OutOfRangeError: if score is outside [1, 10]
            UnknownBiomarkerError: for an unknown biomarker name
        """
        key = Biomarker.parse(biomarker)
        value = validate_score(key, score)
        self._pending_values[key] = value
        return value

    def set_date(self, entry_date: DateLike) -> date:
        """
        Stage the entry date.

        Raises:
            FutureDateError: if the date is after today
        """
        parsed = parse_date(entry_date)
        today = self._today()
        if parsed > today:
            raise FutureDateError(parsed, today)
        self.pending_date = parsed
        return parsed

    def build_entry(self) -> Entry:
        return Entry(date=self.pending_date, values=dict(self._pending_values))

    def commit(self) -> Entry:
        """
        Write the staged entry to the store.

        Staged values are kept afterwards so the next entry starts from them.

        Returns:
            The stored entry

        Raises:
            DuplicateDateError: if the store already has an entry for the
                staged date (store unchanged)
        """
        if self.pending_date in self._store:
            log.info(f"Commit rejected: entry for {self.pending_date.isoformat()} already exists")
            raise DuplicateDateError(self.pending_date)

        entry = self.build_entry()
        self._store.insert(entry)
        log.info(f"Saved entry for {entry.date.isoformat()}")
        return entry

    def submit(self, now: float) -> Optional[Entry]:
        """
        Save action behind the dashboard button.

        Ignored while a previous save's feedback is still running. The
        feedback sequence starts only after a successful commit.

        Args:
            now: Monotonic timestamp in seconds

        Returns:
            The stored entry, or None if the submit was ignored

        Raises:
            DuplicateDateError: as commit()
        """
        self.feedback.advance(now)
        if self.feedback.busy:
            log.debug("Submit ignored: previous save still in progress")
            return None

        entry = self.commit()
        self.feedback.start(now)
        return entry
