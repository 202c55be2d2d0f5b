"""Tests for the entry form controller."""
from datetime import date

import pytest

from biotracker.common import (
    Biomarker,
    DuplicateDateError,
    FutureDateError,
    OutOfRangeError,
    UnknownBiomarkerError,
)
from biotracker.form import EntryFormController, FeedbackState, SaveFeedback
from biotracker.store import Entry, RecordStore

TODAY = date(2024, 3, 15)


@pytest.fixture
def store():
    return RecordStore()


@pytest.fixture
def form(store):
    return EntryFormController(store, today=lambda: TODAY, feedback=SaveFeedback(0.5, 1.0))


class TestDefaults:

    def test_pending_date_is_today(self, form):
        assert form.pending_date == TODAY

    def test_all_values_start_at_five(self, form):
        assert form.pending_values == {b: 5.0 for b in Biomarker}

    def test_default_score_from_config(self, store, monkeypatch):
        from biotracker.common.config import Config
        monkeypatch.setenv("TRACKER_DEFAULT_SCORE", "7")
        Config.reset()
        form = EntryFormController(store, today=lambda: TODAY)
        assert form.pending_values[Biomarker.MIND] == 7.0


class TestSetValue:

    @pytest.mark.parametrize("score", [11, 0, 10.05, -1])
    def test_out_of_range(self, form, score):
        with pytest.raises(OutOfRangeError):
            form.set_value("Sleep", score)
        assert form.pending_values[Biomarker.SLEEP] == 5.0

    @pytest.mark.parametrize("score", [1, 10])
    def test_bounds_accepted(self, form, score):
        assert form.set_value("Sleep", score) == score
        assert form.pending_values[Biomarker.SLEEP] == score

    def test_rounds_to_one_decimal(self, form):
        assert form.set_value(Biomarker.MOOD, 6.66) == 6.7

    def test_non_numeric_rejected(self, form):
        with pytest.raises(OutOfRangeError):
            form.set_value("Sleep", "7")

    def test_unknown_biomarker(self, form):
        with pytest.raises(UnknownBiomarkerError):
            form.set_value("Stress", 5)


class TestSetDate:

    def test_future_date_rejected(self, form):
        with pytest.raises(FutureDateError):
            form.set_date(date(2024, 3, 16))
        assert form.pending_date == TODAY

    def test_today_and_past_accepted(self, form):
        assert form.set_date("2024-03-15") == TODAY
        assert form.set_date("2023-12-31") == date(2023, 12, 31)


class TestCommit:

    def test_commit_inserts_entry(self, form, store):
        form.set_value("Sleep", 8)
        entry = form.commit()
        assert entry.date == TODAY
        assert entry.get("Sleep") == 8.0
        assert store.get(TODAY) == entry

    def test_conflict_leaves_store_unchanged(self, form, store):
        store.insert(Entry("2024-03-01", {"Sleep": 3}))
        form.set_date("2024-03-01")
        with pytest.raises(DuplicateDateError) as exc:
            form.commit()
        assert len(store) == 1
        assert store.get("2024-03-01").get("Sleep") == 3.0
        assert "03-01-24" in str(exc.value)
        assert str(exc.value) == (
            "An entry already exists for 03-01-24. Please delete the existing entry first."
        )

    def test_values_kept_after_commit(self, form):
        form.set_value("Energy", 9)
        form.commit()
        assert form.pending_values[Biomarker.ENERGY] == 9.0

    def test_edit_is_delete_then_recreate(self, form, store):
        form.commit()
        store.delete(TODAY)
        form.set_value("Mood", 2)
        assert form.commit().get("Mood") == 2.0
        assert len(store) == 1


class TestSubmit:
    """Save action with the busy guard."""

    def test_submit_starts_feedback(self, form, store):
        entry = form.submit(now=100.0)
        assert entry is not None
        assert form.feedback.state is FeedbackState.SAVING
        assert len(store) == 1

    def test_second_submit_ignored_while_busy(self, form, store):
        form.submit(now=100.0)
        store.delete(TODAY)
        assert form.submit(now=100.8) is None
        assert len(store) == 0

    def test_submit_allowed_after_sequence(self, form, store):
        form.submit(now=100.0)
        form.set_date("2024-03-14")
        assert form.submit(now=101.5) is not None
        assert len(store) == 2

    def test_failed_submit_does_not_start_feedback(self, form, store):
        store.insert(Entry(TODAY, {}))
        with pytest.raises(DuplicateDateError):
            form.submit(now=100.0)
        assert form.feedback.state is FeedbackState.IDLE
