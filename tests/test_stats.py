"""Tests for biomarker statistics."""
import math
from datetime import date, timedelta

import pytest

from biotracker.analysis import BiomarkerStats, compute_stats
from biotracker.common import Biomarker, DateRange, EmptyInputError, UnknownBiomarkerError
from biotracker.store import Entry


def make_entries(sleep_values, **other):
    start = date(2024, 1, 1)
    entries = []
    for i, sleep in enumerate(sleep_values):
        values = {"Sleep": sleep}
        for name, series in other.items():
            if series[i] is not None:
                values[name] = series[i]
        entries.append(Entry(start + timedelta(days=i), values))
    return entries


class TestComputeStats:

    def test_average_min_max(self):
        stats = compute_stats(make_entries([4, 8, 6]), ["Sleep"])
        assert stats[Biomarker.SLEEP] == BiomarkerStats(average=6.0, minimum=4.0, maximum=8.0, count=3)
        assert stats[Biomarker.SLEEP].display_average == "6.0"

    def test_full_precision_kept(self):
        stats = compute_stats(make_entries([1, 2, 2]), ["Sleep"])
        assert stats[Biomarker.SLEEP].average == pytest.approx(5 / 3)
        assert stats[Biomarker.SLEEP].display_average == "1.7"

    def test_empty_entries_raise(self):
        with pytest.raises(EmptyInputError):
            compute_stats([], ["Sleep"])

    def test_missing_values_skipped(self):
        entries = make_entries([5, 5, 5], Mood=[2, None, 8])
        stats = compute_stats(entries, ["Mood"])
        assert stats[Biomarker.MOOD].average == 5.0
        assert stats[Biomarker.MOOD].count == 2

    def test_absent_biomarker_omitted(self):
        stats = compute_stats(make_entries([5, 6]), ["Sleep", "Mind"])
        assert list(stats) == [Biomarker.SLEEP]

    def test_never_non_numeric(self):
        stats = compute_stats(make_entries([3, 9], Energy=[None, 4]), list(Biomarker))
        for summary in stats.values():
            assert all(math.isfinite(v) for v in (summary.average, summary.minimum, summary.maximum))

    def test_requested_order_and_duplicates(self):
        entries = make_entries([5], Mood=[6], Energy=[7])
        stats = compute_stats(entries, ["Energy", "sleep", "Energy"])
        assert list(stats) == [Biomarker.ENERGY, Biomarker.SLEEP]

    def test_unknown_biomarker(self):
        with pytest.raises(UnknownBiomarkerError):
            compute_stats(make_entries([5]), ["Stress"])

    def test_over_store_query(self, january_store):
        entries = january_store.query(DateRange.of("2024-01-03", "2024-01-05"))
        stats = compute_stats(entries, ["Sleep", "Mood"])
        assert stats[Biomarker.SLEEP].minimum == 2.0
        assert stats[Biomarker.SLEEP].maximum == 3.0
        assert stats[Biomarker.SLEEP].average == pytest.approx(2.5)
        assert stats[Biomarker.MOOD].average == 5.0
