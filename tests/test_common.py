"""Tests for biomarker, date and error helpers."""
from datetime import date, datetime

import pytest

from biotracker.common import (
    COLORS,
    Biomarker,
    DateRange,
    OutOfRangeError,
    TrackerError,
    UnknownBiomarkerError,
    format_display_date,
    parse_date,
    parse_selection,
    toggle_biomarker,
    validate_score,
)


class TestBiomarker:

    def test_parse_case_insensitive(self):
        assert Biomarker.parse("digestion") is Biomarker.DIGESTION
        assert Biomarker.parse(" Mind ") is Biomarker.MIND
        assert Biomarker.parse(Biomarker.SLEEP) is Biomarker.SLEEP

    def test_parse_unknown(self):
        with pytest.raises(UnknownBiomarkerError) as exc:
            Biomarker.parse("Stress")
        assert isinstance(exc.value, ValueError)
        assert isinstance(exc.value, TrackerError)

    def test_colors_cover_all_and_are_immutable(self):
        assert set(COLORS) == set(Biomarker)
        assert Biomarker.SLEEP.color == "#8884d8"
        with pytest.raises(TypeError):
            COLORS[Biomarker.SLEEP] = "#000000"

    def test_str_is_display_name(self):
        assert str(Biomarker.ENERGY) == "Energy"


class TestValidateScore:

    def test_rounding(self):
        assert validate_score("Sleep", 7.25) in (7.2, 7.3)
        assert validate_score("Sleep", 3.14159) == 3.1

    @pytest.mark.parametrize("score", [0.99, 10.01, float("nan"), True, None])
    def test_rejects(self, score):
        with pytest.raises(OutOfRangeError):
            validate_score("Sleep", score)


class TestSelection:

    def test_toggle_removes_and_appends(self):
        selection = [Biomarker.SLEEP, Biomarker.MOOD, Biomarker.ENERGY]
        assert toggle_biomarker(selection, "Mood") == [Biomarker.SLEEP, Biomarker.ENERGY]
        assert toggle_biomarker(selection, "Mind") == selection + [Biomarker.MIND]

    def test_toggle_does_not_mutate(self):
        selection = [Biomarker.SLEEP]
        toggle_biomarker(selection, "Sleep")
        assert selection == [Biomarker.SLEEP]

    def test_parse_selection_dedupes(self):
        assert parse_selection(["Mood", "mood", "Sleep"]) == [Biomarker.MOOD, Biomarker.SLEEP]


class TestDates:

    def test_display_format(self):
        assert format_display_date("2024-03-01") == "03-01-24"
        assert format_display_date(date(1999, 12, 31)) == "12-31-99"

    def test_parse_date(self):
        assert parse_date("2024-01-10") == date(2024, 1, 10)
        assert parse_date(datetime(2024, 1, 10, 23, 59)) == date(2024, 1, 10)
        with pytest.raises(ValueError):
            parse_date("01/10/2024")
        with pytest.raises(TypeError):
            parse_date(20240110)

    def test_range_contains(self):
        r = DateRange.of("2024-01-03", "2024-01-05")
        assert date(2024, 1, 3) in r
        assert date(2024, 1, 5) in r
        assert date(2024, 1, 6) not in r
        assert "2024-01-04" not in r

    def test_inverted_and_unbounded(self):
        assert DateRange.of("2024-01-05", "2024-01-01").is_inverted
        assert DateRange().is_unbounded
        assert date(1900, 1, 1) in DateRange()

    def test_last_days(self):
        r = DateRange.last_days(30, today=date(2024, 3, 31))
        assert r.start == date(2024, 3, 1)
        assert r.end == date(2024, 3, 31)
        assert r.days() == 31
        assert DateRange.of(start="2024-01-01").days() is None
