"""
Biomarker definitions for Biomarker Tracker.

The five tracked wellbeing dimensions, their display colors, and the
1-10 score scale every value is validated against.
"""
from __future__ import annotations

import math
import numbers
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Union

from biotracker.common.errors import OutOfRangeError, UnknownBiomarkerError

MIN_SCORE = 1
MAX_SCORE = 10


class Biomarker(str, Enum):
    """Tracked wellbeing dimension. Values are the display names."""
    SLEEP = "Sleep"
    MOOD = "Mood"
    ENERGY = "Energy"
    DIGESTION = "Digestion"
    MIND = "Mind"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Union["Biomarker", str]) -> "Biomarker":
        """Look up a biomarker by enum member or (case-insensitive) name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value.lower() == key:
                    return member
        raise UnknownBiomarkerError(value)

    @property
    def color(self) -> str:
        return COLORS[self]


BiomarkerLike = Union[Biomarker, str]

# Chart colors (immutable)
COLORS = MappingProxyType({
    Biomarker.SLEEP: "#8884d8",      # Purple
    Biomarker.MOOD: "#FFCE56",       # Yellow
    Biomarker.ENERGY: "#FF6384",     # Pink
    Biomarker.DIGESTION: "#FFD700",  # Gold
    Biomarker.MIND: "#4CAF50",       # Green
})

ALL_BIOMARKERS: tuple[Biomarker, ...] = tuple(Biomarker)


def validate_score(biomarker: BiomarkerLike, score: float) -> float:
    """
    Validate a score against the 1-10 scale and round it to one decimal.

    Args:
        biomarker: Biomarker the score belongs to (used in the error message)
        score: Raw score

    Returns:
        Score rounded to the nearest 0.1

    Raises:
        OutOfRangeError: if score is not a number in [1, 10]
    """
    if isinstance(score, bool) or not isinstance(score, numbers.Real):
        raise OutOfRangeError(biomarker, score, MIN_SCORE, MAX_SCORE)
    if math.isnan(score) or not MIN_SCORE <= score <= MAX_SCORE:
        raise OutOfRangeError(biomarker, score, MIN_SCORE, MAX_SCORE)
    return round(float(score), 1)


def parse_selection(names: Iterable[BiomarkerLike]) -> list[Biomarker]:
    """Normalize names to biomarkers, keeping first-seen order and dropping repeats."""
    selection: list[Biomarker] = []
    for name in names:
        biomarker = Biomarker.parse(name)
        if biomarker not in selection:
            selection.append(biomarker)
    return selection


def toggle_biomarker(selection: Iterable[BiomarkerLike], biomarker: BiomarkerLike) -> list[Biomarker]:
    """
    Toggle a biomarker in a display selection.

    Removes it when present, otherwise appends it. Returns a new list.
    """
    current = parse_selection(selection)
    target = Biomarker.parse(biomarker)
    if target in current:
        return [b for b in current if b != target]
    return current + [target]
