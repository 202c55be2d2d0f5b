"""
Descriptive statistics over biomarker entries.

Stateless: takes a sequence of entries and the biomarkers of interest,
returns average/min/max per biomarker. Full precision is kept; rounding
happens only in the display_* properties.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

import pandas as pd

from biotracker.common.biomarkers import BiomarkerLike, Biomarker, parse_selection
from biotracker.common.errors import EmptyInputError
from biotracker.store.records import Entry

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class BiomarkerStats:
    """Summary for one biomarker."""
    average: float
    minimum: float
    maximum: float
    count: int

    @property
    def display_average(self) -> str:
        return f"{self.average:.1f}"

    @property
    def display_minimum(self) -> str:
        return f"{self.minimum:.1f}"

    @property
    def display_maximum(self) -> str:
        return f"{self.maximum:.1f}"


def compute_stats(
    entries: Sequence[Entry],
    biomarkers: Iterable[BiomarkerLike],
) -> dict[Biomarker, BiomarkerStats]:
    """
    Average, min and max per biomarker.

    Values are projected per biomarker from the entries that carry it, so a
    missing value never counts toward the mean. A biomarker no entry carries
    is left out of the result.

    Args:
        entries: Entries to summarize (any order)
        biomarkers: Biomarkers (or names) to summarize

    Returns:
        Mapping biomarker -> BiomarkerStats, in the order requested

    Raises:
        EmptyInputError: if entries is empty
        UnknownBiomarkerError: for an unknown biomarker name
    """
    selection = parse_selection(biomarkers)
    entries = list(entries)
    if not entries:
        raise EmptyInputError("Cannot compute statistics over zero entries")

    results: dict[Biomarker, BiomarkerStats] = {}
    for biomarker in selection:
        values = pd.Series(
            [e.values[biomarker] for e in entries if biomarker in e.values],
            dtype=float,
        )
        if values.empty:
            log.debug(f"No {biomarker} values in {len(entries)} entries; skipping")
            continue
        results[biomarker] = BiomarkerStats(
            average=float(values.mean()),
            minimum=float(values.min()),
            maximum=float(values.max()),
            count=int(values.count()),
        )

    return results
