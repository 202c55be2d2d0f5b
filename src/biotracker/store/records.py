"""
In-memory record store for daily biomarker entries.

One Entry per calendar date. The store is the only owner of the collection;
readers get a StoreView, which exposes the query side only.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional

import pandas as pd

from biotracker.common.biomarkers import ALL_BIOMARKERS, Biomarker, BiomarkerLike, validate_score
from biotracker.common.dates import DateLike, DateRange, parse_date
from biotracker.common.errors import DuplicateDateError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Entry:
    """One day's scores, keyed by date. Immutable once built."""
    date: date
    values: Mapping[Biomarker, float] = field(default_factory=dict)

    def __post_init__(self):
        normalized = {}
        for name, score in self.values.items():
            biomarker = Biomarker.parse(name)
            normalized[biomarker] = validate_score(biomarker, score)
        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "date", parse_date(self.date))
        object.__setattr__(self, "values", MappingProxyType(normalized))

    def __hash__(self) -> int:
        return hash((self.date, tuple(sorted(self.values.items()))))

    def get(self, biomarker: BiomarkerLike) -> Optional[float]:
        """Score for one biomarker, or None if the entry does not carry it."""
        return self.values.get(Biomarker.parse(biomarker))

    def to_record(self) -> dict:
        """Flat dict: ISO date plus one key per biomarker name."""
        record = {"date": self.date.isoformat()}
        record.update({b.value: score for b, score in self.values.items()})
        return record


def _sorted_by_date(entries: Iterable[Entry]) -> list[Entry]:
    return sorted(entries, key=lambda e: e.date)


def entries_to_frame(entries: Iterable[Entry]) -> pd.DataFrame:
    """
    Convert entries to a DataFrame for charting.

    Returns:
        DataFrame with a datetime 'date' column and one float column per
        biomarker (NaN where an entry lacks a value), ascending by date.
    """
    columns = ["date"] + [b.value for b in ALL_BIOMARKERS]
    rows = [e.to_record() for e in _sorted_by_date(entries)]
    df = pd.DataFrame(rows, columns=columns)
    df["date"] = pd.to_datetime(df["date"])
    for biomarker in ALL_BIOMARKERS:
        df[biomarker.value] = df[biomarker.value].astype(float)
    return df.reset_index(drop=True)


class RecordStore:
    """
    Authoritative collection of entries, keyed by date.

    Insertion order is preserved (recent() depends on it); query() always
    returns entries sorted ascending by date.

    Example:
        >>> store = RecordStore()
        >>> store.insert(Entry(date(2024, 1, 1), {"Sleep": 7}))
        >>> len(store.query(DateRange.of("2024-01-01", "2024-01-31")))
        1
    """

    def __init__(self, entries: Iterable[Entry] = ()):
        self._entries: dict[date, Entry] = {}
        self.extend(entries)

    def insert(self, entry: Entry) -> None:
        """
        Add an entry.

        Raises:
            DuplicateDateError: if an entry for entry.date exists (store unchanged)
        """
        if entry.date in self._entries:
            log.debug(f"Rejected duplicate entry for {entry.date.isoformat()}")
            raise DuplicateDateError(entry.date)
        self._entries[entry.date] = entry
        log.debug(f"Inserted entry for {entry.date.isoformat()} ({len(self._entries)} total)")

    def extend(self, entries: Iterable[Entry]) -> int:
        """
        Insert entries in order (used for seeding).

        Stops at the first duplicate; entries inserted before it stay.

        Returns:
            Number of entries inserted
        """
        count = 0
        for entry in entries:
            self.insert(entry)
            count += 1
        return count

    def delete(self, entry_date: DateLike) -> bool:
        """Remove the entry for a date. Returns whether anything was removed."""
        key = parse_date(entry_date)
        removed = self._entries.pop(key, None) is not None
        if removed:
            log.info(f"Deleted entry for {key.isoformat()}")
        return removed

    def get(self, entry_date: DateLike) -> Optional[Entry]:
        return self._entries.get(parse_date(entry_date))

    def query(self, date_range: Optional[DateRange] = None) -> list[Entry]:
        """
        Entries inside an inclusive date range, ascending by date.

        Args:
            date_range: Range to filter on; None (or an unbounded range)
                returns every entry

        Returns:
            Matching entries, oldest first
        """
        if date_range is None or date_range.is_unbounded:
            return _sorted_by_date(self._entries.values())
        return _sorted_by_date(e for e in self._entries.values() if e.date in date_range)

    def recent(self, n: int) -> list[Entry]:
        """Last n entries by insertion order (not date order)."""
        if n <= 0:
            return []
        return list(self._entries.values())[-n:]

    def to_frame(self, date_range: Optional[DateRange] = None) -> pd.DataFrame:
        return entries_to_frame(self.query(date_range))

    def view(self) -> "StoreView":
        return StoreView(self)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, entry_date: object) -> bool:
        try:
            return parse_date(entry_date) in self._entries
        except (TypeError, ValueError):
            return False

    def __iter__(self) -> Iterator[Entry]:
        return iter(list(self._entries.values()))

    def __repr__(self) -> str:
        return f"RecordStore({len(self)} entries)"


class StoreView:
    """Read-only window onto a RecordStore, handed to the dashboard."""

    def __init__(self, store: RecordStore):
        self._store = store

    def query(self, date_range: Optional[DateRange] = None) -> list[Entry]:
        return self._store.query(date_range)

    def recent(self, n: int) -> list[Entry]:
        return self._store.recent(n)

    def get(self, entry_date: DateLike) -> Optional[Entry]:
        return self._store.get(entry_date)

    def to_frame(self, date_range: Optional[DateRange] = None) -> pd.DataFrame:
        return self._store.to_frame(date_range)

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, entry_date: object) -> bool:
        return entry_date in self._store
