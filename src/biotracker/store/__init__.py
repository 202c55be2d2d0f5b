"""Entry storage."""
from .records import Entry, RecordStore, StoreView, entries_to_frame

__all__ = [
    "Entry",
    "RecordStore",
    "StoreView",
    "entries_to_frame",
]
