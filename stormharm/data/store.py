"""
DataStore — In-memory storm-event table backed by pandas.

Loaded once at startup, queried on every request. Holds only the normalized
frame; each query builds new aggregates from it.
"""
from __future__ import annotations

from pathlib import Path
from typing import Iterable

import pandas as pd

from stormharm.config import INBOX_FOLDER
from stormharm.data.loader import load_all_csvs, records_to_frame
from stormharm.data.normalize import normalize_frame
from stormharm.data.schemas import StormRecord


class DataStore:
    """Normalized storm events with metadata accessors."""

    def __init__(self) -> None:
        self.df: pd.DataFrame = normalize_frame(records_to_frame([]))
        self.source_files: list[Path] = []
        self._loaded = False

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self, inbox: Path = INBOX_FOLDER) -> "DataStore":
        """Load all storm-data files from inbox and normalize them."""
        print("Loading storm events...")
        raw, files = load_all_csvs(inbox)
        if raw.empty:
            print("  No storm-data files found — starting with empty dataset")
        self.df = normalize_frame(raw)
        self.source_files = files
        self._loaded = True
        return self

    @classmethod
    def from_frame(cls, raw: pd.DataFrame) -> "DataStore":
        """Build a loaded store from an already coerced (un-normalized) frame."""
        store = cls()
        store.df = normalize_frame(raw)
        store._loaded = True
        return store

    @classmethod
    def from_records(cls, records: Iterable[StormRecord]) -> "DataStore":
        return cls.from_frame(records_to_frame(records))

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    # ------------------------------------------------------------------
    # Metadata queries
    # ------------------------------------------------------------------

    def event_types(self) -> list[str]:
        """Unique normalized event types, alphabetically."""
        if self.df.empty:
            return []
        return sorted(self.df["event_type"].unique().tolist())

    def row_count(self) -> int:
        return len(self.df)

    def summary(self) -> dict:
        return {
            "rows": self.row_count(),
            "event_types": len(self.event_types()),
            "source_files": [f.name for f in self.source_files],
        }
