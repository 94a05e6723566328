"""Data loading, normalization, and in-memory storm-event store."""
from .loader import discover_csvs, load_all_csvs, load_single_csv, records_to_frame, frame_to_records
from .store import DataStore
from .schemas import HarmField, StormRecord, RankingTable, QUESTIONS
from .normalize import resolve_multiplier, normalize_record, normalize_records, normalize_frame
