"""
Storm-data CSV discovery, loading, and type coercion.
"""
from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import Iterable

import pandas as pd

from stormharm.config import (
    INBOX_FOLDER, STORM_FILE_SUFFIXES, COLUMN_MAP, REQUIRED_COLUMNS,
    COUNT_COLS, DAMAGE_COLS, EXP_COLS,
)
from stormharm.data.schemas import StormRecord


# ---------------------------------------------------------------------------
# CSV discovery
# ---------------------------------------------------------------------------

def is_storm_file(path: Path) -> bool:
    name = path.name.lower()
    return any(name.endswith(suffix) for suffix in STORM_FILE_SUFFIXES)


def discover_csvs(inbox: Path = INBOX_FOLDER) -> list[Path]:
    """Recursively find storm-data exports (plain or compressed) in inbox."""
    if not inbox.exists():
        return []
    return sorted(p for p in inbox.rglob("*") if p.is_file() and is_storm_file(p))


# ---------------------------------------------------------------------------
# Loading & coercion
# ---------------------------------------------------------------------------

def coerce_columns(df: pd.DataFrame, source: str = "") -> pd.DataFrame:
    """Rename raw NOAA columns and coerce types on a copy.

    Non-numeric counts/damage become 0 and fractional counts are rounded
    (both reported); negatives pass through. Magnitude codes are left as-is
    apart from blanking missing ones, so padded codes resolve to 1.
    """
    df = df.rename(columns=COLUMN_MAP)
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raw = [k for k, v in COLUMN_MAP.items() if v in missing]
        where = f" in {source}" if source else ""
        raise ValueError(f"Missing storm-data column(s){where}: {', '.join(raw)}")

    df = df[REQUIRED_COLUMNS].copy()
    df["event_type"] = df["event_type"].fillna("").astype(str)

    for col in COUNT_COLS + DAMAGE_COLS:
        values = pd.to_numeric(df[col], errors="coerce").astype("float64")
        bad = int((values.isna() & df[col].notna()).sum())
        if bad:
            print(f"  Warning: {bad:,} non-numeric '{col}' value(s) set to 0{' in ' + source if source else ''}")
        values = values.fillna(0)
        if col in COUNT_COLS:
            fractional = int((values != values.round()).sum())
            if fractional:
                print(f"  Warning: {fractional:,} fractional '{col}' value(s) rounded{' in ' + source if source else ''}")
            df[col] = values.round().astype("int64")
        else:
            df[col] = values

    for col in EXP_COLS:
        df[col] = df[col].fillna("").astype(str)

    return df


def load_single_csv(filepath: Path) -> pd.DataFrame:
    """Load one storm-data export, reading only the columns we use."""
    df = pd.read_csv(
        filepath,
        usecols=lambda c: c in COLUMN_MAP,
        compression="infer",
        dtype={"EVTYPE": str, "PROPDMGEXP": str, "CROPDMGEXP": str},
        low_memory=False,
    )
    return coerce_columns(df, source=Path(filepath).name)


def load_all_csvs(inbox: Path = INBOX_FOLDER) -> tuple[pd.DataFrame, list[Path]]:
    """Load every storm-data file in inbox. Returns (frame, files loaded)."""
    files = discover_csvs(inbox)
    if not files:
        return empty_frame(), []

    frames = []
    loaded: list[Path] = []
    for i, f in enumerate(files, 1):
        try:
            chunk = load_single_csv(f)
        except (OSError, ValueError, pd.errors.ParserError) as exc:
            print(f"  Warning: skipping {f.name}: {exc}")
            continue
        frames.append(chunk)
        loaded.append(f)
        print(f"  [{i}/{len(files)}] {f.name}: {len(chunk):,} rows")

    if not frames:
        return empty_frame(), []

    df = pd.concat(frames, ignore_index=True)
    print(f"  Total: {len(df):,} storm events from {len(loaded)} file(s)")
    return df, loaded


# ---------------------------------------------------------------------------
# Records ↔ frames
# ---------------------------------------------------------------------------

def empty_frame() -> pd.DataFrame:
    return records_to_frame([])


def records_to_frame(records: Iterable[StormRecord]) -> pd.DataFrame:
    """Build a typed storm-event frame from StormRecords."""
    rows = [dataclasses.asdict(r) for r in records]
    df = pd.DataFrame(rows, columns=REQUIRED_COLUMNS)
    return coerce_columns(df)


def frame_to_records(df: pd.DataFrame) -> list[StormRecord]:
    return [
        StormRecord(
            event_type=row.event_type,
            fatalities=int(row.fatalities),
            injuries=int(row.injuries),
            property_damage=float(row.property_damage),
            property_exp=row.property_exp,
            crop_damage=float(row.crop_damage),
            crop_exp=row.crop_exp,
        )
        for row in df[REQUIRED_COLUMNS].itertuples(index=False)
    ]
