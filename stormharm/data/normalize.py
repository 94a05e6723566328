"""
Event-type label normalization and damage rescaling by magnitude code.
"""
from __future__ import annotations

import dataclasses
from typing import Iterable

import numpy as np
import pandas as pd

from stormharm.config import DAMAGE_SCALING, DEFAULT_MULTIPLIER, MAGNITUDE_MULTIPLIERS
from stormharm.data.schemas import StormRecord


# ---------------------------------------------------------------------------
# Magnitude codes
# ---------------------------------------------------------------------------

def resolve_multiplier(code) -> float:
    """Return the scale factor for a magnitude code (K/M/B, any case).

    Missing, blank and unrecognized codes scale by 1.
    """
    if code is None or (not isinstance(code, str) and pd.isna(code)):
        return DEFAULT_MULTIPLIER
    return MAGNITUDE_MULTIPLIERS.get(str(code).upper(), DEFAULT_MULTIPLIER)


# ---------------------------------------------------------------------------
# Record-level normalization
# ---------------------------------------------------------------------------

def normalize_record(record: StormRecord) -> StormRecord:
    """Uppercase the label and fold each magnitude code into its damage value.

    The folded codes are blanked, so normalizing twice changes nothing.
    """
    return dataclasses.replace(
        record,
        event_type=record.event_type.upper(),
        property_damage=record.property_damage * resolve_multiplier(record.property_exp),
        property_exp="",
        crop_damage=record.crop_damage * resolve_multiplier(record.crop_exp),
        crop_exp="",
    )


def normalize_records(records: Iterable[StormRecord]) -> list[StormRecord]:
    return [normalize_record(r) for r in records]


# ---------------------------------------------------------------------------
# Frame-level normalization
# ---------------------------------------------------------------------------

def multiplier_series(codes: pd.Series) -> pd.Series:
    """Vectorized resolve_multiplier over a column of magnitude codes."""
    upper = codes.astype(object).fillna("").astype(str).str.upper()
    return upper.map(MAGNITUDE_MULTIPLIERS).fillna(DEFAULT_MULTIPLIER).astype("float64")


def normalize_frame(df: pd.DataFrame) -> pd.DataFrame:
    """Return a normalized copy of a loaded storm-event frame.

    Adds ``property_cost``/``crop_cost`` (damage × multiplier). The damage
    columns are replaced by those costs and the codes blanked, matching
    normalize_record, so the result can be fed back in unchanged.
    """
    out = df.copy()
    out["event_type"] = out["event_type"].fillna("").astype(str).str.upper()

    for damage_col, (exp_col, cost_col) in DAMAGE_SCALING.items():
        base = out[damage_col].astype("float64")
        cost = base * multiplier_series(out[exp_col])
        out[cost_col] = cost.to_numpy(dtype=np.float64)
        out[damage_col] = out[cost_col]
        out[exp_col] = ""

    return out
