"""
Per-event-type sums of one harm field.
"""
from __future__ import annotations

from typing import Iterable, Union

import pandas as pd

from stormharm.data.loader import records_to_frame
from stormharm.data.normalize import normalize_frame
from stormharm.data.schemas import AggregateResult, HarmField, StormRecord

# Counts stay integral; costs reach tens of billions so sum in float64
_SUM_DTYPES = {
    HarmField.FATALITIES: "int64",
    HarmField.INJURIES: "int64",
    HarmField.PROPERTY_COST: "float64",
    HarmField.CROP_COST: "float64",
}


def _as_frame(data: Union[pd.DataFrame, Iterable[StormRecord]]) -> pd.DataFrame:
    if isinstance(data, pd.DataFrame):
        return data
    # Records are expected normalized already; re-normalizing them is a no-op
    return normalize_frame(records_to_frame(data))


def aggregate_series(data: Union[pd.DataFrame, Iterable[StormRecord]], field: HarmField | str) -> pd.Series:
    """Sum ``field`` per event type. Index is the event type, order unspecified."""
    field = HarmField(field)
    df = _as_frame(data)
    if df.empty:
        return pd.Series(dtype=_SUM_DTYPES[field], name=field.value)
    values = df[field.value].astype(_SUM_DTYPES[field])
    return values.groupby(df["event_type"], sort=False).sum().rename(field.value)


def aggregate(data: Union[pd.DataFrame, Iterable[StormRecord]], field: HarmField | str) -> AggregateResult:
    """Map each event type to the sum of ``field`` over its records."""
    return aggregate_series(data, field).to_dict()
