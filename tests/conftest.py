from __future__ import annotations

import pandas as pd
import pytest

from stormharm.data.loader import coerce_columns
from stormharm.data.schemas import StormRecord
from stormharm.data.store import DataStore


@pytest.fixture
def raw_storm_df() -> pd.DataFrame:
    """A small NOAA-shaped export with mixed-case labels and codes."""
    return pd.DataFrame({
        "STATE": ["AL", "AL", "TX", "KS", "FL", "FL"],
        "EVTYPE": ["TORNADO", "tornado", "FLOOD", "HAIL", "Hurricane", "FLOOD"],
        "FATALITIES": [5, 3, 1, 0, 2, 0],
        "INJURIES": [10, 4, 0, 1, 7, 2],
        "PROPDMG": [2.5, 100.0, 1.0, 50.0, 3.0, 20.0],
        "PROPDMGEXP": ["M", "k", "B", "", "b", "X"],
        "CROPDMG": [0.0, 5.0, 2.0, 10.0, 1.0, 0.0],
        "CROPDMGEXP": ["", "K", "m", "K", "M", None],
    })


@pytest.fixture
def storm_df(raw_storm_df) -> pd.DataFrame:
    return coerce_columns(raw_storm_df)


@pytest.fixture
def store(storm_df) -> DataStore:
    return DataStore.from_frame(storm_df)


@pytest.fixture
def records() -> list[StormRecord]:
    return [
        StormRecord("TORNADO", fatalities=5, property_damage=5.0, property_exp="K"),
        StormRecord("tornado", fatalities=3, crop_damage=5.0, crop_exp="m"),
        StormRecord("FLOOD", fatalities=1, property_damage=5.0, property_exp="B"),
    ]
