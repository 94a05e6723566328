import math

import pandas as pd
import pytest

from stormharm.analytics.aggregate import aggregate
from stormharm.data.loader import records_to_frame
from stormharm.data.normalize import (
    multiplier_series,
    normalize_frame,
    normalize_record,
    normalize_records,
    resolve_multiplier,
)
from stormharm.data.schemas import HarmField, StormRecord


@pytest.mark.parametrize("code,expected", [
    ("K", 5_000),
    ("k", 5_000),
    ("M", 5_000_000),
    ("m", 5_000_000),
    ("B", 5_000_000_000),
    ("X", 5),
    ("", 5),
    (None, 5),
    (float("nan"), 5),
    ("+", 5),
])
def test_multiplier_applied_to_base_value(code, expected):
    assert 5 * resolve_multiplier(code) == expected


def test_normalize_record_uppercases_and_rescales():
    rec = StormRecord("wind damage", 1, 2, 5.0, "k", 3.0, "M")
    out = normalize_record(rec)

    assert out.event_type == "WIND DAMAGE"
    assert out.property_cost == 5_000
    assert out.crop_cost == 3_000_000
    assert (out.fatalities, out.injuries) == (1, 2)
    # Source record untouched
    assert rec.event_type == "wind damage"
    assert rec.property_damage == 5.0


def test_label_whitespace_preserved():
    out = normalize_record(StormRecord("  tstm wind "))
    assert out.event_type == "  TSTM WIND "


def test_normalize_records_idempotent(records):
    once = normalize_records(records)
    twice = normalize_records(once)
    assert once == twice
    assert len(once) == len(records)


def test_multiplier_series_matches_scalar():
    codes = pd.Series(["K", "m", "B", "", None, "h", 5])
    expected = [resolve_multiplier(c) for c in codes]
    assert multiplier_series(codes).tolist() == expected


def test_normalize_frame(storm_df):
    out = normalize_frame(storm_df)

    assert out["event_type"].tolist() == ["TORNADO", "TORNADO", "FLOOD", "HAIL", "HURRICANE", "FLOOD"]
    assert out["property_cost"].tolist() == [2.5e6, 1e5, 1e9, 50.0, 3e9, 20.0]
    assert out["crop_cost"].tolist() == [0.0, 5e3, 2e6, 1e4, 1e6, 0.0]
    assert out["property_cost"].dtype == "float64"
    # Input frame is not mutated
    assert storm_df["event_type"].tolist()[1] == "tornado"
    assert "property_cost" not in storm_df.columns


def test_normalize_frame_idempotent(storm_df):
    once = normalize_frame(storm_df)
    twice = normalize_frame(once)
    pd.testing.assert_frame_equal(once, twice)


def test_normalize_frame_large_values_do_not_overflow():
    df = pd.DataFrame({
        "event_type": ["FLOOD"], "fatalities": [0], "injuries": [0],
        "property_damage": [115.0], "property_exp": ["B"],
        "crop_damage": [0.0], "crop_exp": [""],
    })
    out = normalize_frame(df)
    assert math.isclose(out["property_cost"].iloc[0], 1.15e11)


def test_padded_code_resolves_the_same_on_every_path():
    recs = [StormRecord("HAIL", property_damage=5.0, property_exp="K ")]

    via_records = aggregate(normalize_records(recs), HarmField.PROPERTY_COST)
    via_frame = aggregate(normalize_frame(records_to_frame(recs)), HarmField.PROPERTY_COST)
    via_raw = aggregate(recs, HarmField.PROPERTY_COST)

    assert via_records == via_frame == via_raw == {"HAIL": 5.0}
