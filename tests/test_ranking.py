import pytest

from stormharm.analytics.aggregate import aggregate
from stormharm.analytics.ranking import rank_field, top_n
from stormharm.data.normalize import normalize_records
from stormharm.data.schemas import HarmField, StormRecord


def test_truncates_to_largest_descending():
    result = {f"CAT{i:02d}": i * 10 for i in range(15)}
    ranked = top_n(result, 10)

    assert len(ranked) == 10
    assert [v for _, v in ranked] == [140, 130, 120, 110, 100, 90, 80, 70, 60, 50]
    assert ranked[0] == ("CAT14", 140)


def test_under_fill_returns_all():
    ranked = top_n({"A": 1, "B": 3, "C": 2}, 10)
    assert ranked == [("B", 3), ("C", 2), ("A", 1)]


def test_empty_result():
    assert top_n({}, 10) == []


def test_ties_break_alphabetically():
    ranked = top_n({"ZETA": 5, "ALPHA": 5, "MID": 7, "BETA": 5}, 3)
    assert ranked == [("MID", 7), ("ALPHA", 5), ("BETA", 5)]


@pytest.mark.parametrize("n", [0, -1])
def test_rejects_non_positive_n(n):
    with pytest.raises(ValueError):
        top_n({"A": 1}, n)


def test_end_to_end_scenario():
    recs = [
        StormRecord("TORNADO", fatalities=5),
        StormRecord("tornado", fatalities=3),
        StormRecord("FLOOD", fatalities=1),
    ]
    normalized = normalize_records(recs)
    assert [r.event_type for r in normalized] == ["TORNADO", "TORNADO", "FLOOD"]

    totals = aggregate(normalized, HarmField.FATALITIES)
    assert totals == {"TORNADO": 8, "FLOOD": 1}
    assert top_n(totals, 2) == [("TORNADO", 8), ("FLOOD", 1)]


def test_rank_field_display_scale(store):
    ranking = rank_field(store.df, HarmField.PROPERTY_COST, 2)
    assert ranking.entries == [("HURRICANE", 3e9), ("FLOOD", 1e9 + 20.0)]
    assert ranking.display_entries()[0] == ("HURRICANE", 3.0)

    labels, values = ranking.chart_series()
    assert labels == ["FLOOD", "HURRICANE"]
    assert values[-1] == 3.0


def test_rank_field_counts_unscaled(store):
    ranking = rank_field(store.df, "injuries")
    assert ranking.display_entries() == ranking.entries
    assert ranking.entries[0] == ("TORNADO", 14)
