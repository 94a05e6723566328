"""
Storm Harm Report — top event types by human and economic harm.
"""
from __future__ import annotations

from pathlib import Path

import pandas as pd

from stormharm.analytics.common import sanitize_for_json
from stormharm.analytics.ranking import rank_field
from stormharm.config import TOP_N
from stormharm.data.schemas import QUESTIONS, QUESTION_TITLES, HarmField, RankingTable
from stormharm.data.store import DataStore
from stormharm.excel.writer import ExcelWriter


def _ranking_cols(field: HarmField) -> list[tuple[str, str, str]]:
    value_type = "billions" if field.is_cost else "number"
    return [
        ("rank", "number", "Rank"),
        ("event_type", "text", "Event Type"),
        ("value", value_type, f"{field.label} ({field.unit})"),
    ]


def build_rankings(store: DataStore, n: int = TOP_N) -> list[RankingTable]:
    """One ranking per field, in question order."""
    return [
        rank_field(store.df, field, n)
        for fields in QUESTIONS.values()
        for field in fields
    ]


def generate_json(store: DataStore, n: int = TOP_N) -> dict:
    rankings = {r.field: r for r in build_rankings(store, n)}
    return sanitize_for_json({
        "summary": {**store.summary(), "top_n": n},
        "questions": [
            {
                "key": key,
                "title": QUESTION_TITLES[key],
                "rankings": [rankings[f].to_dict() for f in fields],
            }
            for key, fields in QUESTIONS.items()
        ],
    })


def generate_excel(
    store: DataStore,
    output_path: str | Path,
    n: int = TOP_N,
) -> Path:
    rankings = build_rankings(store, n)
    summary = store.summary()
    ew = ExcelWriter()

    ws = ew.add_sheet("Summary")
    ew.write_title(ws, "STORM HARM REPORT",
                   f"Top {n} event types  |  Generated {pd.Timestamp.now():%B %d, %Y}")
    row = ew.write_section(ws, 5, "DATASET")
    row = ew.write_dataset_counts(ws, row, summary)

    # Leaders per field on the summary sheet
    row = ew.write_section(ws, row, "MOST HARMFUL EVENT TYPE")
    leaders = []
    for ranking in rankings:
        shown = ranking.display_entries()
        leader, value = shown[0] if shown else ("N/A", 0)
        leaders.append({"field": ranking.label, "event_type": leader, "value": value, "unit": ranking.unit})
    ew.write_table(ws, row, [
        ("field", "text", "Measure"),
        ("event_type", "text", "Event Type"),
        ("value", "decimal", "Total"),
        ("unit", "text", "Unit"),
    ], leaders, freeze=False)

    for ranking in rankings:
        ws_r = ew.add_sheet(ranking.label)
        ew.write_table(
            ws_r, 1, _ranking_cols(ranking.field), ranking.to_dict()["entries"],
            highlight_fn=lambda idx, _row: "top" if idx == 0 else None,
        )

    return ew.save(output_path)
