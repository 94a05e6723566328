"""
Horizontal bar charts for the two harm questions.

Each question gets one figure holding its pair of rankings side by side.
"""
from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

from stormharm.data.schemas import QUESTIONS, QUESTION_TITLES, RankingTable


def plot_ranking(ax, ranking: RankingTable, color: str) -> None:
    """Draw one ranking on ``ax``; largest bar on top."""
    labels, values = ranking.chart_series()
    ax.barh(labels, values, color=color)
    ax.set_title(ranking.label)
    ax.set_xlabel(ranking.unit)


def render_question_charts(
    rankings: list[RankingTable],
    output_dir: str | Path,
    dpi: int = 150,
) -> list[Path]:
    """Save one PNG per question. Returns the written paths."""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    by_field = {r.field: r for r in rankings}

    written = []
    for key, fields in QUESTIONS.items():
        fig, axes = plt.subplots(1, len(fields), figsize=(14, 6))
        for ax, field, color in zip(axes, fields, ("firebrick", "steelblue")):
            plot_ranking(ax, by_field[field], color)
        fig.suptitle(QUESTION_TITLES[key])
        fig.tight_layout()

        path = output_dir / f"{key}.png"
        fig.savefig(path, dpi=dpi)
        plt.close(fig)
        print(f"   Saved {path.name}")
        written.append(path)
    return written
