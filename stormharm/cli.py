#!/usr/bin/env python3
"""
Storm Harm Analytics CLI — Unified entry point for reports, rankings, and API server.

USAGE:
  python -m stormharm.cli report                            # Full report (Excel, JSON, charts)
  python -m stormharm.cli report --top 5 --no-charts
  python -m stormharm.cli report --inbox ./data --output ./out

  python -m stormharm.cli rank fatalities                   # Print one ranking
  python -m stormharm.cli rank crop_cost --top 20

  python -m stormharm.cli serve                             # Start API server
  python -m stormharm.cli serve --port 8000
"""
from __future__ import annotations

import argparse
import json
import os
from datetime import datetime
from pathlib import Path

from stormharm.config import INBOX_FOLDER, REPORTS_FOLDER, TOP_N
from stormharm.data.schemas import QUESTIONS, QUESTION_TITLES, HarmField, RankingTable
from stormharm.data.store import DataStore


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {n}")
    return n


def _print_ranking(ranking: RankingTable) -> None:
    print(f"\n  {ranking.label.upper()} ({ranking.unit})")
    print("  " + "-" * 60)
    entries = ranking.display_entries()
    if not entries:
        print("  (no data)")
    fmt = "{:>14,.3f}" if ranking.field.is_cost else "{:>14,.0f}"
    for i, (event_type, value) in enumerate(entries, 1):
        print(f"  {i:<4}{event_type[:40]:<42}{fmt.format(value)}")


def cmd_report(args):
    """Generate the full storm harm report."""
    from stormharm.reports.harm_report import build_rankings, generate_json, generate_excel

    print("\n" + "=" * 70)
    print("  STORM HARM ANALYTICS — REPORT")
    print("=" * 70)
    print(f"  Started: {datetime.now():%Y-%m-%d %H:%M:%S}")

    store = DataStore().load(Path(args.inbox))
    rankings = build_rankings(store, args.top)
    by_field = {r.field: r for r in rankings}

    for key, fields in QUESTIONS.items():
        print(f"\n{QUESTION_TITLES[key]}")
        for field in fields:
            _print_ranking(by_field[field])

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    output_folder = Path(args.output) / timestamp
    output_folder.mkdir(parents=True, exist_ok=True)
    print("\n  Writing outputs...\n")

    generate_excel(store, output_folder / "Storm_Harm_Report.xlsx", args.top)
    print("   Storm_Harm_Report.xlsx")

    with open(output_folder / "storm_harm_report.json", "w") as f:
        json.dump(generate_json(store, args.top), f, indent=2)
    print("   storm_harm_report.json")

    if not args.no_charts:
        from stormharm.reports.charts import render_question_charts
        render_question_charts(rankings, output_folder)

    print(f"\n  Reports saved to: {output_folder}")
    print("=" * 70 + "\n")


def cmd_rank(args):
    """Print one ranking."""
    from stormharm.analytics.ranking import rank_field

    store = DataStore().load(Path(args.inbox))
    _print_ranking(rank_field(store.df, HarmField(args.field), args.top))
    print()


def cmd_serve(args):
    """Start the API server."""
    import uvicorn
    print(f"\nStarting Storm Harm Analytics API on port {args.port}...")
    uvicorn.run("stormharm.main:app", host="0.0.0.0", port=args.port, reload=args.reload,
                timeout_keep_alive=65)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Storm Harm Analytics — storm event types ranked by human and economic harm",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command")

    # report subcommand
    report_parser = subparsers.add_parser("report", help="Generate the full report")
    report_parser.add_argument("--top", type=_positive_int, default=TOP_N, help=f"Top N event types (default {TOP_N})")
    report_parser.add_argument("--inbox", default=str(INBOX_FOLDER), help="Folder with storm-data CSVs")
    report_parser.add_argument("--output", default=str(REPORTS_FOLDER), help="Reports folder")
    report_parser.add_argument("--no-charts", action="store_true", help="Skip chart PNGs")
    report_parser.set_defaults(func=cmd_report)

    # rank subcommand
    rank_parser = subparsers.add_parser("rank", help="Print one ranking")
    rank_parser.add_argument("field", choices=[f.value for f in HarmField], help="Harm field")
    rank_parser.add_argument("--top", type=_positive_int, default=TOP_N, help=f"Top N event types (default {TOP_N})")
    rank_parser.add_argument("--inbox", default=str(INBOX_FOLDER), help="Folder with storm-data CSVs")
    rank_parser.set_defaults(func=cmd_rank)

    # serve subcommand
    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--port", type=int, default=int(os.environ.get("PORT", "8000")), help="Port (default 8000)")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return

    args.func(args)


if __name__ == "__main__":
    main()
