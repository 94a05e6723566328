import json

import pytest

from stormharm.cli import build_parser, main


@pytest.fixture
def inbox(tmp_path, raw_storm_df):
    folder = tmp_path / "inbox"
    folder.mkdir()
    raw_storm_df.to_csv(folder / "StormData.csv.gz", index=False, compression="gzip")
    return folder


def test_rank_prints_table(inbox, capsys):
    main(["rank", "fatalities", "--top", "2", "--inbox", str(inbox)])
    out = capsys.readouterr().out
    assert "FATALITIES (People)" in out
    assert out.index("TORNADO") < out.index("HURRICANE")
    assert "FLOOD" not in out.split("FATALITIES")[1]


def test_report_writes_outputs(inbox, tmp_path):
    out_dir = tmp_path / "reports"
    main(["report", "--top", "3", "--inbox", str(inbox), "--output", str(out_dir)])

    (run_dir,) = list(out_dir.iterdir())
    names = sorted(p.name for p in run_dir.iterdir())
    assert names == [
        "Storm_Harm_Report.xlsx",
        "economic_consequences.png",
        "population_health.png",
        "storm_harm_report.json",
    ]
    data = json.loads((run_dir / "storm_harm_report.json").read_text())
    assert data["summary"]["source_files"] == ["StormData.csv.gz"]


def test_report_no_charts(inbox, tmp_path):
    out_dir = tmp_path / "reports"
    main(["report", "--no-charts", "--inbox", str(inbox), "--output", str(out_dir)])
    (run_dir,) = list(out_dir.iterdir())
    assert not list(run_dir.glob("*.png"))


def test_top_must_be_positive():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["rank", "injuries", "--top", "0"])


def test_unknown_field_rejected():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["rank", "deaths"])
