import json
import runpy
import sys
from pathlib import Path

import pandas as pd
import pytest

SCRIPTS = Path(__file__).resolve().parents[1] / "scripts"


def run_script(name, monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", [name, *map(str, argv)])
    runpy.run_path(str(SCRIPTS / name), run_name="__main__")


@pytest.fixture
def data_dir(tmp_path, raw_country_rows, world_rows):
    raw_country_rows.to_csv(tmp_path / "co2-dataclean.csv", index=False)
    world_rows.to_csv(tmp_path / "co2-data.csv", index=False)
    return tmp_path


@pytest.fixture(autouse=True)
def in_tmp_dir(tmp_path, monkeypatch):
    # scripts write logs/co2dash.log relative to the working directory
    monkeypatch.chdir(tmp_path)


def test_pipeline_end_to_end(data_dir, monkeypatch, capsys):
    clean = data_dir / "out" / "records.csv"
    world = data_dir / "out" / "world.csv"
    trends = data_dir / "out" / "trends.csv"
    meta_json = data_dir / "out" / "clean.json"

    run_script("clean_country_data.py", monkeypatch, "--input", data_dir / "co2-dataclean.csv",
               "--output", clean, "--report_json", meta_json)
    meta = json.loads(meta_json.read_text(encoding="utf-8"))
    assert meta["rows_output"] == 4
    assert meta["rows_dropped_invalid"] == 4

    run_script("extract_global_series.py", monkeypatch, "--input", data_dir / "co2-data.csv", "--output", world)
    assert pd.read_csv(world)["year"].tolist() == [1700, 1950, 2019, 2020]

    run_script("build_yearly_trends.py", monkeypatch, "--input", clean, "--output", trends)
    t = pd.read_csv(trends)
    assert t["year"].tolist() == [2019, 2020]
    assert t["variation"].iloc[0] == 0.0

    run_script("validate_outputs.py", monkeypatch, "--records", clean, "--world", world, "--trends", trends,
               "--report_csv", data_dir / "out" / "checks.csv", "--report_json", data_dir / "out" / "checks.json")
    summary = json.loads((data_dir / "out" / "checks.json").read_text(encoding="utf-8"))
    assert summary["failed"] == []
    assert "[OK]" in capsys.readouterr().out


def test_rankings_report(data_dir, monkeypatch):
    out_md = data_dir / "report.md"
    run_script("report_rankings.py", monkeypatch, "--countries", data_dir / "co2-dataclean.csv",
               "--world", data_dir / "co2-data.csv", "--limit", 2, "--out_md", out_md)
    text = out_md.read_text(encoding="utf-8")
    assert "## Top 2 countries (2020)" in text
    assert "| 1 | China | CHN |" in text
    assert "Peak year: **2019**" in text


def test_rankings_report_single_country(data_dir, monkeypatch):
    out_md = data_dir / "report.md"
    run_script("report_rankings.py", monkeypatch, "--countries", data_dir / "co2-dataclean.csv",
               "--country", "United States", "--year", 2020, "--out_md", out_md)
    text = out_md.read_text(encoding="utf-8")
    assert "## United States (2020)" in text
    assert "| 2 |" in text


def test_map_payload(data_dir, monkeypatch):
    out = data_dir / "payload.json"
    run_script("export_map_payload.py", monkeypatch, "--input", data_dir / "co2-dataclean.csv", "--output", out)
    payload = json.loads(out.read_text(encoding="utf-8"))
    assert "United States of America" in payload["values"]["2020"]


def test_validation_fails_on_bad_records(tmp_path, monkeypatch):
    bad = tmp_path / "bad.csv"
    pd.DataFrame({"entity": ["X"], "code": [""], "year": [1700], "emissions": [-1.0]}).to_csv(bad, index=False)
    with pytest.raises(SystemExit) as err:
        run_script("validate_outputs.py", monkeypatch, "--records", bad,
                   "--report_csv", tmp_path / "c.csv", "--report_json", tmp_path / "c.json")
    assert err.value.code == 1


def test_missing_input_exits(tmp_path, monkeypatch):
    with pytest.raises(SystemExit, match="ERROR"):
        run_script("clean_country_data.py", monkeypatch, "--input", tmp_path / "none.csv",
                   "--output", tmp_path / "o.csv")
