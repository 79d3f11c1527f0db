# backend/tests/test_main.py

import csv
import datetime as dt
import json

import pytest
from rich.console import Console

import main as dashboard_cli
from progress_dashboard.core.settings import settings

# -----------------------
# Self-contained fixtures
# -----------------------

def _doc(**overrides):
    doc = {
        "id": "run",
        "title": "Morning Run",
        "category": "Fitness",
        "difficulty": "easy",
        "priority": "high",
        "status": "active",
        "tags": ["cardio"],
        "start_date": "2025-01-01",
        "total_days": 10,
        "completed_days": 4,
        "excel_file": "missing.xlsx",
    }
    doc.update(overrides)
    return doc

@pytest.fixture
def seeded(tmp_path, monkeypatch):
    seeds = tmp_path / "challenges.json"
    seeds.write_text(
        json.dumps(
            [
                _doc(),
                _doc(id="read", title="Read/Write Daily", category="Learning", status="completed",
                     difficulty="hard", tags=["books"], completed_days=None),
                _doc(id="code", title="Code", category="Learning", status="pending",
                     difficulty="medium", tags=["python"]),
            ]
        ),
        encoding="utf-8",
    )
    monkeypatch.setattr(settings, "seeds_file", seeds)
    monkeypatch.setattr(settings, "assets_dir", tmp_path / "assets")
    monkeypatch.setattr(settings, "export_dir", tmp_path / "exports")
    monkeypatch.setattr(dashboard_cli, "now", lambda: dt.datetime(2025, 1, 4, 9, 0))
    return tmp_path

@pytest.fixture
def console(monkeypatch):
    recorder = Console(record=True, width=200)
    monkeypatch.setattr(dashboard_cli, "console", recorder)
    return recorder

def _row_titles(output, titles):
    # Titres dans l'ordre d'apparition du rendu
    return sorted((output.index(t), t) for t in titles if t in output)

# -----------------------
# Arguments
# -----------------------

def test_parse_args_defaults():
    args = dashboard_cli.parse_args([])

    assert args.status == "all"
    assert args.tags == []
    assert args.sort_by == "start_date"
    assert args.sort_order == "desc"

def test_repeated_tag_accumulates():
    args = dashboard_cli.parse_args(["--tag", "cardio", "--tag", "books"])
    assert args.tags == ["cardio", "books"]

def test_invalid_sort_key_is_a_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        dashboard_cli.parse_args(["--sort-by", "category"])

    assert exc.value.code == 2
    assert "invalid choice" in capsys.readouterr().err

# -----------------------
# Dashboard rendering
# -----------------------

def test_dashboard_renders_statistics_and_rows(seeded, console):
    dashboard_cli.main([])
    output = console.export_text()

    assert "3 challenges" in output
    assert "33.3% completion rate" in output
    assert "Challenges (3)" in output
    # Progression déclarée (4 / 10) et jours restants (10 janvier - 4 janvier 9h)
    assert "40%" in output
    assert "Days left" in output

def test_status_filter_reaches_pipeline(seeded, console):
    dashboard_cli.main(["--status", "pending"])
    output = console.export_text()

    assert "Challenges (1)" in output
    assert "Code" in output
    assert "Morning Run" not in output

def test_missing_completed_days_shows_zero_progress(seeded, console):
    dashboard_cli.main(["--status", "completed"])
    output = console.export_text()

    assert "Challenges (1)" in output
    assert "0%" in output
    assert "40%" not in output

def test_tags_and_sort_reach_pipeline(seeded, console):
    dashboard_cli.main(["--tag", "cardio", "--tag", "books", "--sort-by", "title", "--sort-order", "asc"])
    output = console.export_text()

    assert "Challenges (2)" in output
    ordered = [t for _, t in _row_titles(output, ["Morning Run", "Read_Write Daily", "Read/Write Daily"])]
    assert ordered == ["Morning Run", "Read/Write Daily"]

# -----------------------
# Detail and export
# -----------------------

def test_detail_with_csv_export(seeded, console):
    dashboard_cli.main(["--detail", "read", "--export", "csv"])
    output = console.export_text()

    exported = seeded / "exports" / "Read_Write Daily-data.csv"
    assert exported.exists()
    with open(exported, encoding="utf-8", newline="") as f:
        rows = list(csv.reader(f))
    # Classeur absent : tableau de secours démarrant à la date courante
    assert rows[0] == ["Day", "Date", "Completed", "Notes", "Status"]
    assert rows[1][1] == "2025-01-04"
    assert len(rows) == settings.fallback_table_days + 1
    assert "Exported to" in output
    assert "Read/Write Daily" in output

def test_unknown_detail_id(seeded, console):
    with pytest.raises(LookupError):
        dashboard_cli.main(["--detail", "swim"])
