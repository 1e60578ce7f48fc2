"""Tests for the drinklog command line."""

import json
import logging

import pytest

from drinklog.cli import main


@pytest.fixture
def log_file(tmp_path):
    path = tmp_path / "drinks.csv"
    path.write_text(
        "(5 jan, brunch) 2, Mimosa, ~12%, 6 oz\n"
        "1, Bloody Mary\n"
        "garbage\n"
        "(6 jan) 2, Pale Ale, 5%, 12 oz\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def no_db_env(monkeypatch):
    monkeypatch.delenv("DRINKLOG_DB", raising=False)


def test_no_command_exits(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 1


def test_import_and_list(tmp_path, log_file, capsys):
    db = str(tmp_path / "drinks.db")
    main(["import", str(log_file), "--db", db])
    out, err = capsys.readouterr()
    assert "05 Jan 2018" in out
    assert "Mimosa" in out
    assert "Imported 3 of 4 lines (1 skipped, 3 drinks)" in out
    assert "line 3" in err

    main(["list", "--db", db, "--json"])
    out, _ = capsys.readouterr()
    data = json.loads(out)
    assert len(data) == 3
    assert data[0]["entry"]["name"] == "Pale Ale"
    assert data[0]["aggregate"]["min_drinks"] == pytest.approx(1.97, abs=0.01)


def test_list_by_date(tmp_path, log_file, capsys):
    db = str(tmp_path / "drinks.db")
    main(["import", str(log_file), "--db", db])
    capsys.readouterr()

    main(["list", "--db", db, "--date", "2018-01-05"])
    out, _ = capsys.readouterr()
    assert "Mimosa" in out
    assert "Bloody Mary" in out
    assert "Pale Ale" not in out
    assert "drinks" in out


def test_list_empty(tmp_path, capsys):
    main(["list", "--db", str(tmp_path / "empty.db")])
    out, _ = capsys.readouterr()
    assert "No entries." in out


def test_import_missing_file(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["import", str(tmp_path / "missing.csv"), "--db", str(tmp_path / "x.db")])
    assert exc.value.code == 1


def test_parse(capsys):
    main(["parse", "(5 jan, brunch) ~2, Double rum, 40%, 1.5 oz"])
    out, _ = capsys.readouterr()
    data = json.loads(out)
    assert data["date"] == "2018-01-05"
    assert data["time"] == "afternoon"
    assert data["quantity"] == "~2.00"
    assert data["multiplier"] == 2.0
    assert data["abv"] == "40.0%"
    assert data["volume"] == "1.50 fl oz"


def test_parse_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["parse", "no commas here"])
    assert exc.value.code == 1
    assert "Parse error" in capsys.readouterr().err


def test_parse_conflicting_time_periods(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["parse", "(afternoon, night) 1, Beer"])
    assert exc.value.code == 1
    assert "Parse error" in capsys.readouterr().err


def test_import_logs_run_summary(tmp_path, log_file, caplog):
    caplog.set_level(logging.INFO, logger="drinklog.pipeline")
    main(["import", str(log_file), "--db", str(tmp_path / "drinks.db")])
    assert "Imported 3 of 4 lines (1 skipped, 3 new drinks)" in caplog.text
