"""Tests for the employee store command-line tool."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, patch

from roster.models.film import Film
from roster.services.film_catalog import film_catalog_service
from scripts.roster_cli import main, parse_args


def test_parse_args_export_defaults():
    args = parse_args(["export"])

    assert args.command == "export"
    assert args.format == "csv"
    assert args.output is None
    assert args.desc is False


def test_parse_args_export_filters():
    args = parse_args(["export", "--format", "json", "--status", "active", "--sort-by", "hireDate", "--desc"])

    assert args.format == "json"
    assert args.status == "active"
    assert args.sort_by == "hireDate"
    assert args.desc is True


def test_export_csv_to_file(tmp_path):
    store = tmp_path / "store.json"
    output = tmp_path / "out.csv"

    assert main(["--store", str(store), "export", "--department", "dept_eng", "--output", str(output)]) == 0

    lines = output.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("ID,First Name,Last Name")
    assert len(lines) == 3


def test_export_json_stdout(tmp_path, capsys):
    store = tmp_path / "store.json"

    assert main(["--store", str(store), "export", "--format", "json", "--search", "wilson"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert [item["lastName"] for item in data] == ["Wilson"]


def test_stats_prints_counts(tmp_path, capsys):
    store = tmp_path / "store.json"

    assert main(["--store", str(store), "stats"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["totalEmployees"] == 6
    assert data["activeEmployees"] == 5
    assert "newHireRecords" not in data


def test_clear_then_import(tmp_path, capsys):
    store = tmp_path / "store.json"
    backup = tmp_path / "backup.json"

    assert main(["--store", str(store), "export", "--format", "json", "--output", str(backup)]) == 0
    assert main(["--store", str(store), "clear"]) == 0
    assert main(["--store", str(store), "import", str(backup)]) == 0
    capsys.readouterr()

    assert main(["--store", str(store), "stats"]) == 0
    assert json.loads(capsys.readouterr().out)["totalEmployees"] == 6


def test_import_missing_file_fails(tmp_path):
    assert main(["--store", str(tmp_path / "store.json"), "import", str(tmp_path / "missing.json")]) == 1


def test_import_invalid_document_fails(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{}", encoding="utf-8")

    assert main(["--store", str(tmp_path / "store.json"), "import", str(bad)]) == 1


def test_films_lists_search_results(capsys):
    films = [
        Film(title="A New Hope", episode_id=4, director="George Lucas", release_date="1977-05-25"),
        Film(title="Return of the Jedi", episode_id=6, director="Richard Marquand", release_date="1983-05-25"),
    ]

    with patch.object(film_catalog_service, "fetch_films", new=AsyncMock(return_value=films)):
        assert main(["films", "--search", "jedi"]) == 0

    out = capsys.readouterr().out
    assert "Episode 6: Return of the Jedi" in out
    assert "A New Hope" not in out


def test_supervisors_leaves_out_excluded_id(tmp_path, capsys):
    store = tmp_path / "store.json"

    assert main(["--store", str(store), "supervisors", "--exclude", "emp_1"]) == 0

    ids = [line.split("\t")[0] for line in capsys.readouterr().out.splitlines()]
    assert "emp_1" not in ids
    assert len(ids) == 5
