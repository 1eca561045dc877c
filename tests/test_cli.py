"""Tests for the terminal client."""

from pathlib import Path

import cli_search

SAMPLE_CATALOG = str(Path(__file__).resolve().parent.parent / "data" / "catalog.json")


def test_single_query(capsys):
    assert cli_search.main(["cinque", "--catalog", SAMPLE_CATALOG]) == 0

    out = capsys.readouterr().out
    assert "results: 1" in out
    assert "p2 | Комплект Cinque Terre" in out


def test_corrected_query_is_reported(capsys):
    assert cli_search.main(["пастельноебелье", "--catalog", SAMPLE_CATALOG]) == 0

    out = capsys.readouterr().out
    assert "showing results for: постельное белье" in out
    assert "Постельное белье Cozy Cotton" in out


def test_autocomplete_mode(capsys):
    assert cli_search.main(["плед", "--autocomplete", "--catalog", SAMPLE_CATALOG]) == 0

    out = capsys.readouterr().out
    assert "? Пледы и покрывала [blankets]" in out
    assert "* p3 | Плед Fogliare олива" in out


def test_batch_mode(tmp_path, capsys):
    batch = tmp_path / "queries.txt"
    batch.write_text("cinque\n\nдиффузор\n", encoding="utf-8")

    assert cli_search.main(["--batch", str(batch), "--catalog", SAMPLE_CATALOG]) == 0

    out = capsys.readouterr().out
    assert "Query: cinque" in out
    assert "Query: диффузор" in out
    assert "p5 | Диффузор Пион и пачули" in out


def test_missing_catalog(tmp_path, capsys):
    assert cli_search.main(["плед", "--catalog", str(tmp_path / "absent.json")]) == 1

    assert "error:" in capsys.readouterr().err
