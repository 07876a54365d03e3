"""Tests for the search command."""

import json

from typer.testing import CliRunner

from symsearch.cli.main import app

runner = CliRunner()


def _search(*args):
    return runner.invoke(app, ["search", *args])


def test_search_json(corpus_file):
    """Test JSON output lists ranked results best first."""
    result = _search("print", "--corpus", str(corpus_file), "--output", "json")

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert [r["full"] for r in data] == ["fmt.printf", "fmt.println"]
    assert data[0]["link"] == "/core/fmt/#printf"
    assert data[0]["kind"] == "procedure"
    assert data[0]["highlighted"] == "fmt.<b>print</b>f"


def test_search_table(corpus_file):
    result = _search("print", "--corpus", str(corpus_file))

    assert result.exit_code == 0
    assert "✅ Found 2 results, showing 2" in result.output
    assert "Search Results" in result.output


def test_search_limit(corpus_file):
    result = _search("print", "-c", str(corpus_file), "-o", "json", "--limit", "1")

    assert result.exit_code == 0
    assert len(json.loads(result.output)) == 1


def test_search_package_scope(corpus_file):
    result = _search("copy", "-c", str(corpus_file), "-o", "json", "--package", "runtime")

    data = json.loads(result.output)
    assert [r["full"] for r in data] == ["runtime.copy"]


def test_search_kind_filter(corpus_file):
    result = _search("o", "-c", str(corpus_file), "-o", "json", "--kind", "type")

    data = json.loads(result.output)
    assert data
    assert {r["kind"] for r in data} == {"type"}


def test_search_no_results(corpus_file):
    result = _search("zzzz", "--corpus", str(corpus_file))

    assert result.exit_code == 0
    assert "No results found" in result.output


def test_search_blank_query(corpus_file):
    result = _search("   ", "--corpus", str(corpus_file))

    assert result.exit_code == 0
    assert "No results found" in result.output


def test_search_missing_corpus(tmp_path):
    """Test a missing package data file exits with code 2."""
    result = _search("print", "--corpus", str(tmp_path / "missing.json"))

    assert result.exit_code == 2
    assert "Package data not found" in result.output


def test_search_corpus_from_env(corpus_file, monkeypatch):
    monkeypatch.setenv("SYMSEARCH_CORPUS", str(corpus_file))

    result = _search("Info", "-o", "json")

    assert result.exit_code == 0
    assert json.loads(result.output)[0]["full"] == "fmt.Info"


def test_search_unknown_package(corpus_file):
    result = _search("print", "--corpus", str(corpus_file), "--package", "nope")

    assert result.exit_code == 1
    assert "❌ Error:" in result.output


def test_search_unknown_kind(corpus_file):
    result = _search("print", "--corpus", str(corpus_file), "--kind", "widget")

    assert result.exit_code == 1
    assert "Unknown entity kind" in result.output


def test_search_invalid_package_data(tmp_path):
    path = tmp_path / "pkg-data.json"
    path.write_text(json.dumps({"packages": {"fmt": {"path": "/fmt", "entities": [{"name": "x"}]}}}))

    result = _search("x", "--corpus", str(path))

    assert result.exit_code == 1
    assert "Invalid package data" in result.output
