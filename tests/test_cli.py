"""Tests for the batch CLI."""

import csv
import json
from datetime import date
from pathlib import Path

import pytest

from property_gen.cli import build_parser, main, run
from property_gen.config import CITIES, OutputConfig, PropertyGenConfig
from property_gen.sinks.csv_export import csv_header


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("OUTPUT_DIR", "PRETTY_JSON", "SEED", "MAX_LIMIT", "DEFAULT_LIMIT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def _only(directory: Path, pattern: str) -> Path:
    matches = list(directory.glob(pattern))
    assert len(matches) == 1
    return matches[0]


class TestParser:
    """Tests for build_parser."""

    def test_defaults(self) -> None:
        """Test parser defaults."""
        args = build_parser().parse_args([])

        assert args.city is None
        assert args.limit is None
        assert args.output_dir is None
        assert args.seed is None
        assert args.compact is False

    def test_equals_form(self) -> None:
        """Test --flag=value arguments."""
        args = build_parser().parse_args(["--city=Winter Park", "--limit=50"])

        assert args.city == "Winter Park"
        assert args.limit == "50"


class TestRun:
    """Tests for run."""

    def test_writes_dated_files(self, tmp_path: Path) -> None:
        """Test run writes dated JSON and CSV files."""
        config = PropertyGenConfig(output=OutputConfig(output_dir=tmp_path), seed=1)

        records = run(config, ("Orlando", "Tampa"), 2, today=date(2024, 11, 2))

        assert len(records) == 4
        assert (tmp_path / "properties-2024-11-02.json").exists()
        assert (tmp_path / "properties-2024-11-02.csv").exists()

    def test_summary_output(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        """Test the console price summary."""
        config = PropertyGenConfig(output=OutputConfig(output_dir=tmp_path), seed=1)

        records = run(config, ("Orlando",), 3, today=date(2024, 11, 2))

        out = capsys.readouterr().out
        prices = [r.price for r in records]
        assert "Cities: Orlando" in out
        assert "Total properties: 3" in out
        assert "Cities covered: 1" in out
        assert f"Price range: ${min(prices):,} - ${max(prices):,}" in out

    def test_file_sink_summaries(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        """Test each file sink reports what it wrote."""
        config = PropertyGenConfig(output=OutputConfig(output_dir=tmp_path), seed=1)

        run(config, ("Orlando", "Tampa"), 2, today=date(2024, 11, 2))

        out = capsys.readouterr().out
        assert f"JSON files written to: {tmp_path}" in out
        assert "properties-2024-11-02.json: 4 records" in out
        assert f"CSV files written to: {tmp_path}" in out
        assert "properties-2024-11-02.csv: 4 records" in out


class TestMain:
    """Tests for main."""

    def test_single_city(self, tmp_path: Path) -> None:
        """Test a single-city export end to end."""
        exit_code = main(["--city=Orlando", "--limit=3", "--output-dir", str(tmp_path), "--seed", "7"])

        assert exit_code == 0
        data = json.loads(_only(tmp_path, "properties-*.json").read_text(encoding="utf-8"))
        assert len(data) == 3
        assert {p["city"] for p in data} == {"Orlando"}

        with _only(tmp_path, "properties-*.csv").open(encoding="utf-8", newline="") as f:
            rows = list(csv.reader(f))
        assert rows[0] == csv_header(include_agent=True)
        assert len(rows) == 4

    def test_quoted_city(self, tmp_path: Path) -> None:
        """Test surrounding quotes are stripped from the city."""
        main(['--city="Daytona Beach"', "--limit=1", "--output-dir", str(tmp_path)])

        data = json.loads(_only(tmp_path, "properties-*.json").read_text(encoding="utf-8"))
        assert data[0]["city"] == "Daytona Beach"

    def test_all_cities_by_default(self, tmp_path: Path) -> None:
        """Test the whole roster is exported without --city."""
        exit_code = main(["--limit=1", "--output-dir", str(tmp_path)])

        assert exit_code == 0
        data = json.loads(_only(tmp_path, "properties-*.json").read_text(encoding="utf-8"))
        assert [p["city"] for p in data] == list(CITIES)

    def test_limit_clamped(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test --limit is capped by MAX_LIMIT."""
        monkeypatch.setenv("MAX_LIMIT", "4")
        monkeypatch.setenv("DEFAULT_LIMIT", "2")

        main(["--city=Tampa", "--limit=999", "--output-dir", str(tmp_path)])

        data = json.loads(_only(tmp_path, "properties-*.json").read_text(encoding="utf-8"))
        assert len(data) == 4

    def test_compact(self, tmp_path: Path) -> None:
        """Test --compact writes single-line JSON."""
        main(["--city=Tampa", "--limit=2", "--output-dir", str(tmp_path), "--compact"])

        text = _only(tmp_path, "properties-*.json").read_text(encoding="utf-8")
        assert "\n" not in text

    def test_same_seed_same_output(self, tmp_path: Path) -> None:
        """Test --seed makes exports reproducible."""
        first_dir = tmp_path / "a"
        second_dir = tmp_path / "b"

        main(["--city=Sanford", "--limit=3", "--output-dir", str(first_dir), "--seed", "9"])
        main(["--city=Sanford", "--limit=3", "--output-dir", str(second_dir), "--seed", "9"])

        first = json.loads(_only(first_dir, "*.json").read_text(encoding="utf-8"))
        second = json.loads(_only(second_dir, "*.json").read_text(encoding="utf-8"))
        assert [p["propertyId"] for p in first] == [p["propertyId"] for p in second]

    def test_sink_failure(self, tmp_path: Path) -> None:
        """Test an unwritable output directory exits with 1."""
        blocker = tmp_path / "file"
        blocker.write_text("x")

        assert main(["--city=Tampa", "--limit=1", "--output-dir", str(blocker)]) == 1

    def test_bad_environment(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
        """Test invalid environment config exits with 1."""
        monkeypatch.setenv("MAX_LIMIT", "many")

        assert main([]) == 1
        assert "MAX_LIMIT" in capsys.readouterr().err
