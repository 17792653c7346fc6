"""
Unit Tests for INTEL/Reporting/report_exporter.py

Tests format dispatch and writing reports to disk.
"""

import pytest
import os
import sys
import json

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from INTEL.Reporting.report_exporter import SUPPORTED_FORMATS, render_report, export_report


class TestRenderReport:
    """Test suite for render_report()."""

    def test_supported_formats(self):
        assert SUPPORTED_FORMATS == ("markdown", "json")

    def test_markdown_dispatch(self, generator, mixed_signals):
        """Test Markdown output with the default date format."""
        text = render_report(generator.daily(mixed_signals), "markdown")

        assert text.startswith("# Daily Intelligence Report - 2026-10-19\n")
        assert "**Period:** 10/19/2026 - 10/19/2026" in text

    def test_markdown_uses_config(self, generator, utc_config, mixed_signals):
        """Test that the config's date format reaches the period line."""
        text = render_report(generator.daily(mixed_signals), "markdown", utc_config)

        assert "**Period:** 2026-10-19 - 2026-10-19" in text

    def test_json_dispatch(self, generator, utc_config, mixed_signals):
        """Test JSON output."""
        parsed = json.loads(render_report(generator.daily(mixed_signals), "json", utc_config))

        assert parsed["id"] == "daily-2026-10-19"

    def test_unknown_format_raises_error(self, generator):
        """Test that pdf is not a supported format."""
        with pytest.raises(ValueError, match="fmt must be one of"):
            render_report(generator.daily([]), "pdf")


class TestExportReport:
    """Test suite for export_report()."""

    def test_export_markdown_creates_file(self, generator, mixed_signals, temp_output_dir):
        """Test that the Markdown file lands in reports/<id>.md."""
        result = export_report(generator.daily(mixed_signals), temp_output_dir)

        md_file = os.path.join(temp_output_dir, "reports", "daily-2026-10-19.md")
        assert result is True
        assert os.path.isfile(md_file)
        with open(md_file, encoding="utf-8") as f:
            assert f.read().startswith("# Daily Intelligence Report")

    def test_export_json_creates_file(self, generator, weekly_signals, temp_output_dir):
        """Test that the JSON file lands in reports/<id>.json."""
        result = export_report(generator.weekly(weekly_signals), temp_output_dir, fmt="json")

        json_file = os.path.join(temp_output_dir, "reports", "weekly-2026-10-19.json")
        assert result is True
        with open(json_file, encoding="utf-8") as f:
            assert json.load(f)["format"] == "weekly"

    def test_output_dir_from_config(self, generator, utc_config, tmp_path, monkeypatch):
        """Test that export.output_dir is used when no directory is passed."""
        monkeypatch.chdir(tmp_path)

        assert export_report(generator.daily([]), config_loader=utc_config) is True
        assert (tmp_path / "out" / "reports" / "daily-2026-10-19.md").is_file()

    def test_returns_false_without_id(self, temp_output_dir):
        """Test that a report without id is not written."""
        assert export_report({"title": "no id"}, temp_output_dir) is False

    def test_returns_false_for_unknown_format(self, generator, temp_output_dir):
        """Test graceful failure for unsupported formats."""
        assert export_report(generator.daily([]), temp_output_dir, fmt="pdf") is False
        assert not os.path.exists(os.path.join(temp_output_dir, "reports"))

    def test_returns_false_for_non_dict(self, temp_output_dir):
        assert export_report(["not", "a", "report"], temp_output_dir) is False
