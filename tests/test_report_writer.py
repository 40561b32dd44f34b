"""Tests for console and JSON report rendering."""

import json
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from unused_cleaner.models.analysis_report import AnalysisReport
from unused_cleaner.reporting.report_writer import (
    format_console,
    generate_report,
    load_report,
    save_report,
)


def _sample_report() -> AnalysisReport:
    return AnalysisReport(
        unused_files=["src/unused.js", "src/old/legacy.ts"],
        unused_dependencies=["unused-package"],
        missing_dependencies=[],
        unused_exports=[],
        unused_imports=["left-pad"],
        total_files_scanned=2,
        timestamp="2024-05-01T12:00:00.000Z",
    )


class TestFormatConsole:
    """Test suite for format_console()."""

    def test_sections_and_counts(self):
        """Test that every category gets a header with counts or 'None found'."""
        output = format_console(_sample_report())

        assert "CLEANUP ANALYSIS REPORT" in output
        assert "Total files scanned: 2" in output
        assert "Unused Files:\n  Found 2 items:" in output
        assert "    - src/unused.js" in output
        assert "    - src/old/legacy.ts" in output
        assert "Unused Dependencies:\n  Found 1 items:" in output
        assert "Missing Dependencies:\n  None found" in output
        assert "Unused Exports:\n  None found" in output
        assert "Unused Imports:\n  Found 1 items:" in output

    def test_empty_report(self):
        """Test that an empty report prints 'None found' for all five sections."""
        output = format_console(AnalysisReport())
        assert output.count("None found") == 5

    def test_unparsable_timestamp_shown_verbatim(self):
        """Test that a malformed timestamp is displayed as-is."""
        report = AnalysisReport(timestamp="not-a-date")
        assert "Analysis completed at: not-a-date" in format_console(report)


class TestSaveReport:
    """Test suite for JSON persistence."""

    def test_round_trip(self, tmp_path):
        """Test that a saved report re-parses to an identical report."""
        report = _sample_report()
        path = save_report(report, tmp_path / "report.json")

        assert load_report(path) == report

    def test_two_space_indentation_and_field_names(self, tmp_path):
        """Test the on-disk document format."""
        path = save_report(_sample_report(), tmp_path / "report.json")
        text = path.read_text()
        data = json.loads(text)

        assert text.startswith('{\n  "unusedFiles": [')
        assert data["totalFilesScanned"] == 2
        assert data["timestamp"] == "2024-05-01T12:00:00.000Z"

    def test_deterministic_output(self, tmp_path):
        """Test that saving the same report twice yields identical bytes."""
        report = _sample_report()
        first = save_report(report, tmp_path / "a.json").read_bytes()
        second = save_report(report, tmp_path / "b.json").read_bytes()
        assert first == second


class TestGenerateReport:
    """Test suite for generate_report()."""

    def test_console_only_writes_nothing(self, tmp_path, capsys):
        """Test that console mode does not touch the filesystem."""
        saved = generate_report(_sample_report(), "console", project_root=tmp_path)

        assert saved is None
        assert list(tmp_path.iterdir()) == []
        assert "CLEANUP ANALYSIS REPORT" in capsys.readouterr().out

    def test_json_default_location(self, tmp_path, capsys):
        """Test that JSON mode writes cleanup-report.json in the project root."""
        saved = generate_report(_sample_report(), "json", project_root=tmp_path)

        assert saved == tmp_path / "cleanup-report.json"
        out = capsys.readouterr().out
        assert "CLEANUP ANALYSIS REPORT" not in out
        assert "JSON report saved to:" in out

    def test_both_with_custom_path(self, tmp_path, capsys):
        """Test that both mode prints and writes to the custom path."""
        custom = tmp_path / "custom.json"
        saved = generate_report(
            _sample_report(), "both", project_root=tmp_path, report_path=custom
        )

        assert saved == custom
        assert custom.exists()
        assert not (tmp_path / "cleanup-report.json").exists()
        assert "CLEANUP ANALYSIS REPORT" in capsys.readouterr().out
