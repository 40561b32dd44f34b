"""Console and JSON rendering of analysis reports."""

import json
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from ..models.analysis_report import AnalysisReport

DEFAULT_REPORT_NAME = "cleanup-report.json"

SECTIONS = (
    ("Unused Files", "unused_files"),
    ("Unused Dependencies", "unused_dependencies"),
    ("Missing Dependencies", "missing_dependencies"),
    ("Unused Exports", "unused_exports"),
    ("Unused Imports", "unused_imports"),
)


def _format_timestamp(timestamp: str) -> str:
    """Render an ISO-8601 timestamp in local time, or verbatim if unparsable."""
    try:
        parsed = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    except ValueError:
        return timestamp
    return parsed.astimezone().strftime("%Y-%m-%d %H:%M:%S")


def format_section(title: str, items: List[str]) -> List[str]:
    lines = ["", f"{title}:"]
    if not items:
        lines.append("  None found")
    else:
        lines.append(f"  Found {len(items)} items:")
        lines.extend(f"    - {item}" for item in items)
    return lines


def format_console(report: AnalysisReport) -> str:
    """Format a report as a human-readable summary.

    Args:
        report: AnalysisReport to format.

    Returns:
        Formatted multi-line string.
    """
    lines = []
    lines.append("=" * 50)
    lines.append("           CLEANUP ANALYSIS REPORT")
    lines.append("=" * 50)
    lines.append(f"Total files scanned: {report.total_files_scanned}")
    lines.append(f"Analysis completed at: {_format_timestamp(report.timestamp)}")

    for title, attr in SECTIONS:
        lines.extend(format_section(title, getattr(report, attr)))

    lines.append("")
    return "\n".join(lines)


def default_report_path(project_root: Path) -> Path:
    return Path(project_root) / DEFAULT_REPORT_NAME


def save_report(report: AnalysisReport, output_file: Path) -> Path:
    """Save a report as indented JSON.

    Args:
        report: AnalysisReport to save.
        output_file: Destination path (parent directory must exist).

    Returns:
        The path written.
    """
    output_file = Path(output_file)
    with output_file.open("w", encoding="utf-8") as f:
        json.dump(report.to_dict(), f, indent=2)
        f.write("\n")
    return output_file


def load_report(input_file: Path) -> AnalysisReport:
    """Load a report previously written by save_report.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not a valid report.
    """
    with Path(input_file).open(encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Invalid report file: {input_file}")
    return AnalysisReport.from_dict(data)


def generate_report(
    report: AnalysisReport,
    output_format: str,
    project_root: Path,
    report_path: Optional[Path] = None,
) -> Optional[Path]:
    """Print and/or persist a report according to the output format.

    Args:
        report: AnalysisReport to render.
        output_format: 'console', 'json' or 'both'.
        project_root: Used to resolve the default report location.
        report_path: Custom JSON report path.

    Returns:
        Path of the saved JSON report, or None when nothing was saved.
    """
    if output_format in ("console", "both"):
        print(format_console(report))

    if output_format in ("json", "both"):
        saved = save_report(report, report_path or default_report_path(project_root))
        print(f"JSON report saved to: {saved}")
        return saved
    return None
