"""Report rendering (console summary and JSON document)."""

from .report_writer import format_console, generate_report, load_report, save_report

__all__ = ["format_console", "generate_report", "load_report", "save_report"]
