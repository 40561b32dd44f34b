"""Command-line interface for the unused code cleaner.

This module provides the main entry point for running analysis and cleanup
from the command line. It uses argparse to handle subcommands:

- analyze: full report plus optional cleanup
- scan: read-only console report
- (default): quick-scan, JSON-only, or interactive analysis of [path]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from . import __version__
from .analysis.project_analyzer import ProjectAnalyzer, create_analyzer
from .cleanup.cleanup_orchestrator import CleanupOrchestrator
from .models.analysis_report import AnalysisReport
from .models.cleanup_options import OUTPUT_FORMATS, CleanupOptions
from .models.package_manifest import ManifestNotFoundError
from .reporting.report_writer import generate_report
from .utils.config_loader import load_config

logger = logging.getLogger(__name__)

COMMANDS = ("analyze", "scan", "run")
TOP_LEVEL_FLAGS = ("-h", "--help", "--version")


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr; DEBUG when verbose, else WARNING."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def analyze_project(
    options: CleanupOptions,
    analyzer: Optional[ProjectAnalyzer] = None,
    orchestrator: Optional[CleanupOrchestrator] = None,
    verbose: bool = False,
) -> AnalysisReport:
    """Analyze a project, render the report, then run cleanup if requested.

    Args:
        options: Run options built at the entry point.
        analyzer: Optional pre-built analyzer (dependency injection).
        orchestrator: Optional pre-built cleanup orchestrator.
        verbose: Print extra progress information.

    Returns:
        The finished AnalysisReport.

    Raises:
        ManifestNotFoundError: If the project has no package.json.
    """
    logger.debug(
        f"Analyzing {options.project_path} (output={options.output_format}, "
        f"interactive={options.interactive})"
    )
    analyzer = analyzer or create_analyzer(options.config)
    report = analyzer.analyze(options.project_path, verbose=verbose)

    generate_report(
        report,
        options.output_format,
        project_root=options.project_path,
        report_path=options.report_path,
    )

    if options.wants_cleanup:
        orchestrator = orchestrator or CleanupOrchestrator(options.project_path, options)
        orchestrator.run(report)

    return report


def build_options(args: argparse.Namespace, **overrides) -> CleanupOptions:
    """Build CleanupOptions from parsed arguments and the project's config file."""
    project_path = Path(args.path).resolve()
    config = load_config(project_path) if project_path.is_dir() else None
    values = {
        "project_path": project_path,
        "output_format": getattr(args, "output", "both"),
        "report_path": Path(args.report).resolve() if getattr(args, "report", None) else None,
        "interactive": getattr(args, "interactive", True),
        "auto_delete": getattr(args, "auto_delete", False),
        "auto_push": getattr(args, "auto_push", False),
        "git_commit_message": getattr(args, "message", None),
    }
    values.update(overrides)
    if config is not None:
        values["config"] = config
    return CleanupOptions(**values)


def _run(options: CleanupOptions, verbose: bool, label: str) -> int:
    """Run analysis with top-level error handling.

    Returns:
        Exit code (0 for success, 1 for error).
    """
    try:
        report = analyze_project(options, verbose=verbose)
    except ManifestNotFoundError as e:
        print(f"Error: {label} failed: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        # Unexpected failures still end the process with a non-zero exit
        print(f"Error: {label} failed: {e}", file=sys.stderr)
        if verbose:
            import traceback

            traceback.print_exc(file=sys.stderr)
        return 1

    if label == "Analysis":
        print("\nAnalysis completed successfully!")
        if report.is_clean:
            print("Your project is already clean! No unused files or dependencies found.")
    return 0


def cmd_analyze(args: argparse.Namespace) -> int:
    """Handle the analyze subcommand.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Exit code (0 for success, 1 for error).
    """
    try:
        options = build_options(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print("Starting analysis...\n")
    return _run(options, args.verbose, "Analysis")


def cmd_scan(args: argparse.Namespace) -> int:
    """Handle the scan subcommand (read-only, console output, no cleanup)."""
    try:
        options = build_options(
            args, output_format="console", interactive=False, auto_delete=False, auto_push=False
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return _run(options, args.verbose, "Scan")


def cmd_default(args: argparse.Namespace) -> int:
    """Handle invocation without a subcommand.

    --quick prints a console report, --json writes the JSON report only;
    both are non-interactive. Otherwise runs an interactive analysis.
    """
    try:
        if args.quick:
            print("Running quick scan...\n")
            options = build_options(args, output_format="console", interactive=False)
        elif args.json:
            options = build_options(args, output_format="json", interactive=False)
        else:
            print("Welcome to Unused Code Cleaner!\n")
            print("Use --help to see available commands\n")
            options = build_options(args, output_format="both", interactive=True)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return _run(options, args.verbose, "Analysis")


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="unused-cleaner",
        description=(
            "Detect and clean unused files, imports and dependencies in "
            "JavaScript/TypeScript projects"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--verbose", action="store_true", help="Enable verbose output"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Analyze command
    analyze_parser = subparsers.add_parser(
        "analyze",
        parents=[common],
        help="Analyze project for unused files, imports, and dependencies",
    )
    analyze_parser.add_argument(
        "-p", "--path", default=str(Path.cwd()), help="Project path to analyze"
    )
    analyze_parser.add_argument(
        "-o",
        "--output",
        choices=OUTPUT_FORMATS,
        default="both",
        help="Output format (default: both)",
    )
    analyze_parser.add_argument("-r", "--report", help="Custom path for JSON report")
    analyze_parser.add_argument(
        "--no-interactive",
        dest="interactive",
        action="store_false",
        help="Run in non-interactive mode",
    )
    analyze_parser.add_argument(
        "--auto-delete",
        action="store_true",
        help=(
            "Automatically delete unused files and remove unused dependencies "
            "in non-interactive mode (use with caution)"
        ),
    )
    analyze_parser.add_argument(
        "--auto-push",
        action="store_true",
        help="Automatically commit and push changes to git in non-interactive mode",
    )
    analyze_parser.add_argument("-m", "--message", help="Custom git commit message")

    # Scan command
    scan_parser = subparsers.add_parser(
        "scan", parents=[common], help="Quick scan without cleanup options"
    )
    scan_parser.add_argument(
        "-p", "--path", default=str(Path.cwd()), help="Project path to analyze"
    )

    # Default command (selected when no subcommand is given)
    run_parser = subparsers.add_parser(
        "run", parents=[common], help="Analyze [path] (default when no command is given)"
    )
    run_parser.add_argument(
        "path", nargs="?", default=str(Path.cwd()), help="Project path to analyze"
    )
    mode = run_parser.add_mutually_exclusive_group()
    mode.add_argument("-q", "--quick", action="store_true", help="Quick scan mode")
    mode.add_argument("-j", "--json", action="store_true", help="Output JSON report only")

    return parser


def main(argv: Optional[list] = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv).

    Returns:
        Exit code (0 for success, 1 for error, 130 if interrupted).
    """
    argv = list(sys.argv[1:] if argv is None else argv)

    # --verbose is a subcommand option; move any leading copies after the command
    leading = []
    while argv and argv[0] == "--verbose":
        leading.append(argv.pop(0))

    # No subcommand: route to the default command
    if not argv or (argv[0] not in COMMANDS and argv[0] not in TOP_LEVEL_FLAGS):
        argv = ["run", *argv]
    argv = [argv[0], *leading, *argv[1:]]

    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        if args.command == "analyze":
            return cmd_analyze(args)
        elif args.command == "scan":
            return cmd_scan(args)
        elif args.command == "run":
            return cmd_default(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
