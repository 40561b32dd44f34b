"""Core project analyzer with dependency injection."""

import logging
from pathlib import Path
from typing import Optional

from ..detectors.base_detector import Findings
from ..detectors.depcheck_detector import DepcheckDetector
from ..detectors.strategy import FallbackStrategy
from ..detectors.unimported_detector import UnimportedDetector
from ..models.analysis_report import AnalysisReport
from ..models.cleanup_config import CleanupConfig
from ..models.package_manifest import MANIFEST_NAME, ManifestNotFoundError
from ..utils.file_walker import FileWalker
from .dependency_usage import HeuristicDependencyDetector

logger = logging.getLogger(__name__)


class ProjectAnalyzer:
    """Orchestrates file discovery and detector stages into one report.

    The unused-file/import stage and the dependency stage are isolated from
    each other: a failure in one never aborts the other. Analysis is
    read-only.

    Attributes:
        file_walker: Walker used to count scanned source files.
        file_strategy: Strategy producing unused files/imports/exports.
        dependency_strategy: Strategy producing unused/missing dependencies.
    """

    def __init__(
        self,
        file_walker: FileWalker,
        file_strategy: FallbackStrategy,
        dependency_strategy: FallbackStrategy,
    ) -> None:
        self.file_walker = file_walker
        self.file_strategy = file_strategy
        self.dependency_strategy = dependency_strategy

    def analyze(self, path: Path, verbose: bool = False) -> AnalysisReport:
        """Analyze a project for unused code and dependencies.

        Args:
            path: Project root (must contain package.json).
            verbose: If True, print stage progress to stdout.

        Returns:
            Populated AnalysisReport.

        Raises:
            ManifestNotFoundError: If the project has no package.json.
        """
        project_root = Path(path).resolve()
        if not (project_root / MANIFEST_NAME).is_file():
            raise ManifestNotFoundError(
                f"No {MANIFEST_NAME} found in the specified directory: {project_root}"
            )

        print(f"Analyzing project at: {project_root}")
        report = AnalysisReport.create()

        print("Scanning for unused imports and files...")
        file_findings = self._run_stage(self.file_strategy, project_root)
        file_findings.unused_files = [
            p for p in file_findings.unused_files if not self.file_walker.excludes(p)
        ]
        file_findings.apply_to(report)

        print("Analyzing package dependencies...")
        dependency_findings = self._run_stage(self.dependency_strategy, project_root)
        dependency_findings.apply_to(report)
        if verbose and dependency_findings.source:
            print(f"Dependency findings from: {dependency_findings.source}")

        report.total_files_scanned = len(self.file_walker.walk(project_root))
        return report

    @staticmethod
    def _run_stage(strategy: FallbackStrategy, project_root: Path) -> Findings:
        """Run one stage, containing any unexpected detector failure."""
        try:
            return strategy.run(project_root)
        except (OSError, ValueError, RuntimeError) as e:
            error_msg = str(e).split("\n")[0] or type(e).__name__
            logger.warning(f"Analysis stage failed, continuing: {error_msg}")
            return Findings()


def create_analyzer(config: Optional[CleanupConfig] = None) -> ProjectAnalyzer:
    """Create a ProjectAnalyzer wired with the default detectors.

    Args:
        config: Project configuration (defaults to CleanupConfig()).

    Returns:
        ProjectAnalyzer: Configured analyzer instance.
    """
    config = config or CleanupConfig()
    timeout = config.analysis.timeout_seconds

    file_walker = FileWalker(config.extensions, config.walker_ignore_patterns())
    heuristic_walker = FileWalker(config.extensions, config.heuristic_ignore_patterns())

    unimported = None if config.analysis.skip_unimported else UnimportedDetector(timeout=timeout)
    depcheck = (
        None
        if config.analysis.skip_depcheck
        else DepcheckDetector(timeout=timeout, options=config.dependencies)
    )
    heuristic = HeuristicDependencyDetector(heuristic_walker, config.dependencies)

    return ProjectAnalyzer(
        file_walker=file_walker,
        file_strategy=FallbackStrategy(unimported),
        dependency_strategy=FallbackStrategy(depcheck, heuristic),
    )
