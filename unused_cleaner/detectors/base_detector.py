"""Base classes for unused-code detectors."""

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from ..models.analysis_report import AnalysisReport
from ..utils.process_runner import run_bounded

logger = logging.getLogger(__name__)


class DetectorError(RuntimeError):
    """Raised when a detector cannot produce findings.

    Covers non-zero exit, malformed output, timeout and a missing executable.
    """


@dataclass
class Findings:
    """Report fields produced by one detector run.

    Attributes:
        unused_files: Project-relative paths of unused files.
        unused_imports: Unused import identifiers.
        unused_exports: Unused export identifiers.
        unused_dependencies: Declared but unused dependency names.
        missing_dependencies: Used but undeclared dependency names.
        source: Name of the detector that produced these findings.
    """

    unused_files: List[str] = field(default_factory=list)
    unused_imports: List[str] = field(default_factory=list)
    unused_exports: List[str] = field(default_factory=list)
    unused_dependencies: List[str] = field(default_factory=list)
    missing_dependencies: List[str] = field(default_factory=list)
    source: Optional[str] = None

    def apply_to(self, report: AnalysisReport) -> None:
        """Copy non-empty fields onto the report."""
        for attr in (
            "unused_files",
            "unused_imports",
            "unused_exports",
            "unused_dependencies",
            "missing_dependencies",
        ):
            values = getattr(self, attr)
            if values:
                setattr(report, attr, list(values))


class BaseDetector(ABC):
    """
    Abstract base class defining the interface for detectors.

    All detector implementations must inherit from this class and implement
    the detect method to produce findings for a project.
    """

    name = "detector"

    @abstractmethod
    def detect(self, project_root: Path) -> Findings:
        """
        Analyze a project and return findings.

        Parameters
        ----------
        project_root : Path
            Absolute path to the project root (contains package.json)

        Returns
        -------
        Findings
            Report fields produced by this detector

        Raises
        ------
        DetectorError
            If the detector fails for any reason
        """
        pass


class NpxDetector(BaseDetector):
    """Detector backed by an npm tool invoked through npx with JSON output.

    Attributes:
        timeout: Subprocess timeout in seconds.
        npx: npx executable name or path.
    """

    tool = ""
    MAX_SUBPROCESS_OUTPUT_LEN = 200

    def __init__(self, timeout: float = 60.0, npx: str = "npx") -> None:
        self.timeout = timeout
        self.npx = npx

    @property
    def name(self) -> str:
        return self.tool

    def extra_args(self) -> List[str]:
        """Additional arguments appended after --json."""
        return []

    def command(self) -> List[str]:
        return [self.npx, "--yes", self.tool, "--json", *self.extra_args()]

    def _truncate_output(self, text: str) -> str:
        """Truncate subprocess output for error messages.

        Args:
            text: The text to truncate.

        Returns:
            Truncated text with ellipsis if longer than MAX_SUBPROCESS_OUTPUT_LEN,
            or original text if shorter.
        """
        if len(text) > self.MAX_SUBPROCESS_OUTPUT_LEN:
            return text[: self.MAX_SUBPROCESS_OUTPUT_LEN] + "..."
        return text

    def run_tool(self, project_root: Path) -> Dict[str, Any]:
        """Run the tool and decode its JSON object output.

        Raises:
            DetectorError: On missing executable, timeout, non-zero exit or
                output that is not a JSON object.
        """
        cmd = self.command()
        try:
            result = run_bounded(cmd, cwd=project_root, timeout=self.timeout)
        except FileNotFoundError as e:
            raise DetectorError(
                f"{self.npx} not found; install Node.js to run {self.tool}"
            ) from e
        except TimeoutError as e:
            raise DetectorError(f"{self.tool} timed out: {e}") from e

        if result.returncode != 0:
            raise DetectorError(
                f"{self.tool} exited with code {result.returncode}. "
                f"Stderr: {self._truncate_output(result.stderr.strip())}"
            )

        try:
            data = json.loads(result.stdout)
        except json.JSONDecodeError as e:
            raise DetectorError(
                f"{self.tool} returned invalid JSON: {e}. "
                f"Stdout: {self._truncate_output(result.stdout.strip())}"
            ) from e

        if not isinstance(data, dict):
            raise DetectorError(
                f"{self.tool} returned {type(data).__name__}, expected a JSON object"
            )
        logger.debug(f"{self.tool} reported fields: {sorted(data)}")
        return data


def names_from(value: Any) -> List[str]:
    """Extract names from a JSON field that may be a mapping or a sequence.

    Mappings contribute their keys; sequences contribute string entries or
    the 'path'/'name' of object entries.
    """
    if value is None:
        return []
    if isinstance(value, dict):
        return [str(key) for key in value]
    if isinstance(value, (list, tuple)):
        names: List[str] = []
        for entry in value:
            if isinstance(entry, str):
                names.append(entry)
            elif isinstance(entry, dict):
                name = entry.get("path") or entry.get("name")
                if name:
                    names.append(str(name))
        return names
    raise DetectorError(f"Unexpected field type {type(value).__name__}")


def unique(values: Sequence[str]) -> List[str]:
    """Drop duplicates while preserving order."""
    return list(dict.fromkeys(values))
