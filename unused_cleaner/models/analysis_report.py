"""AnalysisReport data model for aggregated cleanup findings."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Union


# Stable on-disk field names (camelCase) mapped to dataclass attributes
FIELD_NAMES = {
    "unusedFiles": "unused_files",
    "unusedDependencies": "unused_dependencies",
    "missingDependencies": "missing_dependencies",
    "unusedExports": "unused_exports",
    "unusedImports": "unused_imports",
    "totalFilesScanned": "total_files_scanned",
    "timestamp": "timestamp",
}


def _utc_timestamp() -> str:
    """Return the current time as an ISO-8601 string with millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


@dataclass
class AnalysisReport:
    """Aggregated results from analyzing a project for unused code.

    The report is created empty at the start of analysis, filled in by each
    detector stage, and treated as read-only once handed to the caller.

    Attributes:
        unused_files: Files never reached from the project's entry points.
        unused_dependencies: Declared dependencies with no detected usage.
        missing_dependencies: Packages imported but not declared.
        unused_exports: Export identifiers nobody imports.
        unused_imports: Import identifiers never referenced.
        total_files_scanned: Number of source files found by the walker.
        timestamp: ISO-8601 creation time (UTC).

    All path-like fields are relative to the project root with POSIX separators.
    """

    unused_files: List[str] = field(default_factory=list)
    unused_dependencies: List[str] = field(default_factory=list)
    missing_dependencies: List[str] = field(default_factory=list)
    unused_exports: List[str] = field(default_factory=list)
    unused_imports: List[str] = field(default_factory=list)
    total_files_scanned: int = 0
    timestamp: str = field(default_factory=_utc_timestamp)

    @classmethod
    def create(cls) -> "AnalysisReport":
        """Create an empty report stamped with the current time."""
        return cls()

    @property
    def is_clean(self) -> bool:
        """True when there is nothing to delete or uninstall."""
        return not self.unused_files and not self.unused_dependencies

    def to_dict(self) -> Dict[str, Union[List[str], int, str]]:
        """Serialize AnalysisReport to a JSON-compatible dictionary.

        Returns:
            Dictionary keyed by the stable camelCase field names.
        """
        data: Dict[str, Union[List[str], int, str]] = {}
        for key, attr in FIELD_NAMES.items():
            value = getattr(self, attr)
            data[key] = list(value) if isinstance(value, list) else value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnalysisReport":
        """Create an AnalysisReport from a JSON-deserialized dict.

        Args:
            data: Dictionary produced by to_dict() (or a saved report).

        Returns:
            AnalysisReport with every field restored.

        Raises:
            ValueError: If a required field is missing.
        """
        missing = [key for key in FIELD_NAMES if key not in data]
        if missing:
            raise ValueError(f"Report is missing fields: {', '.join(missing)}")
        return cls(
            unused_files=list(data["unusedFiles"]),
            unused_dependencies=list(data["unusedDependencies"]),
            missing_dependencies=list(data["missingDependencies"]),
            unused_exports=list(data["unusedExports"]),
            unused_imports=list(data["unusedImports"]),
            total_files_scanned=int(data["totalFilesScanned"]),
            timestamp=str(data["timestamp"]),
        )

    def __repr__(self) -> str:
        """Human-readable representation for debugging."""
        return (
            f"AnalysisReport(files={len(self.unused_files)}, "
            f"dependencies={len(self.unused_dependencies)}, "
            f"missing={len(self.missing_dependencies)}, "
            f"scanned={self.total_files_scanned})"
        )
