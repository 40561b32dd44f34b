"""Unused file and import detection via the `unimported` tool."""

from pathlib import Path
from typing import List

from .base_detector import DetectorError, Findings, NpxDetector, names_from, unique


def to_project_relative(project_root: Path, entry: str) -> str:
    """Normalize a reported path to a POSIX path relative to the project root.

    Raises:
        DetectorError: If an absolute path lies outside the project root.
    """
    path = Path(entry)
    if path.is_absolute():
        try:
            path = path.relative_to(project_root)
        except ValueError as e:
            raise DetectorError(f"Reported path outside project: {entry}") from e
    # Path() already drops a leading './'
    return path.as_posix()


class UnimportedDetector(NpxDetector):
    """Runs `unimported --json` and maps its output to findings.

    Expected output: a JSON object with `unusedFiles` and `unusedImports`
    sequences.
    """

    tool = "unimported"

    def detect(self, project_root: Path) -> Findings:
        data = self.run_tool(project_root)

        unused_files: List[str] = [
            to_project_relative(project_root, entry)
            for entry in names_from(data.get("unusedFiles"))
        ]
        return Findings(
            unused_files=unique(unused_files),
            unused_imports=unique(names_from(data.get("unusedImports"))),
            unused_exports=unique(names_from(data.get("unusedExports"))),
            source=self.name,
        )
