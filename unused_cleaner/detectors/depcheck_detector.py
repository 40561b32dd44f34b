"""Unused and missing dependency detection via the `depcheck` tool."""

from pathlib import Path
from typing import List, Optional

from ..models.cleanup_config import DependencyOptions
from ..models.package_manifest import is_ignored_name
from .base_detector import Findings, NpxDetector, names_from, unique


class DepcheckDetector(NpxDetector):
    """Runs `depcheck --json` and maps its output to findings.

    depcheck reports `dependencies`, `devDependencies` and `missing`; the
    first two may be sequences or mappings, `missing` maps each name to the
    files that use it.
    """

    tool = "depcheck"

    def __init__(
        self,
        timeout: float = 60.0,
        npx: str = "npx",
        options: Optional[DependencyOptions] = None,
    ) -> None:
        super().__init__(timeout=timeout, npx=npx)
        self.options = options or DependencyOptions()

    def extra_args(self) -> List[str]:
        if self.options.custom_ignore:
            return [f"--ignores={','.join(self.options.custom_ignore)}"]
        return []

    def _keep(self, name: str) -> bool:
        return not is_ignored_name(name, self.options.custom_ignore)

    def detect(self, project_root: Path) -> Findings:
        data = self.run_tool(project_root)

        unused = names_from(data.get("dependencies"))
        if not self.options.skip_dev_dependencies:
            unused += names_from(data.get("devDependencies"))
        missing = names_from(data.get("missing"))

        return Findings(
            unused_dependencies=unique([n for n in unused if self._keep(n)]),
            missing_dependencies=unique([n for n in missing if self._keep(n)]),
            source=self.name,
        )
