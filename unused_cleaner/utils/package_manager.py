"""Package manager wrapper used to uninstall unused dependencies."""

from dataclasses import dataclass
from pathlib import Path
from typing import List

from .process_runner import run_bounded

# Lockfile -> (executable, uninstall verb), checked in order
LOCKFILES = (
    ("pnpm-lock.yaml", "pnpm", "remove"),
    ("yarn.lock", "yarn", "remove"),
)
DEFAULT_MANAGER = ("npm", "uninstall")

# Uninstall rewrites node_modules; allow generous time
UNINSTALL_TIMEOUT_SECONDS = 300.0


class PackageManagerError(RuntimeError):
    """Raised when the package manager fails to uninstall dependencies."""


@dataclass
class PackageManager:
    """Package manager for a single project.

    Attributes:
        project_root: Directory containing package.json.
        executable: 'npm', 'yarn' or 'pnpm'.
        uninstall_verb: Subcommand used to remove packages.
        timeout: Maximum seconds for one uninstall call.
    """

    project_root: Path
    executable: str = DEFAULT_MANAGER[0]
    uninstall_verb: str = DEFAULT_MANAGER[1]
    timeout: float = UNINSTALL_TIMEOUT_SECONDS

    @classmethod
    def detect(cls, project_root: Path) -> "PackageManager":
        """Pick the package manager from the project's lockfile (npm by default)."""
        for lockfile, executable, verb in LOCKFILES:
            if (Path(project_root) / lockfile).is_file():
                return cls(project_root=Path(project_root), executable=executable, uninstall_verb=verb)
        return cls(project_root=Path(project_root))

    def uninstall_command(self, names: List[str]) -> List[str]:
        return [self.executable, self.uninstall_verb, *names]

    def uninstall(self, names: List[str]) -> None:
        """Uninstall all given packages in a single call.

        Args:
            names: Dependency names to remove.

        Raises:
            PackageManagerError: If the command is missing, times out, or fails.
        """
        if not names:
            return
        cmd = self.uninstall_command(names)
        try:
            result = run_bounded(cmd, cwd=self.project_root, timeout=self.timeout)
        except FileNotFoundError as e:
            raise PackageManagerError(f"{self.executable} not found in PATH") from e
        except TimeoutError as e:
            raise PackageManagerError(str(e)) from e

        if result.returncode != 0:
            detail = (result.stderr or result.stdout or "").strip()
            raise PackageManagerError(
                f"'{' '.join(cmd[:2])}' failed (exit {result.returncode}): {detail}"
            )
