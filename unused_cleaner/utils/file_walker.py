"""Source file discovery for a project tree."""

import fnmatch
import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional

logger = logging.getLogger(__name__)

HIDDEN_MARKER = "."
DEPENDENCY_DIR = "node_modules"


def matches_any(path: str, patterns: Iterable[str]) -> bool:
    """Check a POSIX relative path against glob-style ignore patterns.

    A leading '**/' also matches at the project root, so '**/coverage/**'
    excludes both 'coverage/' and 'pkg/coverage/'.
    """
    for pattern in patterns:
        if fnmatch.fnmatch(path, pattern):
            return True
        if pattern.startswith("**/") and fnmatch.fnmatch(path, pattern[3:]):
            return True
    return False


def relative(project_root: Path, path: Path) -> str:
    """Express a path relative to the project root with POSIX separators."""
    return Path(path).relative_to(project_root).as_posix()


class FileWalker:
    """Enumerates source files under a project root.

    Traversal is iterative (os.walk) and does not follow directory symlinks.
    Hidden directories and node_modules are always pruned.

    Attributes:
        extensions: Allowed file suffixes (e.g. '.ts').
        ignore_patterns: Glob patterns relative to the project root.
    """

    def __init__(
        self,
        extensions: Iterable[str],
        ignore_patterns: Optional[Iterable[str]] = None,
    ) -> None:
        self.extensions = {ext if ext.startswith(".") else f".{ext}" for ext in extensions}
        self.ignore_patterns = list(ignore_patterns or [])

    def walk(self, project_root: Path) -> List[Path]:
        """Discover all source files in the project tree.

        Args:
            project_root: Absolute project root directory.

        Returns:
            Sorted list of absolute file paths.
        """
        root = Path(project_root)
        files: List[Path] = []

        def _on_error(error: OSError) -> None:
            logger.warning(f"Skipping unreadable directory {error.filename}: {error.strerror}")

        for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
            current = Path(dirpath)
            dirnames[:] = [
                d for d in dirnames if not self._is_excluded_dir(root, current / d)
            ]

            for filename in filenames:
                filepath = current / filename
                if self._is_source_file(root, filepath):
                    files.append(filepath)

        return sorted(files)

    def excludes(self, rel_path: str) -> bool:
        """Check whether a project-relative path lies in excluded territory.

        True when any ancestor directory would be pruned during a walk or the
        path itself matches an ignore pattern. The extension is not checked.
        """
        parts = Path(rel_path).parts
        for i, name in enumerate(parts[:-1]):
            if name.startswith(HIDDEN_MARKER) or name == DEPENDENCY_DIR:
                return True
            if matches_any("/".join(parts[: i + 1]) + "/", self.ignore_patterns):
                return True
        return matches_any(Path(rel_path).as_posix(), self.ignore_patterns)

    def _is_excluded_dir(self, root: Path, dirpath: Path) -> bool:
        name = dirpath.name
        if name.startswith(HIDDEN_MARKER) or name == DEPENDENCY_DIR:
            return True
        return matches_any(relative(root, dirpath) + "/", self.ignore_patterns)

    def _is_source_file(self, root: Path, filepath: Path) -> bool:
        if filepath.suffix not in self.extensions:
            return False
        return not matches_any(relative(root, filepath), self.ignore_patterns)
