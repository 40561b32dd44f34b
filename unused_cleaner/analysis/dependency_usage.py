"""Fallback dependency-usage heuristic.

A declared dependency counts as used when any source file contains the
dependency name as a quoted literal: 'name' or "name". This is a
last-resort substitute for real static analysis and is conservative in the
false-positive direction. It cannot see:

- dynamic, computed import specifiers
- subpath imports such as 'lodash/fp' (only the bare name matches)
- re-exports through intermediate modules
- references from non-source files (build configs, scripts in package.json)

The match target is the quoted string, so a name that is a prefix of another
('react' vs 'react-dom') never causes a false match.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, List, Optional, Set, Tuple

from ..detectors.base_detector import BaseDetector, Findings
from ..models.cleanup_config import DependencyOptions
from ..models.package_manifest import ManifestParseError, PackageManifest
from ..utils.file_walker import FileWalker

logger = logging.getLogger(__name__)


def _read_text(filepath: Path) -> Optional[str]:
    try:
        return filepath.read_text(encoding="utf-8", errors="ignore")
    except OSError as e:
        logger.warning(f"Could not read {filepath}: {e.strerror or e}")
        return None


def quoted_forms(name: str) -> Tuple[str, str]:
    """Return the single- and double-quoted literal forms of a name."""
    return f"'{name}'", f'"{name}"'


def find_used_dependencies(names: Iterable[str], contents: Iterable[str]) -> Set[str]:
    """Return the names that appear as a quoted literal in any content."""
    remaining = list(dict.fromkeys(names))
    used: Set[str] = set()
    for content in contents:
        if not remaining:
            break
        for name in remaining:
            single, double = quoted_forms(name)
            if single in content or double in content:
                used.add(name)
        remaining = [name for name in remaining if name not in used]
    return used


def find_unused_dependencies(names: Iterable[str], files: Iterable[Path]) -> List[str]:
    """Find declared dependencies never referenced as a quoted literal.

    File contents are read on a thread pool; the result does not depend on
    read order.

    Args:
        names: Declared dependency names.
        files: Source files to search.

    Returns:
        Names (in input order, without duplicates) with no quoted occurrence.
    """
    ordered = list(dict.fromkeys(names))
    if not ordered:
        return []

    with ThreadPoolExecutor() as executor:
        contents = [c for c in executor.map(_read_text, list(files)) if c is not None]

    used = find_used_dependencies(ordered, contents)
    return [name for name in ordered if name not in used]


class HeuristicDependencyDetector(BaseDetector):
    """Detector wrapping the quoted-literal heuristic.

    Reads package.json itself; an unreadable or invalid manifest degrades to
    an empty result with a warning rather than failing analysis.

    Attributes:
        file_walker: Walker used to enumerate files to search.
        options: Dependency filtering options.
    """

    name = "fallback heuristic"

    def __init__(
        self,
        file_walker: FileWalker,
        options: Optional[DependencyOptions] = None,
    ) -> None:
        self.file_walker = file_walker
        self.options = options or DependencyOptions()

    def detect(self, project_root: Path) -> Findings:
        try:
            manifest = PackageManifest.load(project_root)
            declared = manifest.declared_dependencies(self.options)
        except (FileNotFoundError, ManifestParseError) as e:
            logger.warning(f"Dependency analysis completely failed: {e}")
            return Findings(source=self.name)

        files = self.file_walker.walk(project_root)
        unused = find_unused_dependencies((dep.name for dep in declared), files)
        return Findings(unused_dependencies=unused, source=self.name)
