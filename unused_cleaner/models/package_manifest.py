"""Package manifest (package.json) model and declared dependency extraction."""

import fnmatch
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Set

from .cleanup_config import DependencyOptions

MANIFEST_NAME = "package.json"

RUNTIME = "runtime"
DEVELOPMENT = "development"
PEER = "peer"

# Manifest section -> dependency kind, in reporting order
SECTIONS = (
    ("dependencies", RUNTIME),
    ("devDependencies", DEVELOPMENT),
    ("peerDependencies", PEER),
)


class ManifestNotFoundError(FileNotFoundError):
    """Raised when the project root has no package.json."""


class ManifestParseError(ValueError):
    """Raised when package.json exists but is not a valid JSON object."""


@dataclass(frozen=True)
class DeclaredDependency:
    """A package name listed in the manifest.

    Attributes:
        name: Package name as written in the manifest.
        kind: 'runtime', 'development', or 'peer'.
    """

    name: str
    kind: str


def is_ignored_name(name: str, patterns: List[str]) -> bool:
    """Check a dependency name against custom-ignore glob patterns."""
    return any(fnmatch.fnmatchcase(name, pattern) for pattern in patterns)


@dataclass
class PackageManifest:
    """Parsed package.json for a project.

    Attributes:
        path: Absolute path to package.json.
        data: Raw decoded JSON object.
    """

    path: Path
    data: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def load(cls, project_root: Path) -> "PackageManifest":
        """Load package.json from the project root.

        Args:
            project_root: Directory expected to contain package.json.

        Returns:
            PackageManifest with decoded data.

        Raises:
            ManifestNotFoundError: If package.json does not exist.
            ManifestParseError: If package.json is not a JSON object.
        """
        manifest_path = Path(project_root) / MANIFEST_NAME
        if not manifest_path.is_file():
            raise ManifestNotFoundError(
                f"No {MANIFEST_NAME} found in the specified directory: {project_root}"
            )

        try:
            with manifest_path.open(encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ManifestParseError(f"Invalid {MANIFEST_NAME}: {e}") from e

        if not isinstance(data, dict):
            raise ManifestParseError(
                f"Invalid {MANIFEST_NAME}: expected a JSON object, "
                f"got {type(data).__name__}"
            )
        return cls(path=manifest_path, data=data)

    @property
    def name(self) -> Optional[str]:
        return self.data.get("name")

    def _section(self, key: str) -> Dict[str, Any]:
        section = self.data.get(key) or {}
        if not isinstance(section, dict):
            raise ManifestParseError(
                f"Invalid {MANIFEST_NAME}: '{key}' must be an object"
            )
        return section

    def declared_dependencies(
        self, options: Optional[DependencyOptions] = None
    ) -> List[DeclaredDependency]:
        """Return declared dependencies filtered by the dependency options.

        Runtime dependencies come first, then development, then peer; each
        group keeps manifest order. A name declared in several sections is
        reported once, under its first section.

        Args:
            options: Filtering options (defaults to DependencyOptions()).

        Returns:
            List of DeclaredDependency objects.
        """
        options = options or DependencyOptions()
        seen: Set[str] = set()
        declared: List[DeclaredDependency] = []

        for key, kind in SECTIONS:
            if kind == DEVELOPMENT and options.skip_dev_dependencies:
                continue
            if kind == PEER and options.ignore_peer_dependencies:
                continue
            for name in self._section(key):
                if name in seen or is_ignored_name(name, options.custom_ignore):
                    continue
                seen.add(name)
                declared.append(DeclaredDependency(name=name, kind=kind))

        return declared
