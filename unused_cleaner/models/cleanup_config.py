"""Configuration data model mirroring the .unusedrc.json file format."""

from dataclasses import dataclass, field
from typing import Any, Dict, List


DEFAULT_COMMIT_MESSAGE = "Auto-cleanup: removed unused files and dependencies"

TEST_PATTERNS = ["**/*.test.*", "**/*.spec.*", "**/__tests__/**"]
STORY_PATTERNS = ["**/*.stories.*"]

DEFAULT_IGNORE = [
    "node_modules/**",
    "dist/**",
    "build/**",
    *TEST_PATTERNS,
    "**/coverage/**",
    "**/.git/**",
]

DEFAULT_EXTENSIONS = [".js", ".jsx", ".ts", ".tsx", ".vue", ".svelte"]


def _get_bool(data: Dict[str, Any], key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"Config option '{key}' must be true or false")
    return value


def _get_int(data: Dict[str, Any], key: str, default: int) -> int:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Config option '{key}' must be an integer")
    return value


def _get_str(data: Dict[str, Any], key: str, default: str) -> str:
    value = data.get(key, default)
    if not isinstance(value, str):
        raise ValueError(f"Config option '{key}' must be a string")
    return value


def _get_str_list(data: Dict[str, Any], key: str, default: List[str]) -> List[str]:
    value = data.get(key, default)
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"Config option '{key}' must be a list of strings")
    return list(value)


@dataclass
class DependencyOptions:
    """Options controlling which declared dependencies are considered.

    Attributes:
        skip_dev_dependencies: Ignore devDependencies entirely.
        ignore_peer_dependencies: Ignore peerDependencies entirely.
        custom_ignore: Glob patterns of dependency names never reported.
    """

    skip_dev_dependencies: bool = False
    ignore_peer_dependencies: bool = True
    custom_ignore: List[str] = field(default_factory=lambda: ["@types/*"])

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DependencyOptions":
        defaults = cls()
        return cls(
            skip_dev_dependencies=_get_bool(
                data, "skipDevDependencies", defaults.skip_dev_dependencies
            ),
            ignore_peer_dependencies=_get_bool(
                data, "ignorePeerDependencies", defaults.ignore_peer_dependencies
            ),
            custom_ignore=_get_str_list(data, "customIgnore", defaults.custom_ignore),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "skipDevDependencies": self.skip_dev_dependencies,
            "ignorePeerDependencies": self.ignore_peer_dependencies,
            "customIgnore": list(self.custom_ignore),
        }


@dataclass
class FileOptions:
    """Options controlling which source files are scanned."""

    include_tests: bool = False
    include_stories: bool = False
    custom_ignore: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FileOptions":
        return cls(
            include_tests=_get_bool(data, "includeTests", False),
            include_stories=_get_bool(data, "includeStories", False),
            custom_ignore=_get_str_list(data, "customIgnore", []),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "includeTests": self.include_tests,
            "includeStories": self.include_stories,
            "customIgnore": list(self.custom_ignore),
        }


@dataclass
class GitOptions:
    """Options for the version-control cleanup stage."""

    default_branch: str = "main"
    commit_message: str = DEFAULT_COMMIT_MESSAGE

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GitOptions":
        return cls(
            default_branch=_get_str(data, "defaultBranch", "main"),
            commit_message=_get_str(data, "commitMessage", DEFAULT_COMMIT_MESSAGE),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "defaultBranch": self.default_branch,
            "commitMessage": self.commit_message,
        }


@dataclass
class AnalysisOptions:
    """Options for the external detector stages.

    Attributes:
        timeout: Per-detector subprocess timeout in milliseconds.
        skip_unimported: Do not run the unused-file/import detector.
        skip_depcheck: Do not run the dependency detector (heuristic only).
    """

    timeout: int = 60000
    skip_unimported: bool = False
    skip_depcheck: bool = False

    @property
    def timeout_seconds(self) -> float:
        """Timeout converted to seconds (for subprocess calls)."""
        return self.timeout / 1000.0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnalysisOptions":
        timeout = _get_int(data, "timeout", 60000)
        if timeout <= 0:
            raise ValueError(f"analysis.timeout must be positive, got {timeout}")
        return cls(
            timeout=timeout,
            skip_unimported=_get_bool(data, "skipUnimported", False),
            skip_depcheck=_get_bool(data, "skipDepcheck", False),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timeout": self.timeout,
            "skipUnimported": self.skip_unimported,
            "skipDepcheck": self.skip_depcheck,
        }


@dataclass
class CleanupConfig:
    """Complete project configuration (built-in defaults merged with user file).

    Attributes:
        ignore: Glob patterns (relative to the project root) excluded from scanning.
        extensions: File extensions treated as source files.
        dependencies: Dependency filtering options.
        files: File scanning options.
        git: Version-control options.
        analysis: External detector options.
    """

    ignore: List[str] = field(default_factory=lambda: list(DEFAULT_IGNORE))
    extensions: List[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    dependencies: DependencyOptions = field(default_factory=DependencyOptions)
    files: FileOptions = field(default_factory=FileOptions)
    git: GitOptions = field(default_factory=GitOptions)
    analysis: AnalysisOptions = field(default_factory=AnalysisOptions)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CleanupConfig":
        """Build a config from a fully merged camelCase dictionary."""
        return cls(
            ignore=_get_str_list(data, "ignore", DEFAULT_IGNORE),
            extensions=_get_str_list(data, "extensions", DEFAULT_EXTENSIONS),
            dependencies=DependencyOptions.from_dict(data.get("dependencies", {})),
            files=FileOptions.from_dict(data.get("files", {})),
            git=GitOptions.from_dict(data.get("git", {})),
            analysis=AnalysisOptions.from_dict(data.get("analysis", {})),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the camelCase file format."""
        return {
            "ignore": list(self.ignore),
            "extensions": list(self.extensions),
            "dependencies": self.dependencies.to_dict(),
            "files": self.files.to_dict(),
            "git": self.git.to_dict(),
            "analysis": self.analysis.to_dict(),
        }

    def walker_ignore_patterns(self) -> List[str]:
        """Compute the effective ignore globs for the file walker.

        Test globs are dropped when files.include_tests is set; story globs
        are added unless files.include_stories is set.
        """
        patterns = list(self.ignore) + list(self.files.custom_ignore)
        if self.files.include_tests:
            patterns = [p for p in patterns if p not in TEST_PATTERNS]
        if not self.files.include_stories:
            patterns.extend(p for p in STORY_PATTERNS if p not in patterns)
        return patterns

    def heuristic_ignore_patterns(self) -> List[str]:
        """Ignore globs for the dependency-usage heuristic.

        Same as the walker's, except test files are always searched: a
        dependency used only from tests is still used.
        """
        return [p for p in self.walker_ignore_patterns() if p not in TEST_PATTERNS]
