"""Data models for cleanup analysis.

This module defines the core data structures used throughout unused-cleaner:
- AnalysisReport: Aggregated findings of one analysis run
- CleanupConfig: Project configuration (defaults merged with user file)
- CleanupOptions: Options for a single run, built once at the entry point
- PackageManifest / DeclaredDependency: The project's package.json
"""

from .analysis_report import AnalysisReport
from .cleanup_config import (
    AnalysisOptions,
    CleanupConfig,
    DependencyOptions,
    FileOptions,
    GitOptions,
)
from .cleanup_options import CleanupOptions
from .package_manifest import (
    DeclaredDependency,
    ManifestNotFoundError,
    ManifestParseError,
    PackageManifest,
)

__all__ = [
    "AnalysisReport",
    "AnalysisOptions",
    "CleanupConfig",
    "CleanupOptions",
    "DeclaredDependency",
    "DependencyOptions",
    "FileOptions",
    "GitOptions",
    "ManifestNotFoundError",
    "ManifestParseError",
    "PackageManifest",
]
