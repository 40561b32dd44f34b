"""Unused Cleaner Package.

This package provides the analysis and cleanup engine for JavaScript and
TypeScript projects, including:
- Detection of unused files and imports (via unimported)
- Detection of unused and missing dependencies (via depcheck, with a fallback)
- Console and JSON reporting
- Interactive or automated cleanup (files, dependencies, git)
"""

__version__ = "1.0.0"
