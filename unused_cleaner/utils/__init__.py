"""Utility modules for the unused code cleaner."""

from .config_loader import load_config
from .file_walker import FileWalker
from .git_helper import GitError, GitHelper, GitTimeoutConfig
from .package_manager import PackageManager, PackageManagerError
from .process_runner import run_bounded

__all__ = [
    "FileWalker",
    "GitError",
    "GitHelper",
    "GitTimeoutConfig",
    "PackageManager",
    "PackageManagerError",
    "load_config",
    "run_bounded",
]
