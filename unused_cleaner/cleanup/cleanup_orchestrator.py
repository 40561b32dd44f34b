"""Cleanup workflow: files, then dependencies, then version control.

Each stage is gated by a decision (interactive prompt, or an automation flag
in non-interactive mode) and its failures stay inside the stage.
"""

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional

from ..models.analysis_report import AnalysisReport
from ..models.cleanup_options import CleanupOptions
from ..utils.git_helper import GitError, GitHelper
from ..utils.package_manager import PackageManager, PackageManagerError
from ..utils.prompts import confirm

logger = logging.getLogger(__name__)

FILES = "files"
DEPENDENCIES = "dependencies"
VERSION_CONTROL = "version-control"

DEFAULT_REMOTE = "origin"


@dataclass
class CleanupSummary:
    """Outcome of a cleanup run.

    Attributes:
        deleted_files: Relative paths deleted (or already absent).
        failed_files: Relative path -> error message for failed deletions.
        dependencies_removed: Names uninstalled by the package manager.
        dependency_error: Error message if the uninstall failed.
        committed: Whether a commit was created.
        pushed: Whether the push succeeded.
        git_error: Error message from the first failing git step.
    """

    deleted_files: List[str] = field(default_factory=list)
    failed_files: Dict[str, str] = field(default_factory=dict)
    dependencies_removed: List[str] = field(default_factory=list)
    dependency_error: Optional[str] = None
    committed: bool = False
    pushed: bool = False
    git_error: Optional[str] = None


class CleanupOrchestrator:
    """Sequences destructive cleanup stages for an analyzed project.

    Attributes:
        project_root: Absolute project root; all report paths resolve under it.
        options: Run options (interactive mode and automation flags).
        git: Git client for the version-control stage.
        package_manager: Package manager used to uninstall dependencies.
        confirm_func: Yes/no prompt, injected for tests.
    """

    def __init__(
        self,
        project_root: Path,
        options: CleanupOptions,
        git: Optional[GitHelper] = None,
        package_manager: Optional[PackageManager] = None,
        confirm_func: Callable[[str], bool] = confirm,
    ) -> None:
        self.project_root = Path(project_root).resolve()
        self.options = options
        self.git = git or GitHelper(self.project_root)
        self.package_manager = package_manager or PackageManager.detect(self.project_root)
        self.confirm_func = confirm_func

    def decide(self, stage: str, message: str) -> bool:
        """Resolve the decision for one stage.

        Interactive mode always prompts (default no). Non-interactive mode
        never prompts: auto_delete governs both files and dependencies,
        auto_push governs version control.
        """
        if self.options.interactive:
            return self.confirm_func(message)
        if stage == VERSION_CONTROL:
            approved = self.options.auto_push
        else:
            approved = self.options.auto_delete
        logger.debug(f"Non-interactive decision for {stage}: {approved}")
        return approved

    def run(self, report: AnalysisReport) -> CleanupSummary:
        """Run all stages in order. Never raises for stage failures.

        Args:
            report: Finished analysis report (read only).

        Returns:
            CleanupSummary describing what was done.
        """
        summary = CleanupSummary()

        if report.unused_files and self.decide(
            FILES, f"Delete {len(report.unused_files)} unused files?"
        ):
            self.delete_files(report.unused_files, summary)

        if report.unused_dependencies and self.decide(
            DEPENDENCIES,
            f"Remove {len(report.unused_dependencies)} unused dependencies?",
        ):
            self.remove_dependencies(report.unused_dependencies, summary)

        if self.git.is_git_repo() and self.decide(
            VERSION_CONTROL, "Commit and push changes to Git?"
        ):
            self.commit_and_push(self.options.commit_message, summary)

        return summary

    def _resolve_inside_root(self, rel_path: str) -> Path:
        # Resolve the parent only, so a symlink is removed rather than its target
        candidate = self.project_root / rel_path
        if candidate.name in ("", ".", ".."):
            raise ValueError("path is outside the project root")
        parent = candidate.parent.resolve()
        if parent != self.project_root and self.project_root not in parent.parents:
            raise ValueError("path is outside the project root")
        return parent / candidate.name

    def delete_files(self, files: List[str], summary: CleanupSummary) -> None:
        """Delete each file; a failure is recorded and the batch continues."""
        print(f"\nDeleting {len(files)} files...")

        for rel_path in files:
            try:
                target = self._resolve_inside_root(rel_path)
                if target.is_dir() and not target.is_symlink():
                    shutil.rmtree(target)
                else:
                    target.unlink(missing_ok=True)
            except (OSError, ValueError) as e:
                summary.failed_files[rel_path] = str(e)
                print(f"  Failed to delete {rel_path}: {e}")
                continue
            summary.deleted_files.append(rel_path)
            print(f"  Deleted: {rel_path}")

    def remove_dependencies(self, names: List[str], summary: CleanupSummary) -> None:
        """Uninstall all names in one package-manager call."""
        print(f"\nRemoving {len(names)} unused dependencies...")
        try:
            self.package_manager.uninstall(names)
        except PackageManagerError as e:
            summary.dependency_error = str(e)
            print(f"Failed to remove dependencies: {e}")
            return
        summary.dependencies_removed = list(names)
        print("Dependencies removed successfully")

    def commit_and_push(self, message: str, summary: CleanupSummary) -> None:
        """Stage, commit and push; the first failing step ends the stage."""
        try:
            print("\nCommitting changes...")
            self.git.add_all()
            self.git.commit(message)
            summary.committed = True

            print("Pushing to remote...")
            if self.git.has_upstream():
                self.git.push()
            else:
                branch = self.git.current_branch() or self.options.config.git.default_branch
                self.git.push(remote=DEFAULT_REMOTE, branch=branch, set_upstream=True)
            summary.pushed = True
            print("Changes pushed successfully")
        except GitError as e:
            summary.git_error = str(e)
            print(f"Git operations failed: {e}")
