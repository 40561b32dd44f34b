"""Git helper utilities for the version-control cleanup stage.

This module wraps the git client for the few operations cleanup needs:
detecting a working copy, staging everything, committing, and pushing.
"""

import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .process_runner import run_bounded

QUERY_COMMANDS = ("status", "rev-parse", "branch", "remote")
REMOTE_COMMANDS = ("push", "fetch", "pull")


class GitError(RuntimeError):
    """Raised when a git operation fails or times out."""


@dataclass
class GitTimeoutConfig:
    """Time limits for the git calls made during cleanup.

    Working-copy queries (is this a repo, which branch, is there an upstream)
    get a fraction of the base limit; staging and committing get the base
    limit; push talks to a remote and gets a multiple of it.

    Attributes:
        base_timeout_ms: Limit for add and commit.
        fast_scale: Multiplier applied for working-copy queries.
        slow_scale: Multiplier applied for remote operations.
        max_timeout_ms: Upper bound after scaling.
    """

    base_timeout_ms: int = 30000
    fast_scale: float = 0.167
    slow_scale: float = 4.0
    max_timeout_ms: int = 300000

    def scale_for(self, category: str) -> float:
        return {"fast": self.fast_scale, "slow": self.slow_scale}.get(category, 1.0)


class GitHelper:
    """Runs git commands against a project working copy.

    Attributes:
        base_path: Project root (the git work tree).
        timeout_config: Timeout scaling configuration.
    """

    def __init__(
        self,
        base_path: Path,
        timeout_config: Optional[GitTimeoutConfig] = None,
    ) -> None:
        self.base_path = Path(base_path)
        self.timeout_config = timeout_config or GitTimeoutConfig()

    @staticmethod
    def _categorize_operation(args: List[str]) -> str:
        """Return 'fast' for working-copy queries, 'slow' for remote calls, else 'default'."""
        command = args[0].lower() if args else ""
        if command in QUERY_COMMANDS:
            return "fast"
        if command in REMOTE_COMMANDS:
            return "slow"
        return "default"

        cmd = args[0].lower()

        # Local queries that don't modify state
        if cmd in ("status", "rev-parse", "branch", "remote"):
            return "fast"

        # Network operations
        if cmd in ("push", "fetch", "pull"):
            return "slow"

        return "default"

    @staticmethod
    def _calculate_timeout(args: List[str], config: GitTimeoutConfig) -> float:
        """Seconds allowed for a git call, capped at config.max_timeout_ms."""
        category = GitHelper._categorize_operation(args)
        timeout_ms = config.base_timeout_ms * config.scale_for(category)
        return min(timeout_ms, config.max_timeout_ms) / 1000.0

    @staticmethod
    def check_git_available() -> bool:
        """Whether a git executable is on PATH."""
        return shutil.which("git") is not None

    def run_git_command(
        self, args: List[str], check: bool = True
    ) -> subprocess.CompletedProcess:
        """Run a git command in the project root with a bounded timeout.

        Args:
            args: Git command arguments (without 'git' prefix).
                  Example: ['status'], ['commit', '-m', 'message']
            check: If True, raise GitError on non-zero exit.

        Returns:
            subprocess.CompletedProcess with result.

        Raises:
            GitError: If git is missing, times out, or (with check=True)
                exits non-zero.
        """
        timeout_seconds = self._calculate_timeout(args, self.timeout_config)
        operation = " ".join(args[:2]) if args else "unknown"

        try:
            result = run_bounded(
                ["git", *args], cwd=self.base_path, timeout=timeout_seconds
            )
        except FileNotFoundError as e:
            raise GitError("git executable not found in PATH") from e
        except TimeoutError as e:
            category = self._categorize_operation(args)
            raise GitError(
                f"Git operation 'git {operation}' timed out after "
                f"{timeout_seconds:.1f} seconds. This is a '{category}' operation; "
                f"check network access and credentials."
            ) from e

        if check and result.returncode != 0:
            detail = (result.stderr or result.stdout or "").strip()
            raise GitError(
                f"'git {operation}' failed (exit {result.returncode}): {detail}"
            )
        return result

    def is_git_repo(self) -> bool:
        """Check whether the project root is inside a git working copy.

        Returns:
            True if git reports a work tree, False otherwise (including when
            git is not installed).
        """
        if not self.check_git_available():
            return False
        try:
            result = self.run_git_command(
                ["rev-parse", "--is-inside-work-tree"], check=False
            )
        except GitError:
            return False
        return result.returncode == 0 and result.stdout.strip() == "true"

    def add_all(self) -> None:
        """Stage all changes, including deletions."""
        self.run_git_command(["add", "--all", "."])

    def commit(self, message: str) -> None:
        """Commit staged changes with the given message."""
        self.run_git_command(["commit", "-m", message])

    def current_branch(self) -> Optional[str]:
        """Return the checked-out branch name, or None on a detached HEAD."""
        result = self.run_git_command(["rev-parse", "--abbrev-ref", "HEAD"], check=False)
        name = result.stdout.strip()
        if result.returncode != 0 or not name or name == "HEAD":
            return None
        return name

    def has_upstream(self) -> bool:
        """Check whether the current branch tracks a remote branch."""
        result = self.run_git_command(
            ["rev-parse", "--abbrev-ref", "--symbolic-full-name", "@{u}"], check=False
        )
        return result.returncode == 0

    def push(
        self,
        remote: Optional[str] = None,
        branch: Optional[str] = None,
        set_upstream: bool = False,
    ) -> None:
        """Push to the upstream, or to an explicit remote and branch.

        Args:
            remote: Remote name; None pushes to the tracked upstream.
            branch: Destination branch on the remote (pushes HEAD to it).
            set_upstream: Record the remote branch as upstream (-u).
        """
        args = ["push"]
        if set_upstream:
            args.append("--set-upstream")
        if remote:
            args.append(remote)
            if branch:
                args.append(f"HEAD:{branch}")
        self.run_git_command(args)
