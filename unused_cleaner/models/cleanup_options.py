"""Run options assembled once at the entry point and passed downstream."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .cleanup_config import CleanupConfig, DEFAULT_COMMIT_MESSAGE

OUTPUT_FORMATS = ("json", "console", "both")


@dataclass
class CleanupOptions:
    """Options for a single analysis/cleanup run.

    Attributes:
        project_path: Absolute project root.
        output_format: One of 'json', 'console', 'both'.
        report_path: Custom JSON report path (None uses the default).
        interactive: Prompt before each cleanup stage.
        auto_delete: Non-interactive approval for deleting files AND removing
            dependencies (one flag governs both).
        auto_push: Non-interactive approval for commit and push.
        git_commit_message: Explicit commit message, overrides config.
        config: Merged project configuration.
    """

    project_path: Path
    output_format: str = "both"
    report_path: Optional[Path] = None
    interactive: bool = True
    auto_delete: bool = False
    auto_push: bool = False
    git_commit_message: Optional[str] = None
    config: CleanupConfig = field(default_factory=CleanupConfig)

    def __post_init__(self) -> None:
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Invalid output format '{self.output_format}'. "
                f"Expected one of: {', '.join(OUTPUT_FORMATS)}"
            )

    @property
    def commit_message(self) -> str:
        """Resolve the commit message: explicit flag, then config, then default."""
        return (
            self.git_commit_message
            or self.config.git.commit_message
            or DEFAULT_COMMIT_MESSAGE
        )

    @property
    def wants_cleanup(self) -> bool:
        """Whether the cleanup workflow should run after reporting."""
        return self.interactive or self.auto_delete or self.auto_push
