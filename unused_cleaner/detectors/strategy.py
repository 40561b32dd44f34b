"""Primary/fallback detector selection."""

import logging
from pathlib import Path
from typing import Optional

from .base_detector import BaseDetector, DetectorError, Findings

logger = logging.getLogger(__name__)


class FallbackStrategy:
    """Two-stage detector selection: try the primary, then the fallback.

    Either stage may be None (a skipped primary goes straight to the
    fallback; no fallback means empty findings on failure). Failures never
    propagate past run().

    Attributes:
        primary: Preferred detector, usually an external tool.
        fallback: Substitute used when the primary is absent or fails.
    """

    def __init__(
        self,
        primary: Optional[BaseDetector],
        fallback: Optional[BaseDetector] = None,
    ) -> None:
        self.primary = primary
        self.fallback = fallback

    def run(self, project_root: Path) -> Findings:
        """Produce findings for the project, degrading on failure.

        Args:
            project_root: Absolute project root.

        Returns:
            Findings from the first stage that succeeds, or empty Findings.
        """
        if self.primary is not None:
            try:
                return self.primary.detect(project_root)
            except DetectorError as e:
                message = str(e).split("\n")[0]
                if self.fallback is not None:
                    logger.warning(
                        f"{self.primary.name} analysis failed ({message}), "
                        f"trying {self.fallback.name}..."
                    )
                else:
                    logger.warning(
                        f"{self.primary.name} analysis failed ({message}), "
                        f"continuing with other checks..."
                    )

        if self.fallback is None:
            return Findings()

        try:
            return self.fallback.detect(project_root)
        except DetectorError as e:
            logger.warning(f"{self.fallback.name} analysis failed: {e}")
            return Findings()
