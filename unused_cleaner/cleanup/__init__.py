"""Cleanup workflow for analyzed projects."""

from .cleanup_orchestrator import CleanupOrchestrator, CleanupSummary

__all__ = ["CleanupOrchestrator", "CleanupSummary"]
