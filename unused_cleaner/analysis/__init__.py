"""Project analysis: detector orchestration and the fallback heuristic."""

from .dependency_usage import HeuristicDependencyDetector, find_unused_dependencies
from .project_analyzer import ProjectAnalyzer, create_analyzer

__all__ = [
    "HeuristicDependencyDetector",
    "ProjectAnalyzer",
    "create_analyzer",
    "find_unused_dependencies",
]
