"""Detector modules that produce findings for a project."""

from .base_detector import BaseDetector, DetectorError, Findings, NpxDetector
from .depcheck_detector import DepcheckDetector
from .strategy import FallbackStrategy
from .unimported_detector import UnimportedDetector

__all__ = [
    'BaseDetector',
    'DepcheckDetector',
    'DetectorError',
    'FallbackStrategy',
    'Findings',
    'NpxDetector',
    'UnimportedDetector',
]
