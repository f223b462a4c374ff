"""Detector module for finding local test-path signals in a repository.

Public API:
    detect(repo_dir) -> DetectionResult
"""

from testgate.detector.orchestrator import detect
from testgate.detector.types import DetectionResult, Verdict

__all__ = ["detect", "DetectionResult", "Verdict"]
