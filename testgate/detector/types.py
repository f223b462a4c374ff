"""Shared types for the detector module.

DetectionResult is built once per run and never mutated. Only the five
detector fields feed the decision rule; workflow_test_commands and
evidence are informational and exist for the report.
"""

from dataclasses import dataclass, field
from enum import StrEnum


class Verdict(StrEnum):
    PASS = "PASS"
    FAIL = "FAIL"


@dataclass(frozen=True)
class DetectionResult:
    """Complete detection output for a repository."""

    workflow_file_count: int = 0
    has_local_test_script: bool = False
    has_package_json_test_script: bool = False
    has_pytest_signal: bool = False
    has_go_tests: bool = False
    workflow_test_commands: tuple[str, ...] = field(default_factory=tuple)
    evidence: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.workflow_file_count < 0:
            raise ValueError("workflow_file_count must be non-negative")

    @property
    def has_local_signal(self) -> bool:
        """True when any of the four local test-path signals fired."""
        return (
            self.has_local_test_script
            or self.has_package_json_test_script
            or self.has_pytest_signal
            or self.has_go_tests
        )

    def to_dict(self) -> dict:
        return {
            "workflow_file_count": self.workflow_file_count,
            "has_local_test_script": self.has_local_test_script,
            "has_package_json_test_script": self.has_package_json_test_script,
            "has_pytest_signal": self.has_pytest_signal,
            "has_go_tests": self.has_go_tests,
            "workflow_test_commands": list(self.workflow_test_commands),
            "evidence": list(self.evidence),
        }
