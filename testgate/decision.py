"""Decision rule: turns a DetectionResult into a PASS/FAIL verdict.

Policy: a repository that advertises CI must also offer a way to run its
tests locally. A repository with no workflow files is never penalised.
"""

from dataclasses import dataclass

from testgate.detector.types import DetectionResult, Verdict

FAIL_REASON = (
    "CI workflow files were found under .github/workflows, but no local test "
    "entry point was detected (test script, package.json scripts.test, "
    "pytest configuration, or Go test files)."
)


@dataclass(frozen=True)
class Decision:
    verdict: Verdict
    reason: str | None = None

    @property
    def passed(self) -> bool:
        return self.verdict is Verdict.PASS


def decide(result: DetectionResult) -> Decision:
    """FAIL iff workflows exist and none of the local signals fired."""
    if result.workflow_file_count > 0 and not result.has_local_signal:
        return Decision(verdict=Verdict.FAIL, reason=FAIL_REASON)
    return Decision(verdict=Verdict.PASS)
