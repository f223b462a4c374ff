"""Tests for report rendering and exit codes."""

from testgate.decision import FAIL_REASON, Decision, decide
from testgate.detector.types import DetectionResult, Verdict
from testgate.report import EXIT_FAIL, EXIT_PASS, exit_code, render_report

FAILING = DetectionResult(
    workflow_file_count=1,
    evidence=("workflow: .github/workflows/ci.yml",),
)
PASSING = DetectionResult(
    workflow_file_count=2,
    has_pytest_signal=True,
    workflow_test_commands=("pytest -q", "make test\nmake coverage"),
    evidence=("pytest_signal: tox.ini",),
)


class TestRenderReport:
    def test_fail_headline_and_reason(self):
        text = render_report(FAILING, decide(FAILING))
        lines = text.splitlines()
        assert lines[0].startswith("FAIL")
        assert lines[1] == f"Reason: {FAIL_REASON}"

    def test_pass_has_no_reason_line(self):
        text = render_report(PASSING, decide(PASSING))
        assert text.splitlines()[0].startswith("PASS")
        assert "Reason:" not in text

    def test_detail_block_lists_every_detector(self):
        text = render_report(PASSING, decide(PASSING))
        assert "Workflow files           : 2" in text
        assert "Local test script        : no" in text
        assert "package.json test script : no" in text
        assert "Pytest signal            : yes" in text
        assert "Go tests                 : no" in text

    def test_evidence_and_ci_steps(self):
        text = render_report(PASSING, decide(PASSING))
        assert "Evidence:\n  - pytest_signal: tox.ini" in text
        assert "CI test steps:\n  - pytest -q\n  - make test ..." in text

    def test_empty_sections_are_omitted(self):
        result = DetectionResult()
        text = render_report(result, decide(result))
        assert "Evidence:" not in text
        assert "CI test steps:" not in text

    def test_is_deterministic(self):
        decision = decide(PASSING)
        assert render_report(PASSING, decision) == render_report(PASSING, decision)

    def test_plain_text_has_no_ansi(self):
        assert "\033[" not in render_report(FAILING, decide(FAILING))

    def test_color_wraps_headline(self):
        text = render_report(FAILING, decide(FAILING), color=True)
        headline = text.splitlines()[0]
        assert headline.startswith("\033[31mFAIL")
        assert headline.endswith("\033[0m")


class TestExitCode:
    def test_pass(self):
        assert exit_code(Decision(verdict=Verdict.PASS)) == EXIT_PASS == 0

    def test_fail(self):
        assert exit_code(Decision(verdict=Verdict.FAIL, reason="x")) == EXIT_FAIL == 1
