"""Human-readable report rendering and exit codes.

Purely presentational: everything shown here is already computed by the
detectors and the decision rule.
"""

from testgate.decision import Decision
from testgate.detector.types import DetectionResult, Verdict

EXIT_PASS = 0
EXIT_FAIL = 1

_ANSI_GREEN = "\033[32m"
_ANSI_RED = "\033[31m"
_ANSI_RESET = "\033[0m"

# (label, attribute) in display order.
_DETAIL_FIELDS: list[tuple[str, str]] = [
    ("Workflow files", "workflow_file_count"),
    ("Local test script", "has_local_test_script"),
    ("package.json test script", "has_package_json_test_script"),
    ("Pytest signal", "has_pytest_signal"),
    ("Go tests", "has_go_tests"),
]


def render_report(result: DetectionResult, decision: Decision, *, color: bool = False) -> str:
    """Render the report as a deterministic multi-line string.

    Layout: headline, reason (FAIL only), detector details, then evidence
    and CI test steps when there are any.
    """
    lines = [_headline(decision, color=color)]
    if decision.verdict is Verdict.FAIL and decision.reason:
        lines.append(f"Reason: {decision.reason}")

    lines.append("")
    lines.append("Details:")
    width = max(len(label) for label, _ in _DETAIL_FIELDS)
    for label, attr in _DETAIL_FIELDS:
        lines.append(f"  {label.ljust(width)} : {_format_value(getattr(result, attr))}")

    if result.evidence:
        lines.append("")
        lines.append("Evidence:")
        lines.extend(f"  - {item}" for item in result.evidence)

    if result.workflow_test_commands:
        lines.append("")
        lines.append("CI test steps:")
        lines.extend(f"  - {_first_line(cmd)}" for cmd in result.workflow_test_commands)

    return "\n".join(lines) + "\n"


def exit_code(decision: Decision) -> int:
    return EXIT_FAIL if decision.verdict is Verdict.FAIL else EXIT_PASS


def _headline(decision: Decision, *, color: bool) -> str:
    if decision.verdict is Verdict.PASS:
        text = "PASS: local test path is consistent with CI configuration"
        ansi = _ANSI_GREEN
    else:
        text = "FAIL: CI is configured but no local test path was found"
        ansi = _ANSI_RED
    if not color:
        return text
    return f"{ansi}{text}{_ANSI_RESET}"


def _format_value(value: bool | int) -> str:
    if isinstance(value, bool):
        return "yes" if value else "no"
    return str(value)


def _first_line(command: str) -> str:
    """Multi-line run: blocks are shown by their first line."""
    lines = command.splitlines()
    head = lines[0] if lines else command
    return head + (" ..." if len(lines) > 1 else "")
