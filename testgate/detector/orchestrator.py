"""Detector orchestrator: runs every detector against one repository.

Detection flow:
1. Count CI workflow files under .github/workflows.
2. Check the four local test-path signals (runner scripts, package.json
   test script, pytest configuration, Go test files).
3. Collect test-looking CI steps and per-signal evidence for the report.
4. Produce a single frozen DetectionResult.

The detectors share no state, so their order does not affect the result.
"""

import logging
from pathlib import Path

from testgate.detector.go import find_go_test_files
from testgate.detector.package_json import MANIFEST_NAME, has_package_json_test_script
from testgate.detector.python import find_pytest_signal
from testgate.detector.scripts import find_local_test_scripts
from testgate.detector.types import DetectionResult
from testgate.detector.workflows import extract_workflow_test_commands, list_workflow_files

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def detect(repo_dir: Path) -> DetectionResult:
    """Run the full detection pipeline on a resolved repository directory."""
    repo_dir = Path(repo_dir)
    evidence: list[str] = []

    workflow_files = list_workflow_files(repo_dir)
    evidence.extend(f"workflow: {_rel(repo_dir, p)}" for p in workflow_files)

    runner_scripts = find_local_test_scripts(repo_dir)
    evidence.extend(f"local_test_script: {_rel(repo_dir, p)}" for p in runner_scripts)

    has_pkg_test = has_package_json_test_script(repo_dir)
    if has_pkg_test:
        evidence.append(f"package_json_test_script: {MANIFEST_NAME} scripts.test")

    pytest_source = find_pytest_signal(repo_dir)
    if pytest_source is not None:
        evidence.append(f"pytest_signal: {pytest_source}")

    go_tests = find_go_test_files(repo_dir)
    if go_tests:
        evidence.append(f"go_tests: {_rel(repo_dir, go_tests[0])} ({len(go_tests)} file(s))")

    result = DetectionResult(
        workflow_file_count=len(workflow_files),
        has_local_test_script=bool(runner_scripts),
        has_package_json_test_script=has_pkg_test,
        has_pytest_signal=pytest_source is not None,
        has_go_tests=bool(go_tests),
        workflow_test_commands=extract_workflow_test_commands(repo_dir),
        evidence=tuple(evidence),
    )
    _log_result(repo_dir, result)
    return result


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _rel(repo_dir: Path, path: Path) -> str:
    try:
        return path.relative_to(repo_dir).as_posix()
    except ValueError:
        return path.as_posix()


def _log_result(repo_dir: Path, result: DetectionResult) -> None:
    logger.info(
        "Detection complete: repo=%s workflows=%d local_script=%s package_json=%s pytest=%s go=%s",
        repo_dir,
        result.workflow_file_count,
        result.has_local_test_script,
        result.has_package_json_test_script,
        result.has_pytest_signal,
        result.has_go_tests,
    )
