"""GitHub Actions workflow detection.

Counts workflow definitions under .github/workflows (recursively) and,
for the report only, extracts `run:` steps that look like test invocations.
The step extraction never influences the verdict and does not validate
workflow semantics.
"""

import logging
from pathlib import Path

import yaml

from testgate.detector.fs import list_files_recursive, read_text_or_none

logger = logging.getLogger(__name__)

WORKFLOWS_SUBPATH = Path(".github") / "workflows"
WORKFLOW_EXTENSIONS = frozenset({".yml", ".yaml"})

# Checked against `run:` step values (case-insensitive).
TEST_PATTERNS = [
    "test",
    "spec",
    "jest",
    "vitest",
    "mocha",
    "pytest",
    "tox",
    "go test",
    "cargo test",
]


def list_workflow_files(repo_dir: Path) -> list[Path]:
    """Return workflow files with an allowed YAML extension, sorted."""
    workflows_dir = Path(repo_dir) / WORKFLOWS_SUBPATH
    return [
        path
        for path in list_files_recursive(workflows_dir)
        if path.suffix.lower() in WORKFLOW_EXTENSIONS
    ]


def count_workflow_files(repo_dir: Path) -> int:
    """Count CI workflow files. A missing directory counts as zero."""
    return len(list_workflow_files(repo_dir))


def extract_workflow_test_commands(repo_dir: Path) -> tuple[str, ...]:
    """Collect test-looking `run:` commands from every workflow file.

    Malformed YAML and unexpected document shapes are skipped.
    """
    commands: list[str] = []
    for wf_path in list_workflow_files(repo_dir):
        for command in _test_commands_in(wf_path):
            if command not in commands:
                commands.append(command)
    return tuple(commands)


def _test_commands_in(wf_path: Path) -> list[str]:
    content = read_text_or_none(wf_path)
    if content is None:
        return []

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        logger.debug("YAML parse error in %s: %s", wf_path.name, exc)
        return []

    if not isinstance(data, dict):
        return []

    jobs = data.get("jobs", {})
    if not isinstance(jobs, dict):
        return []

    commands: list[str] = []
    for job_config in jobs.values():
        if not isinstance(job_config, dict):
            continue

        steps = job_config.get("steps", [])
        if not isinstance(steps, list):
            continue

        for step in steps:
            if not isinstance(step, dict):
                continue
            run_cmd = step.get("run")
            if isinstance(run_cmd, str) and _looks_like_test(run_cmd):
                commands.append(run_cmd.strip())

    return commands


def _looks_like_test(run_cmd: str) -> bool:
    lowered = run_cmd.lower()
    return any(pattern in lowered for pattern in TEST_PATTERNS)
