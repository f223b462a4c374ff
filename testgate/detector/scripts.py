"""Local test-runner script detection.

Looks for conventional "run the tests" entry points anywhere in the tree
(test.sh, run-tests.ps1, ...) and, as a fallback, for anything test-named
under a root-level scripts/ directory.
"""

from pathlib import Path

from testgate.detector.fs import list_files_recursive

SCRIPT_EXTENSIONS = ("ps1", "sh", "cmd", "bat")
SCRIPT_STEMS = ("test", "run-tests")

RUNNER_SCRIPT_NAMES = frozenset(
    f"{stem}.{ext}" for stem in SCRIPT_STEMS for ext in SCRIPT_EXTENSIONS
)

# Substrings that mark a file under scripts/ as a test entry point.
SCRIPTS_DIR_MARKERS = ("test", "run-tests")


def find_runner_scripts(repo_dir: Path) -> list[Path]:
    """Return test-runner scripts found anywhere in the repository tree."""
    return [
        path
        for path in list_files_recursive(repo_dir)
        if path.name.lower() in RUNNER_SCRIPT_NAMES
    ]


def find_scripts_dir_tests(repo_dir: Path) -> list[Path]:
    """Return test-named files under the root scripts/ directory, any extension."""
    return [
        path
        for path in list_files_recursive(Path(repo_dir) / "scripts")
        if any(marker in path.name.lower() for marker in SCRIPTS_DIR_MARKERS)
    ]


def find_local_test_scripts(repo_dir: Path) -> list[Path]:
    """Both rules combined, sorted, with files matched twice listed once."""
    return sorted(set(find_runner_scripts(repo_dir)) | set(find_scripts_dir_tests(repo_dir)))


def has_local_test_script(repo_dir: Path) -> bool:
    return bool(find_local_test_scripts(repo_dir))
