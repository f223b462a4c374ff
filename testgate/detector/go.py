"""Go test file detection."""

from pathlib import Path

from testgate.detector.fs import list_files_recursive

GO_TEST_SUFFIX = "_test.go"


def find_go_test_files(repo_dir: Path) -> list[Path]:
    return [
        path
        for path in list_files_recursive(repo_dir)
        if path.name.endswith(GO_TEST_SUFFIX)
    ]


def has_go_tests(repo_dir: Path) -> bool:
    """True if at least one *_test.go file exists anywhere in the tree."""
    return bool(find_go_test_files(repo_dir))
