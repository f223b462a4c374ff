"""Tests for Go test file detection.

All tests use in-memory fixtures written to tmp_path; no real repos are cloned.
"""

from pathlib import Path

from testgate.detector.go import find_go_test_files, has_go_tests


def _write(path: Path, content: str = "package main\n") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


class TestGoTestDetection:
    def test_root_test_file(self, tmp_path):
        _write(tmp_path / "main_test.go")
        assert has_go_tests(tmp_path) is True

    def test_nested_test_file(self, tmp_path):
        _write(tmp_path / "internal" / "store" / "store_test.go")
        assert has_go_tests(tmp_path) is True

    def test_go_sources_without_tests(self, tmp_path):
        _write(tmp_path / "go.mod", "module example.com/app\n\ngo 1.23\n")
        _write(tmp_path / "main.go")
        assert has_go_tests(tmp_path) is False

    def test_suffix_must_match_exactly(self, tmp_path):
        _write(tmp_path / "main_test.go.orig")
        _write(tmp_path / "main-test.go")
        _write(tmp_path / "MAIN_TEST.GO")
        assert has_go_tests(tmp_path) is False

    def test_counts_every_file(self, tmp_path):
        _write(tmp_path / "a_test.go")
        _write(tmp_path / "pkg" / "b_test.go")
        assert len(find_go_test_files(tmp_path)) == 2

    def test_empty_repo(self, tmp_path):
        assert has_go_tests(tmp_path) is False

    def test_missing_repo_dir(self, tmp_path):
        assert has_go_tests(tmp_path / "does-not-exist") is False
