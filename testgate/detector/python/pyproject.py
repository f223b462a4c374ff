"""pyproject.toml pytest signal.

Deliberately a raw substring check, not a TOML parse: any mention of
`pytest` (even in a comment) counts. This is looser than the token match
used for requirements files and the two rules are kept separate.
"""

from pathlib import Path

from testgate.detector.fs import read_text_or_none

PYPROJECT_NAME = "pyproject.toml"
PYTEST_TABLE = "[tool.pytest.ini_options]"


def mentions_pytest(repo_dir: Path) -> bool:
    text = read_text_or_none(Path(repo_dir) / PYPROJECT_NAME)
    if text is None:
        return False
    return PYTEST_TABLE in text or "pytest" in text
