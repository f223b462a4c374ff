"""requirements file parser for the pytest dependency token.

`pytest` must appear as a whole token: preceded by start-of-line or
whitespace and followed by a version operator (< > = ~ !), whitespace, or
end-of-line. `pytest-cov` and `pytest_mock` therefore do not count.
"""

import re
from pathlib import Path

from testgate.detector.fs import read_text_or_none

REQUIREMENTS_FILES = ("requirements.txt", "requirements-dev.txt")

PYTEST_TOKEN = re.compile(r"(?:^|\s)pytest(?:[<>=~!]|\s|$)", re.MULTILINE)


def requires_pytest(text: str) -> bool:
    """True if requirements text pins or lists bare pytest."""
    return PYTEST_TOKEN.search(text) is not None


def find_pytest_requirement(repo_dir: Path) -> Path | None:
    """Return the first root requirements file that lists pytest, if any."""
    for name in REQUIREMENTS_FILES:
        path = Path(repo_dir) / name
        text = read_text_or_none(path)
        if text is not None and requires_pytest(text):
            return path
    return None
