"""Python (pytest) signal detector.

Entry point: has_pytest_signal(repo_dir) -> bool
"""

from pathlib import Path

from testgate.detector.python import pyproject, requirements

# Config files whose mere presence at the root is a pytest signal.
PYTEST_CONFIG_FILES = ("pytest.ini", "tox.ini")


def find_pytest_signal(repo_dir: Path) -> str | None:
    """Return the root-relative file that provides the pytest signal, or None.

    Checks run in order and the first match wins; the order only matters
    for which file gets reported.
    """
    repo_dir = Path(repo_dir)

    for name in PYTEST_CONFIG_FILES:
        if (repo_dir / name).is_file():
            return name

    if pyproject.mentions_pytest(repo_dir):
        return pyproject.PYPROJECT_NAME

    req_path = requirements.find_pytest_requirement(repo_dir)
    if req_path is not None:
        return req_path.name

    return None


def has_pytest_signal(repo_dir: Path) -> bool:
    return find_pytest_signal(repo_dir) is not None
