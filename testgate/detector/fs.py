"""Tolerant filesystem helpers shared by every detector.

Detectors never raise on missing or unreadable paths. These helpers make
that contract explicit: a missing root yields an empty listing and an
unreadable file yields None, instead of callers catching generic errors.
"""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def list_files_recursive(root: Path) -> list[Path]:
    """Return every regular file under root, sorted.

    Returns an empty list when root does not exist or is not a directory.
    Subdirectories that cannot be listed are skipped.
    """
    root = Path(root)
    if not root.is_dir():
        return []

    files: list[Path] = []
    for dirpath, _dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        for name in filenames:
            path = Path(dirpath) / name
            if path.is_file():
                files.append(path)
    return sorted(files)


def read_text_or_none(path: Path) -> str | None:
    """Read a file as UTF-8 text, or return None if it is absent or unreadable.

    Undecodable bytes are replaced rather than rejected.
    """
    path = Path(path)
    if not path.is_file():
        return None
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        logger.debug("Could not read %s: %s", path, exc)
        return None


def read_bytes_or_none(path: Path) -> bytes | None:
    path = Path(path)
    if not path.is_file():
        return None
    try:
        return path.read_bytes()
    except OSError as exc:
        logger.debug("Could not read %s: %s", path, exc)
        return None


def _log_walk_error(exc: OSError) -> None:
    logger.debug("Skipping unreadable directory %s: %s", exc.filename, exc)
