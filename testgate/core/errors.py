"""Exception types.

Only repository path resolution is allowed to fail a run; every detector
problem is absorbed into a negative signal instead.
"""

from pathlib import Path


class GateError(Exception):
    """Base class for testgate errors."""


class RepositoryPathError(GateError):
    """The repository path does not exist or is not a directory."""

    def __init__(self, path: str | Path, detail: str) -> None:
        self.path = str(path)
        self.detail = detail
        super().__init__(f"Cannot resolve repository path {self.path!r}: {detail}")
