"""package.json parser for declared test-script detection.

Answers "is there a declared, named test command", not "does it run a
test framework". Parsing returns either a Manifest or a ManifestParseError;
the detector maps a parse error to False explicitly.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from testgate.detector.fs import read_bytes_or_none

logger = logging.getLogger(__name__)

MANIFEST_NAME = "package.json"


@dataclass(frozen=True)
class Manifest:
    """A decoded package.json document (top level must be an object)."""

    data: dict[str, Any]

    @property
    def scripts(self) -> dict[str, Any]:
        scripts = self.data.get("scripts", {})
        return scripts if isinstance(scripts, dict) else {}


@dataclass(frozen=True)
class ManifestParseError:
    """Why a package.json could not be turned into a Manifest."""

    message: str


ManifestParseResult = Manifest | ManifestParseError


def parse_manifest(raw: bytes) -> ManifestParseResult:
    """Decode raw package.json bytes.

    Never raises: invalid UTF-8, invalid JSON, and non-object documents all
    come back as ManifestParseError.
    """
    try:
        data = json.loads(raw.decode("utf-8-sig"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        return ManifestParseError(message=str(exc))

    if not isinstance(data, dict):
        return ManifestParseError(message=f"expected a JSON object, got {type(data).__name__}")
    return Manifest(data=data)


def has_package_json_test_script(repo_dir: Path) -> bool:
    """True when package.json declares a non-blank `scripts.test` command."""
    pkg_path = Path(repo_dir) / MANIFEST_NAME
    raw = read_bytes_or_none(pkg_path)
    if raw is None:
        return False

    parsed = parse_manifest(raw)
    if isinstance(parsed, ManifestParseError):
        logger.debug("Ignoring unparsable %s: %s", pkg_path, parsed.message)
        return False

    test_cmd = parsed.scripts.get("test")
    return isinstance(test_cmd, str) and bool(test_cmd.strip())
