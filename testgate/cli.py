"""CLI entrypoint for testgate."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TextIO

import structlog
from pydantic import ValidationError

from testgate.core.config import Settings, get_settings
from testgate.core.errors import RepositoryPathError
from testgate.core.logging import configure_logging
from testgate.decision import decide
from testgate.detector import detect
from testgate.report import exit_code, render_report

# Bad path, bad configuration, or (without fail-fast) an internal error.
# Never the same as a FAIL verdict.
EXIT_ERROR = 2

logger = structlog.get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="testgate",
        description=(
            "Check that a repository advertising CI workflows also provides "
            "a way to run its tests locally."
        ),
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Path to the repository root (defaults to current directory).",
    )
    parser.add_argument(
        "--path",
        dest="path_option",
        default=None,
        metavar="PATH",
        help="Repository root, as a named option.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable coloured headline output.",
    )
    parser.add_argument(
        "--no-fail-fast",
        action="store_true",
        help="Report unexpected internal errors as exit code 2 instead of a traceback.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    return parser


def resolve_repository_path(raw: str | Path) -> Path:
    """Resolve the repository path to an absolute directory.

    Raises RepositoryPathError if it does not exist or is not a directory.
    """
    if not str(raw).strip():
        raise RepositoryPathError(raw, "empty path")
    try:
        resolved = Path(raw).expanduser().resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        raise RepositoryPathError(raw, str(exc)) from exc
    if not resolved.is_dir():
        raise RepositoryPathError(raw, "not a directory")
    return resolved


def run(repo_path: str | Path, settings: Settings, out: TextIO | None = None) -> int:
    """Detect, decide and report for one repository. Returns the exit code.

    Raises RepositoryPathError before any detection when the path is bad.
    """
    out = out if out is not None else sys.stdout
    repo_dir = resolve_repository_path(repo_path)
    log = logger.bind(repo=str(repo_dir))

    try:
        result = detect(repo_dir)
        decision = decide(result)
    except Exception:
        if settings.fail_fast:
            raise
        log.exception("detection_failed")
        return EXIT_ERROR

    log.info("verdict", verdict=str(decision.verdict), **result.to_dict())

    color = settings.color if settings.color is not None else _isatty(out)
    out.write(render_report(result, decision, color=color))
    return exit_code(decision)


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint for testgate."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.path is not None and args.path_option is not None and args.path != args.path_option:
        parser.error("repository path given both positionally and via --path")
    repo_path = args.path if args.path is not None else args.path_option
    if repo_path is None:
        repo_path = Path.cwd()

    overrides: dict[str, object] = {}
    if args.no_color:
        overrides["color"] = False
    if args.no_fail_fast:
        overrides["fail_fast"] = False
    if args.verbose:
        overrides["log_level"] = "DEBUG"
    try:
        settings = get_settings().model_copy(update=overrides)
    except ValidationError as exc:
        print(f"testgate: invalid configuration: {exc}", file=sys.stderr)
        return EXIT_ERROR

    configure_logging(level=settings.log_level, json_logs=settings.json_logs)

    try:
        return run(repo_path, settings)
    except RepositoryPathError as exc:
        print(f"testgate: {exc}", file=sys.stderr)
        return EXIT_ERROR


def _isatty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
