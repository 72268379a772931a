"""Command-line front end for pathguard.

Checks, normalizes, sanitizes and joins paths supplied as arguments or read
from a file, one per line.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from . import __version__
from .config.settings import ConfigurationError, PathGuardSettings, load_settings
from .models.errors import PathError
from .ui.console import ConsoleManager
from .utils.logging_factory import LoggingFactory
from .utils.normalize import normalize_path_str
from .utils.paths import contain
from .utils.sanitization import sanitize_many
from .utils.validation import find_violations

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_UNSAFE = 1
EXIT_CONFIG = 2


def setup_logging(settings: PathGuardSettings, verbose: bool = False) -> None:
    """Setup logging from settings, forcing DEBUG when verbose.

    Args:
        settings: Loaded settings
        verbose: If True, set the package logger to DEBUG
    """
    level = logging.DEBUG if verbose else settings.log_level_value
    LoggingFactory.initialize(log_dir=settings.log_dir, level=level)


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="pathguard",
        description="Normalize and validate untrusted path strings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""Examples:
  # Report every rule a path breaks
  pathguard check "../etc/passwd" "lib/CON.txt"

  # Turn directory-content paths into safe relative paths
  pathguard sanitize /args.js lib/generator.js

  # Check a list of paths extracted from an archive
  pathguard sanitize --from-file entries.txt --json-output

  # Join into a repository and prove the result stays inside
  pathguard join /repo testing/framework /args.js
        """,
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    parser.add_argument(
        "--json-output",
        action="store_true",
        default=None,
        help="Emit machine-readable JSON lines on stdout",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands", required=True)

    normalize_parser = subparsers.add_parser(
        "normalize",
        help="Normalize path separators",
        description="Convert separators to '/', collapse repeats and drop '.' segments",
    )
    normalize_parser.add_argument("paths", nargs="+", help="Paths to normalize")

    for name, help_text in (
        ("check", "Report every safety rule each path violates"),
        ("sanitize", "Convert directory-content paths into safe relative paths"),
    ):
        sub = subparsers.add_parser(name, help=help_text, description=help_text)
        sub.add_argument("paths", nargs="*", help="Paths to process")
        sub.add_argument(
            "--from-file",
            type=Path,
            help="Read additional paths from FILE, one per line",
        )

    join_parser = subparsers.add_parser(
        "join",
        help="Join workdir/target/file and verify containment",
        description="Sanitize FILE, join it under WORKDIR/TARGET and verify it stays in WORKDIR",
    )
    join_parser.add_argument("workdir", help="Confinement root")
    join_parser.add_argument("target", help="Subdirectory under the workdir")
    join_parser.add_argument("file", help="Untrusted file path")
    join_parser.add_argument(
        "--strict-target",
        action="store_true",
        default=None,
        help="Validate TARGET as untrusted input too",
    )

    return parser


def _collect_paths(args: argparse.Namespace) -> List[str]:
    """Gather paths from positional arguments and --from-file."""
    paths = list(args.paths)
    if args.from_file is not None:
        with open(args.from_file, encoding="utf-8") as f:
            paths.extend(line.rstrip("\r\n") for line in f)
    return paths


def _error_row(raw: str, error: PathError, status: str = "error") -> Dict[str, Any]:
    return {"input": raw, "status": status, **{k: v for k, v in error.to_dict().items() if k != "path"}}


def normalize_command(args: argparse.Namespace, console_manager: ConsoleManager) -> int:
    """Handle the normalize command."""
    rows = [
        {"input": raw, "status": "ok", "result": normalize_path_str(raw)} for raw in args.paths
    ]
    console_manager.print_results("normalize", rows)
    return EXIT_OK


def check_command(args: argparse.Namespace, console_manager: ConsoleManager) -> int:
    """Handle the check command."""
    raw_paths = _collect_paths(args)
    if not raw_paths:
        console_manager.print_error("No paths given")
        return EXIT_CONFIG

    rows: List[Dict[str, Any]] = []
    unsafe = False
    for raw in raw_paths:
        violations = find_violations(raw)
        if not violations:
            rows.append({"input": raw, "status": "ok", "result": raw})
            continue
        unsafe = True
        rows.append(
            {
                "input": raw,
                "status": "unsafe",
                "code": violations[0].code,
                "violations": [v.code for v in violations],
                "message": "; ".join(str(v) for v in violations),
            }
        )
    console_manager.print_results("check", rows)
    return EXIT_UNSAFE if unsafe else EXIT_OK


def sanitize_command(args: argparse.Namespace, console_manager: ConsoleManager) -> int:
    """Handle the sanitize command."""
    raw_paths = _collect_paths(args)
    if not raw_paths:
        console_manager.print_error("No paths given")
        return EXIT_CONFIG

    rows: List[Dict[str, Any]] = []
    failed = False
    for raw, outcome in zip(raw_paths, sanitize_many(raw_paths)):
        if isinstance(outcome, PathError):
            failed = True
            rows.append(_error_row(raw, outcome))
        else:
            rows.append({"input": raw, "status": "ok", "result": str(outcome)})
    console_manager.print_results("sanitize", rows)
    return EXIT_UNSAFE if failed else EXIT_OK


def join_command(
    args: argparse.Namespace, console_manager: ConsoleManager, settings: PathGuardSettings
) -> int:
    """Handle the join command."""
    strict = settings.strict_target if args.strict_target is None else args.strict_target
    try:
        result = contain(args.workdir, args.target, args.file, strict_target=strict)
    except PathError as e:
        logger.debug("Join rejected: %s", e)
        console_manager.print_results("join", [_error_row(args.file, e)])
        return EXIT_UNSAFE

    row = {"input": args.file, "status": "ok", "result": result.path.as_posix()}
    row.update({k: v for k, v in result.to_dict().items() if k != "path"})
    console_manager.print_results("join", [row])
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Returns:
        Exit code (0 when every path is safe, 1 otherwise, 2 on bad configuration)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except ConfigurationError as e:
        ConsoleManager(json_output=bool(args.json_output)).print_error(str(e))
        return EXIT_CONFIG

    setup_logging(settings, args.verbose)

    json_output = settings.json_output if args.json_output is None else args.json_output
    console_manager = ConsoleManager(verbose=args.verbose, json_output=json_output)

    try:
        if args.command == "normalize":
            return normalize_command(args, console_manager)
        elif args.command == "check":
            return check_command(args, console_manager)
        elif args.command == "sanitize":
            return sanitize_command(args, console_manager)
        elif args.command == "join":
            return join_command(args, console_manager, settings)
        else:
            parser.print_help()
            return EXIT_UNSAFE
    except OSError as e:
        console_manager.print_error(f"Cannot read input: {e}")
        return EXIT_CONFIG
    except KeyboardInterrupt:
        logger.error("Operation cancelled by user")
        return EXIT_UNSAFE


if __name__ == "__main__":
    sys.exit(main())
