"""Command line interface for checking links in a document."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List

from .app import LinkCheckerApp
from .checker import StatusChecker
from .config import Settings
from .models import MAX_STATUS, MIN_STATUS, PolicyConfig, PolicyConfigError
from .report import render_plain, render_table, to_json
from .reporter import ConsoleReporter


def _status_code(value: str) -> int:
    try:
        code = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer status code, got {value!r}")
    if not MIN_STATUS <= code <= MAX_STATUS:
        raise argparse.ArgumentTypeError(
            f"status code must be between {MIN_STATUS} and {MAX_STATUS}, got {code}"
        )
    return code


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="link-checker",
        description=(
            "Check links in a file for their status. "
            "Fails if any links are broken (not HTTP 200-299)."
        ),
    )
    parser.add_argument(
        "path", nargs="?", default="./README.md", help="Path to the file to check"
    )
    parser.add_argument(
        "--pass",
        "--allow",
        dest="pass_codes",
        action="append",
        type=_status_code,
        metavar="CODE",
        help="Specify a status that should pass the check (can be repeated)",
    )
    parser.add_argument(
        "--fail",
        "--deny",
        dest="fail_codes",
        action="append",
        type=_status_code,
        metavar="CODE",
        help="Specify a status that should fail the check (can be repeated)",
    )
    parser.add_argument(
        "--only",
        "--just",
        type=_status_code,
        metavar="CODE",
        help="Specify a status code that should be the only one to pass the check",
    )
    parser.add_argument(
        "--affect-exit",
        action="store_true",
        help="Exit with a non-zero exit code if any links are broken",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Just print broken links (newline separated)",
    )
    parser.add_argument(
        "--json-output",
        type=Path,
        help="Write structured results to a JSON file",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Per-request timeout in seconds (default from LINK_CHECKER_TIMEOUT or 10)",
    )
    parser.add_argument(
        "--max-concurrency",
        type=_positive_int,
        help="Limit the number of simultaneous requests (default: unlimited)",
    )
    parser.add_argument("--verbose", action="store_true", help="Log every request to stderr")
    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        policy = PolicyConfig.build(args.pass_codes, args.fail_codes, args.only)
    except PolicyConfigError as exc:
        parser.error(str(exc))

    try:
        settings = Settings.from_env()
    except ValueError as exc:
        parser.error(str(exc))
    if args.timeout is not None:
        settings.timeout = args.timeout
    if args.max_concurrency is not None:
        settings.max_concurrency = args.max_concurrency

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    reporter = ConsoleReporter(quiet=args.plain)
    checker = LinkCheckerApp(status_checker=StatusChecker(settings=settings), policy=policy)

    reporter.start("Reading file")
    try:
        text = checker.load_text(args.path)
    except (OSError, UnicodeDecodeError) as exc:
        reporter.stop("failed")
        reporter.error(str(exc))
        return 1
    reporter.stop()

    reporter.start(f"Checking links in {args.path}")
    _, result = checker.process_text(text)
    reporter.stop()

    if result.good:
        reporter.success(result.summary())
    else:
        reporter.warn(result.summary())

    if args.json_output:
        args.json_output.write_text(json.dumps(to_json(result), indent=2))

    if not result.bad:
        return 0

    reporter.warn(f"{len(result.bad)} links are broken!")
    if args.plain:
        reporter.echo(render_plain(result.bad))
    else:
        reporter.echo("\n\nBroken Links:\n")
        reporter.echo(render_table(result.bad))
        reporter.echo("\n")

    return 1 if args.affect_exit else 0


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    raise SystemExit(main())
