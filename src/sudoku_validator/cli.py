"""Command line helpers for grid validation."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Dict, List

from . import settings
from .checks import rows_ok
from .events import JsonlReporter, LoggingReporter, Reporter, fanout
from .grid import load_grids, to_string
from .samples import SAMPLES
from .validator import check, validate


def _build_reporter(events_dir: str | None, verbose: bool) -> Reporter:
    reporter: Reporter = LoggingReporter(ok_level=logging.INFO if verbose else logging.DEBUG)
    if settings.events_enabled(events_dir):
        max_bytes = int(settings.get_section("events.max_bytes", 100 * 1024 * 1024))
        sink = JsonlReporter(settings.resolve_events_dir(events_dir), max_bytes=max_bytes)
        reporter = fanout(reporter, sink)
    return reporter


def cmd_samples(args: argparse.Namespace) -> int:
    reporter = _build_reporter(args.events_dir, args.verbose)
    first = SAMPLES["puzzle"]
    print(f"Are rows OK for puzzle? {rows_ok(first, reporter=reporter)}")
    for name, grid in SAMPLES.items():
        verdict = validate(grid, reporter=reporter, profile=args.profile)
        print(f"Solution to {name} is {'' if verdict else 'NOT '}OK.")
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    reporter = _build_reporter(args.events_dir, args.verbose)
    grids = load_grids(Path(args.file))
    summaries: List[Dict[str, object]] = []
    for index, grid in enumerate(grids):
        report = check(grid, reporter=reporter, profile=args.profile)
        summaries.append(
            {
                "index": index,
                "grid": to_string(grid),
                "ok": report.ok,
                "stage": report.stage,
                "issues": [
                    {"code": issue.code, "msg": issue.msg, "path": issue.path}
                    for issue in report.issues
                ],
            }
        )
    print(json.dumps(summaries, indent=2, sort_keys=True))
    return 0 if all(entry["ok"] for entry in summaries) else 1


def _common_options(default: object) -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-v", "--verbose", action="store_true", default=default, help="Log passing rows/columns/blocks too")
    common.add_argument("--profile", default=default, help="Validation profile (classic or strict)")
    common.add_argument(
        "--events-dir",
        default=default,
        help="Also append diagnostic events as JSONL under this directory",
    )
    return common


def _build_parser() -> argparse.ArgumentParser:
    # options are accepted before or after the subcommand; SUPPRESS keeps the
    # subcommand copy from overwriting a value given before it
    parser = argparse.ArgumentParser(
        description="Validate completed Sudoku grids",
        parents=[_common_options(None)],
    )
    parser.set_defaults(verbose=False)
    trailing = _common_options(argparse.SUPPRESS)
    sub = parser.add_subparsers(dest="command", required=True)

    samples = sub.add_parser("samples", parents=[trailing], help="Validate the built-in demonstration grids")
    samples.set_defaults(func=cmd_samples)

    check_cmd = sub.add_parser("check", parents=[trailing], help="Validate grids from a .json or text file")
    check_cmd.add_argument("file")
    check_cmd.set_defaults(func=cmd_check)

    return parser


def main(argv: List[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING, format="%(message)s")
    return args.func(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
