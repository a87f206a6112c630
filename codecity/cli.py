"""CLI entrypoint for codecity.

Usage:
    codecity [options] <command> [options]

Commands:
    churn                 Lines added/deleted and commit count per file
    authors               Commits per file and author
    code-age              Latest change date per file
    revisions             Change count per file
    summary               Commits, files, changes and authors in the log
    entity-ownership      Lines added/deleted per file and author
    effort                Each author's share of commits per file
    main-dev              Author who added the most lines per file
    refactoring-main-dev  Author who removed the most lines per file
    coupling              Files that change together
    communication         Authors who work on the same files
    fractal-value         How fragmented each file's authorship is
    all                   Write every metric as CSV into --out-dir
    city                  Join revisions with cloc line counts for the treemap

Options:
    --repo PATH              Path to the git repository (default: current directory)
    --log FILE               Parse a saved git log instead of running git
    --exclude-author NAME    Drop changes by this author (repeatable)
    --encoding ENC           Encoding of written CSV files (default: utf-8)
    --output FILE            Write the result to FILE instead of stdout
    --json                   Print JSON instead of CSV
    -v, --verbose            Debug logging
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from git import GitCommandError

from codecity.analyzers import METRICS, get_metric
from codecity.cloc import ClocError, read_cloc_file, run_cloc
from codecity.config import AnalysisConfig
from codecity.merge import merge
from codecity.models import ChangeRecord, MergedFile, to_csv, to_json, write_csv
from codecity.parser import parse_log, read_log_file
from codecity.repo import get_log_text, open_repo

logger = logging.getLogger(__name__)

DEFAULT_CITY_OUTPUT = "code-city-analysis.csv"


def _exclude(records: list[ChangeRecord], exclude_authors: list[str]) -> list[ChangeRecord]:
    """Filter out records whose author is in *exclude_authors* (case-insensitive)."""
    if not exclude_authors:
        return records
    lowered = {a.lower() for a in exclude_authors}
    return [r for r in records if r.author.lower() not in lowered]


def _load_records(args: argparse.Namespace) -> list[ChangeRecord]:
    if args.log:
        records = read_log_file(args.log)
    else:
        records = parse_log(get_log_text(open_repo(args.repo)))
    records = _exclude(records, args.exclude_authors)
    logger.info("Loaded %d change record(s)", len(records))
    return records


def _config(args: argparse.Namespace) -> AnalysisConfig:
    config = AnalysisConfig.from_env()
    if args.encoding:
        config = dataclasses.replace(config, encoding=args.encoding)
    return config


def _emit(text: str, output_path: str | None, encoding: str = "utf-8") -> None:
    if output_path:
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        Path(output_path).write_text(text, encoding=encoding)
        print(f"Output written to: {output_path}")
    else:
        print(text, end="" if text.endswith("\n") else "\n")


def cmd_metric(args: argparse.Namespace) -> None:
    config = _config(args)
    func, row_type = get_metric(args.command)
    rows = func(_load_records(args))
    if args.json:
        _emit(to_json(rows), args.output, config.encoding)
    elif args.output:
        write_csv(rows, args.output, row_type=row_type, encoding=config.encoding)
        print(f"{args.command}: {len(rows)} row(s) written to {args.output}")
    else:
        _emit(to_csv(rows, row_type=row_type), None)


def cmd_all(args: argparse.Namespace) -> None:
    config = _config(args)
    records = _load_records(args)
    out_dir = Path(args.out_dir)

    print(f"Running all metrics over {len(records)} change record(s) …")
    for name in METRICS:
        func, row_type = get_metric(name)
        rows = func(records)
        path = write_csv(rows, out_dir / f"{name}.csv", row_type=row_type, encoding=config.encoding)
        print(f"  {name:<22}: {len(rows)} row(s)")
        logger.debug("Wrote %s", path)

    print(f"\nReports written to: {out_dir}")


def cmd_city(args: argparse.Namespace) -> None:
    config = _config(args)
    records = _load_records(args)
    revisions, _ = get_metric("revisions")

    print("Counting lines of code …")
    if args.cloc:
        line_counts = read_cloc_file(args.cloc)
    else:
        line_counts = run_cloc(Path(args.repo), config)

    result = merge(revisions(records), line_counts)
    if args.json:
        _emit(to_json(result), args.output, config.encoding)
        return

    output_path = args.output or DEFAULT_CITY_OUTPUT
    write_csv(result, output_path, row_type=MergedFile, encoding=config.encoding)
    print(f"Analysis complete, result saved to: {output_path}")
    print(f"{len(result)} file(s) analysed")


def _common_parser(suppress_defaults: bool) -> argparse.ArgumentParser:
    """Shared flags, accepted both before and after the command.

    The subcommand copy leaves unset flags out of the namespace, so it never
    overwrites a value given before the command.
    """

    def default(value):
        return argparse.SUPPRESS if suppress_defaults else value

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--repo", default=default("."), metavar="PATH", help="Path to the git repo (default: current directory)")
    common.add_argument("--log", default=default(None), metavar="FILE", help="Parse a saved git log instead of running git")
    common.add_argument(
        "--exclude-author",
        dest="exclude_authors",
        metavar="NAME",
        action="append",
        default=default([]),
        help="Exclude changes by this author name (repeatable)",
    )
    common.add_argument("--encoding", default=default(None), metavar="ENC", help="Encoding of written files (default: utf-8)")
    common.add_argument("--output", default=default(None), metavar="FILE", help="Write output to FILE")
    common.add_argument("--json", action="store_true", default=default(False), help="Print JSON instead of CSV")
    common.add_argument("-v", "--verbose", action="store_true", default=default(False), help="Enable debug logging")
    return common


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="codecity",
        description="Mine a git repository's history for churn, coupling and ownership metrics.",
        parents=[_common_parser(suppress_defaults=False)],
    )
    common = _common_parser(suppress_defaults=True)

    sub = parser.add_subparsers(dest="command", required=True)
    for name in METRICS:
        sub.add_parser(name, parents=[common], help=f"The {name} metric as CSV")

    p_all = sub.add_parser("all", parents=[common], help="Write every metric as CSV into a directory")
    p_all.add_argument("--out-dir", default="output", metavar="DIR", help="Directory for the CSV files (default: output)")

    p_city = sub.add_parser("city", parents=[common], help="Join revision counts with cloc line counts")
    p_city.add_argument("--cloc", default=None, metavar="FILE", help="Read a saved `cloc --by-file --json` report")

    return parser


_COMMANDS = {name: cmd_metric for name in METRICS}
_COMMANDS.update({"all": cmd_all, "city": cmd_city})


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        _COMMANDS[args.command](args)
    except (ValueError, OSError, GitCommandError, ClocError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
