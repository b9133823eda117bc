"""
Command-line interface for converting DSL dictionaries into tables.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console

from . import __version__
from .exceptions import DataImportError, SettingsError
from .models import ParseResult
from .parser import parse_file
from .report import print_tables
from .settings import Settings, load_settings


def main(argv: Optional[list] = None) -> int:
    """Main entry point for the dsl-tables CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    return args.func(args)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="dsl-tables",
        description="Convert DSL dictionary files into normalized tables",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(title="commands", dest="command")

    # report command
    report_parser = subparsers.add_parser(
        "report",
        help="Parse a dictionary file and print its tables",
    )
    _add_common_arguments(report_parser)
    report_parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Skip invalid lines instead of aborting on the first one",
    )
    report_parser.add_argument(
        "--all-tables",
        action="store_true",
        help="Also print the translation attribute link table",
    )
    report_parser.set_defaults(func=cmd_report)

    # check command
    check_parser = subparsers.add_parser(
        "check",
        help="List every invalid line of a dictionary file",
    )
    _add_common_arguments(check_parser)
    check_parser.set_defaults(func=cmd_check)

    return parser


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "file",
        type=Path,
        help="DSL dictionary file",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML settings file",
    )
    parser.add_argument(
        "--encoding",
        type=str,
        help="Source file encoding (default: utf-16)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="count",
        default=0,
        help="Log progress (repeat for debug output)",
    )


def cmd_report(args: argparse.Namespace) -> int:
    """Handle report command."""
    settings = _load_settings(args)
    if settings is None:
        return 1
    settings = settings.override(
        fail_fast=False if args.keep_going else None,
        include_attribute_links=True if args.all_tables else None,
    )

    result = _parse(args.file, settings)
    if result is None:
        return 1

    if result.tables is None:
        print(f"\nParsing {args.file} failed:")
        _print_errors(result)
        return 1

    print_tables(
        result.tables.report_tables(
            include_attribute_links=settings.include_attribute_links,
        ),
        console=Console(),
    )

    if result.errors:
        print(f"Skipped {result.error_count} invalid line(s):")
        _print_errors(result)
        return 1
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    """Handle check command."""
    settings = _load_settings(args)
    if settings is None:
        return 1
    settings = settings.override(fail_fast=False)

    print(f"\nChecking {args.file}...")
    result = _parse(args.file, settings)
    if result is None:
        return 1

    stats = result.stats
    print(f"  Lines:        {stats.lines}")
    print(f"  Headwords:    {stats.headwords}")
    print(f"  Translations: {stats.translations}")
    print(f"  Time:         {stats.duration_seconds:.2f}s")

    if result.ok:
        print("\nNo invalid lines found.")
        return 0

    print(f"\nFound {result.error_count} invalid line(s):")
    _print_errors(result)
    return 1


def _load_settings(args: argparse.Namespace) -> Optional[Settings]:
    try:
        settings = load_settings(args.config)
    except SettingsError as e:
        print(f"\n  [SETTINGS ERROR] {e}")
        if e.line:
            print(f"                   Line: {e.line}")
        return None
    except FileNotFoundError as e:
        print(f"\n  [ERROR] {e}")
        return None

    settings = settings.override(encoding=args.encoding)
    level = settings.log_level
    if args.verbose == 1:
        level = "INFO"
    elif args.verbose > 1:
        level = "DEBUG"
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return settings


def _parse(path: Path, settings: Settings) -> Optional[ParseResult]:
    try:
        return parse_file(path, settings)
    except (FileNotFoundError, DataImportError) as e:
        print(f"\n  [ERROR] {e}")
        return None


def _print_errors(result: ParseResult) -> None:
    for error in result.errors:
        print(f"  [ERROR] Line {error.line_number}: {error.message}")
        print(f"          {error.line!r}")


if __name__ == "__main__":
    sys.exit(main())
