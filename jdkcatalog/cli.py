# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Command-line interface for jdkcatalog.

This module provides the main CLI entry point for the jdkcatalog tool,
offering commands to inspect version strings and query catalog snapshots.

Commands:

    parse: Parse a version string and show its canonical forms
    compare: Compare two version strings with every comparison mode
    support: Show the term of support of a feature release
    catalog: Load a catalog snapshot and filter its packages
    builds: Show sibling artifacts and the newest build of a package

Example:
    Parse a vendor filename:
        ```bash
        $ jdkcatalog parse zulu8.50.0.51-ca-jdk8.0.275-linux_x64.tar.gz
        ```

    Compare two versions:
        ```bash
        $ jdkcatalog compare 17-ea.28 17-ea.34
        ```

    List the newest Java 17 builds of a catalog:
        ```bash
        $ jdkcatalog catalog catalogs/zulu/catalog.yaml --version 17 --latest
        ```

    Enable verbose output:
        ```bash
        $ jdkcatalog catalog catalogs/zulu/catalog.yaml --verbose
        ```

Exit Codes:

- 0: Success
- 1: Error (unparseable input, configuration, network or catalog failure)

Note:
    Each command has its own handler function (cmd_<command>). Verbose mode
    shows full tracebacks on errors for debugging. Debug mode implies
    verbose mode and shows how each version string was resolved.
"""

from __future__ import annotations

import argparse
from importlib.metadata import version
import json
from pathlib import Path
import sys
import traceback

from jdkcatalog.catalog import package_to_dict
from jdkcatalog.core import find_builds, query_catalog
from jdkcatalog.exceptions import (
    CatalogError,
    ConfigError,
    InvalidVersionError,
    JDKCatalogError,
    NetworkError,
)
from jdkcatalog.logging import SilentLogger, get_logger, set_global_logger
from jdkcatalog.packages import Distribution, Package
from jdkcatalog.support import classify_term_of_support
from jdkcatalog.versioning import OutputFormat, VersionNumber, parse


def _configure_logger(args: argparse.Namespace, *, quiet: bool = False) -> None:
    # stdout carries machine readable output when quiet
    if quiet:
        set_global_logger(SilentLogger())
        return
    debug = getattr(args, "debug", False)
    logger = get_logger(verbose=getattr(args, "verbose", False), debug=debug)
    set_global_logger(logger)


def _report_error(args: argparse.Namespace, err: Exception) -> int:
    print(f"Error: {err}")
    if getattr(args, "verbose", False) or getattr(args, "debug", False):
        traceback.print_exc()
    return 1


def _parse_or_fail(text: str) -> VersionNumber:
    number = parse(text)
    if number.is_empty:
        raise InvalidVersionError(f"No version number found in {text!r}")
    return number


def _describe(package: Package) -> str:
    return (
        f"{package.id}  {package.version_number.to_string(OutputFormat.REDUCED)}  "
        f"{package.distribution.api_string}  {package.operating_system.api_string}/"
        f"{package.architecture.api_string}  {package.archive_type.api_string}  "
        f"{package.filename}"
    )


def cmd_parse(args: argparse.Namespace) -> int:
    """Handler for 'jdkcatalog parse' command.

    Args:
        args: Parsed command-line arguments containing the text to parse
            and the occurrence to use.

    Returns:
        Exit code (0 for success, 1 when the text holds no version).
    """
    _configure_logger(args)

    try:
        number = parse(args.text, args.match)
    except InvalidVersionError as err:
        return _report_error(args, err)
    if number.is_empty:
        print(f"Error: No version number found in {args.text!r}")
        return 1

    print("=" * 70)
    print("PARSE RESULTS")
    print("=" * 70)
    print(f"Input:           {args.text}")
    print(f"Version:         {number}")
    print(f"Reduced:         {number.to_string(OutputFormat.REDUCED)}")
    print(f"Normalized:      {number.normalized()}")
    print(f"Components:      {', '.join(str(value) for value in number.components())}")
    print(f"Build:           {number.build if number.build is not None else '-'}")
    status = number.release_status.api_string if number.release_status else "-"
    print(f"Release Status:  {status or '-'}")
    print(f"Pre-Build:       {number.pre_build if number.pre_build is not None else '-'}")
    print("=" * 70)
    return 0


def cmd_compare(args: argparse.Namespace) -> int:
    """Handler for 'jdkcatalog compare' command.

    Prints the strict order, the filter match and the prefix equality of
    two version strings.

    Returns:
        Exit code (0 for success, 1 when either text holds no version).
    """
    _configure_logger(args)

    try:
        left = _parse_or_fail(args.left)
        right = _parse_or_fail(args.right)
    except InvalidVersionError as err:
        return _report_error(args, err)

    symbol = {-1: "<", 0: "==", 1: ">"}[left.compare(right)]
    print("=" * 70)
    print("COMPARISON RESULTS")
    print("=" * 70)
    print(f"Left:            {left}")
    print(f"Right:           {right}")
    print(f"Order:           {left} {symbol} {right}")
    print(f"Filter Match:    {left.compare_for_filter(right) == 0}")
    print(f"Equals:          {left.equals(right)}")
    print("=" * 70)
    return 0


def cmd_support(args: argparse.Namespace) -> int:
    """Handler for 'jdkcatalog support' command."""
    _configure_logger(args)

    distribution = None
    if args.distribution:
        distribution = Distribution.from_text(args.distribution)
        if distribution is Distribution.NOT_FOUND:
            print(f"Error: Unknown distribution {args.distribution!r}")
            return 1

    try:
        term = classify_term_of_support(args.feature, distribution)
    except InvalidVersionError as err:
        return _report_error(args, err)

    print(f"Java {args.feature}: {term.api_string.upper() or term.name}")
    return 0


def cmd_catalog(args: argparse.Namespace) -> int:
    """Handler for 'jdkcatalog catalog' command.

    Loads the catalog described by the config file, filters it and prints
    one line per package (or JSON records with --json).

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    _configure_logger(args, quiet=args.json)

    config_path = Path(args.config).resolve()
    if not config_path.exists():
        print(f"Error: Config file not found: {config_path}")
        return 1

    try:
        result = query_catalog(
            config_path,
            version=args.query_version,
            latest=True if args.latest else None,
            scope=args.scope,
            distribution=args.distribution,
        )
    except (ConfigError, NetworkError, CatalogError) as err:
        return _report_error(args, err)
    except JDKCatalogError as err:
        # Any other jdkcatalog error
        return _report_error(args, err)

    if args.json:
        print(json.dumps([package_to_dict(p) for p in result.packages], indent=2))
        return 0

    print("=" * 70)
    print("CATALOG RESULTS")
    print("=" * 70)
    for package in result.packages:
        print(_describe(package))
    print("=" * 70)
    print()
    print(f"[SUCCESS] {len(result.packages)} of {result.total} package(s) matched")
    return 0


def cmd_builds(args: argparse.Namespace) -> int:
    """Handler for 'jdkcatalog builds' command."""
    _configure_logger(args)

    config_path = Path(args.config).resolve()
    if not config_path.exists():
        print(f"Error: Config file not found: {config_path}")
        return 1

    try:
        result = find_builds(config_path, args.package_id, distribution=args.distribution)
    except (ConfigError, NetworkError, CatalogError) as err:
        return _report_error(args, err)
    except JDKCatalogError as err:
        # Any other jdkcatalog error
        return _report_error(args, err)

    print("=" * 70)
    print("BUILD RESULTS")
    print("=" * 70)
    print(f"Package:         {_describe(result.package)}")
    print(f"Siblings:        {len(result.siblings)}")
    for sibling in result.siblings:
        print(f"  {_describe(sibling)}")
    newest = _describe(result.newest) if result.newest else "-"
    print(f"Newest:          {newest}")
    print("=" * 70)
    return 0


def _add_output_flags(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show progress and details",
    )
    subparser.add_argument(
        "--debug",
        action="store_true",
        help="Show debug output (implies --verbose)",
    )


def main() -> None:
    """Main entry point for the jdkcatalog CLI.

    This function is registered as the 'jdkcatalog' console script in
    pyproject.toml.
    """
    parser = argparse.ArgumentParser(
        prog="jdkcatalog",
        description="jdkcatalog - resolve, compare and catalog JDK package versions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"jdkcatalog {version('jdkcatalog')}",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands",
        required=True,
    )

    # 'parse' command
    parser_parse = subparsers.add_parser(
        "parse",
        help="Parse a version string",
        description="Parse a version string, filename or tag and show its canonical forms.",
    )
    parser_parse.add_argument("text", help="Text containing a version number")
    parser_parse.add_argument(
        "--match",
        type=int,
        default=0,
        help="Which occurrence of a version in the text to use (default: 0)",
    )
    _add_output_flags(parser_parse)
    parser_parse.set_defaults(func=cmd_parse)

    # 'compare' command
    parser_compare = subparsers.add_parser(
        "compare",
        help="Compare two version strings",
        description="Show strict order, filter match and prefix equality of two versions.",
    )
    parser_compare.add_argument("left", help="First version string")
    parser_compare.add_argument("right", help="Second version string")
    _add_output_flags(parser_compare)
    parser_compare.set_defaults(func=cmd_compare)

    # 'support' command
    parser_support = subparsers.add_parser(
        "support",
        help="Show the term of support of a feature release",
    )
    parser_support.add_argument("feature", type=int, help="Feature version, e.g. 17")
    parser_support.add_argument(
        "--distribution",
        help="Distribution to classify for (MTS is only reported for zulu)",
    )
    parser_support.set_defaults(func=cmd_support)

    # 'catalog' command
    parser_catalog = subparsers.add_parser(
        "catalog",
        help="Load and filter a catalog snapshot",
        description="Load the catalog snapshot named by a config file and filter its packages.",
    )
    parser_catalog.add_argument("config", help="Path to the catalog config YAML file")
    parser_catalog.add_argument(
        "--version",
        dest="query_version",
        help="Version prefix to match, e.g. 17 or 11.0.9",
    )
    parser_catalog.add_argument(
        "--latest",
        action="store_true",
        help="Only show the newest build of each release line",
    )
    parser_catalog.add_argument(
        "--scope",
        help="Download scope: directly_downloadable or not_directly_downloadable",
    )
    parser_catalog.add_argument(
        "--distribution",
        help="Distribution name for config layering (default: detected)",
    )
    parser_catalog.add_argument(
        "--json",
        action="store_true",
        help="Print the matching packages as JSON records",
    )
    _add_output_flags(parser_catalog)
    parser_catalog.set_defaults(func=cmd_catalog)

    # 'builds' command
    parser_builds = subparsers.add_parser(
        "builds",
        help="Show sibling artifacts and the newest build of a package",
    )
    parser_builds.add_argument("config", help="Path to the catalog config YAML file")
    parser_builds.add_argument("package_id", help="Package id as printed by 'catalog'")
    parser_builds.add_argument(
        "--distribution",
        help="Distribution name for config layering (default: detected)",
    )
    _add_output_flags(parser_builds)
    parser_builds.set_defaults(func=cmd_builds)

    # Parse and dispatch
    args = parser.parse_args()

    exit_code = args.func(args)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
