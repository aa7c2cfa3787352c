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

"""Command-line interface for storeversion.

Commands:

    check: Look up an app in the store and compare with a current version
    compare: Compare two version strings offline

Example:
    Check for a newer release:
        ```bash
        $ storeversion check com.example.app 1.0.0 --country br
        ```

    Compare two versions:
        ```bash
        $ storeversion compare 1.9 1.10
        minor
        ```

    Enable debug output:
        ```bash
        $ storeversion check com.example.app 1.0.0 --debug
        ```

Exit Codes:

- 0: Success (the check completed, whether or not an update exists)
- 1: Error (configuration, network, decode or lookup failure)

Note:
    The CLI uses argparse for command parsing. Each command has its own
    handler function (cmd_<command>). Verbose mode shows full tracebacks on
    errors for debugging. Debug mode implies verbose mode.

"""

from __future__ import annotations

import argparse
import asyncio
from pathlib import Path
import sys

from storeversion import __version__
from storeversion.config import load_config
from storeversion.core import ReleaseAvailabilityChecker
from storeversion.exceptions import CheckError, ConfigError, StoreVersionError
from storeversion.logging import get_logger, set_global_logger
from storeversion.lookup import ItunesLookupFetcher
from storeversion.versioning import compare_versions


def _print_error(err: Exception, args: argparse.Namespace) -> None:
    print(f"Error: {err}")
    if args.verbose or args.debug:
        import traceback

        traceback.print_exc()


def _positive_float(value: str) -> float:
    """argparse type for --timeout: a float greater than zero."""
    try:
        number = float(value)
    except ValueError as err:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from err
    if not number > 0:
        raise argparse.ArgumentTypeError(f"must be a positive number, got {value!r}")
    return number


def cmd_check(args: argparse.Namespace) -> int:
    """Handler for 'storeversion check' command.

    Loads the configuration, looks the bundle id up in the store and
    compares the store version with the given current version.

    Args:
        args: Parsed command-line arguments containing the bundle id,
            current version, optional country/config/timeout and flags.

    Returns:
        Exit code (0 for a completed check, 1 for failure).

    """
    logger = get_logger(verbose=args.verbose, debug=args.debug)
    set_global_logger(logger)

    logger.step(1, 2, "Loading configuration...")
    try:
        config = load_config(Path(args.config) if args.config else None)
    except ConfigError as err:
        _print_error(err, args)
        return 1

    lookup_cfg = config["lookup"]
    country = args.country or lookup_cfg["country"]
    timeout = args.timeout if args.timeout is not None else lookup_cfg["timeout"]

    fetcher = ItunesLookupFetcher(base_url=lookup_cfg["base_url"], timeout=timeout)
    checker = ReleaseAvailabilityChecker(fetcher)

    print(f"Checking store release for: {args.bundle_id} ({country})")
    print()

    logger.step(2, 2, "Querying store lookup...")
    try:
        result = asyncio.run(checker.check(args.bundle_id, args.current_version, country))
    except CheckError as err:
        _print_error(err, args)
        return 1
    except StoreVersionError as err:
        # Catch any other storeversion errors we might have missed
        _print_error(err, args)
        return 1

    metadata = result.metadata
    print("=" * 70)
    print("RELEASE CHECK RESULTS")
    print("=" * 70)
    print(f"App Name:          {metadata.app_name or '(unknown)'}")
    print(f"Current Version:   {args.current_version}")
    print(f"Available Version: {metadata.version}")
    print(f"Update:            {result.outcome}")
    if metadata.release_notes:
        print("Release Notes:")
        for line in metadata.release_notes.splitlines():
            print(f"  {line}")
    print("=" * 70)
    print()
    if result.is_new_version:
        print(f"[UPDATE] A new {result.outcome} version is available.")
    else:
        print("[UP TO DATE] No new version available.")

    return 0


def cmd_compare(args: argparse.Namespace) -> int:
    """Handler for 'storeversion compare': print major/minor/patch/none."""
    print(compare_versions(args.current, args.available))
    return 0


def main() -> None:
    """Main entry point for the storeversion CLI.

    This function is registered as the 'storeversion' console script in
    pyproject.toml.
    """
    parser = argparse.ArgumentParser(
        prog="storeversion",
        description="Check the App Store for a newer release of an app",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"storeversion {__version__}",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands",
        required=True,
    )

    # 'check' command
    parser_check = subparsers.add_parser(
        "check",
        help="Look up an app in the store and compare versions",
        description="Query the App Store lookup endpoint for BUNDLE_ID and compare its version with CURRENT_VERSION.",
    )
    parser_check.add_argument(
        "bundle_id",
        help="Bundle identifier of the app (e.g., com.example.app)",
    )
    parser_check.add_argument(
        "current_version",
        help="Version currently installed (e.g., 1.0.0)",
    )
    parser_check.add_argument(
        "--country",
        default=None,
        help="Two-letter store country code (default: from config or 'us')",
    )
    parser_check.add_argument(
        "--config",
        default=None,
        help="Path to a YAML config file (default: ./storeversion.yaml if present)",
    )
    parser_check.add_argument(
        "--timeout",
        type=_positive_float,
        default=None,
        help="Request timeout in seconds (default: from config or 30)",
    )
    parser_check.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show progress and high-level status updates",
    )
    parser_check.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Show detailed debugging output (implies --verbose)",
    )
    parser_check.set_defaults(func=cmd_check)

    # 'compare' command
    parser_compare = subparsers.add_parser(
        "compare",
        help="Compare two version strings (no network)",
        description="Print 'major', 'minor', 'patch' or 'none' for AVAILABLE relative to CURRENT.",
    )
    parser_compare.add_argument("current", help="Current version")
    parser_compare.add_argument("available", help="Available version")
    parser_compare.set_defaults(func=cmd_compare)

    args = parser.parse_args()

    exit_code = args.func(args)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
