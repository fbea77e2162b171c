"""
Command-line interface for fqbn.

This module provides the `fqbn` CLI tool for inspecting and rewriting
Arduino Fully Qualified Board Names.
"""

import argparse
import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

from fqbn import __version__
from fqbn.cli_utils import BoardDetailsLoader, ErrorFormatter, configure_logging
from fqbn.errors import InvalidFQBNError
from fqbn.fqbn import FQBN, valid


@dataclass
class ParseArgs:
    """Arguments for the parse command."""

    fqbn: str
    as_json: bool = False
    verbose: bool = False


@dataclass
class SetArgs:
    """Arguments for the set command."""

    fqbn: str
    option: str
    value: str
    strict: bool = False
    verbose: bool = False


@dataclass
class MergeArgs:
    """Arguments for the merge command."""

    fqbn: str
    other: str
    verbose: bool = False


@dataclass
class LimitArgs:
    """Arguments for the limit command."""

    fqbn: str
    max_options: int
    verbose: bool = False


@dataclass
class ApplyArgs:
    """Arguments for the apply command."""

    fqbn: str
    details_path: Path
    verbose: bool = False


def _run(action: Callable[[], None], verbose: bool) -> None:
    """Run a command body with the standard error handling."""
    try:
        action()
    except InvalidFQBNError as e:
        ErrorFormatter.handle_invalid_fqbn(e)
    except FileNotFoundError as e:
        ErrorFormatter.handle_file_not_found(e)
    except Exception as e:
        ErrorFormatter.handle_unexpected_error(e, verbose)


def parse_command(args: ParseArgs) -> None:
    """Print the parts of an FQBN.

    Examples:
        fqbn parse arduino:samd:mkr1000:o1=v1
        fqbn parse arduino:samd:mkr1000:o1=v1 --json
    """

    def action() -> None:
        fqbn = FQBN(args.fqbn)
        options = dict(fqbn.options) if fqbn.options else None
        if args.as_json:
            data = {
                "vendor": fqbn.vendor,
                "arch": fqbn.arch,
                "board_id": fqbn.board_id,
                "options": options,
            }
            print(json.dumps(data, indent=2))
            return

        print(f"Vendor:   {fqbn.vendor}")
        print(f"Arch:     {fqbn.arch}")
        print(f"Board ID: {fqbn.board_id}")
        if options:
            print("Options:")
            for key, value in options.items():
                print(f"  {key}={value}")

    _run(action, args.verbose)


def valid_command(fqbn: str) -> None:
    """Print the FQBN when valid, exit with 1 otherwise."""
    parsed = valid(fqbn)
    if parsed is None:
        ErrorFormatter.print_error("Error: Invalid FQBN", fqbn)
        sys.exit(1)
    print(parsed)


def sanitize_command(fqbn: str, verbose: bool = False) -> None:
    """Print the FQBN without its config options."""
    _run(lambda: print(FQBN(fqbn).sanitize()), verbose)


def set_command(args: SetArgs) -> None:
    """Set a single config option.

    Examples:
        fqbn set arduino:samd:mkr1000 debug on
        fqbn set arduino:samd:mkr1000:debug=off debug on --strict
    """
    _run(
        lambda: print(
            FQBN(args.fqbn).set_config_option(args.option, args.value, args.strict)
        ),
        args.verbose,
    )


def merge_command(args: MergeArgs) -> None:
    """Merge the config options of another FQBN."""
    _run(lambda: print(FQBN(args.fqbn).with_fqbn(args.other)), args.verbose)


def limit_command(args: LimitArgs) -> None:
    """Keep only the first config options."""
    _run(
        lambda: print(FQBN(args.fqbn).limit_config_options(args.max_options)),
        args.verbose,
    )


def apply_command(args: ApplyArgs) -> None:
    """Apply the selected config values from a board details file.

    Examples:
        arduino-cli board details -b arduino:avr:nano --format json > nano.json
        fqbn apply arduino:avr:nano nano.json
    """

    def action() -> None:
        fqbn = FQBN(args.fqbn)
        try:
            options = BoardDetailsLoader.load_config_options(args.details_path)
        except ValueError as e:
            ErrorFormatter.print_error("Error: Invalid board details", str(e))
            sys.exit(1)
        print(fqbn.with_config_options(*options))

    _run(action, args.verbose)


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: '{value}'") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative integer: {number}")
    return number


def main(argv: Optional[List[str]] = None) -> None:
    """fqbn - Arduino Fully Qualified Board Name tool."""
    parser = argparse.ArgumentParser(
        prog="fqbn",
        description="Inspect and rewrite Arduino Fully Qualified Board Names",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"fqbn {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug output and tracebacks",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Parse command
    parse_parser = subparsers.add_parser("parse", help="Show the parts of an FQBN")
    parse_parser.add_argument("fqbn", help="FQBN to parse")
    parse_parser.add_argument(
        "--json",
        dest="as_json",
        action="store_true",
        help="Print the parts as JSON",
    )

    # Valid command
    valid_parser = subparsers.add_parser(
        "valid", help="Check an FQBN, print it when valid"
    )
    valid_parser.add_argument("fqbn", help="FQBN to check")

    # Sanitize command
    sanitize_parser = subparsers.add_parser(
        "sanitize", help="Remove the config options of an FQBN"
    )
    sanitize_parser.add_argument("fqbn", help="FQBN to sanitize")

    # Set command
    set_parser = subparsers.add_parser("set", help="Set a config option")
    set_parser.add_argument("fqbn", help="FQBN to update")
    set_parser.add_argument("option", help="Config option key")
    set_parser.add_argument("value", help="Config option value")
    set_parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when the config option is not present in the FQBN",
    )

    # Merge command
    merge_parser = subparsers.add_parser(
        "merge", help="Merge the config options of another FQBN"
    )
    merge_parser.add_argument("fqbn", help="FQBN to update")
    merge_parser.add_argument("other", help="FQBN to take the config options from")

    # Limit command
    limit_parser = subparsers.add_parser(
        "limit", help="Keep only the first N config options"
    )
    limit_parser.add_argument("fqbn", help="FQBN to limit")
    limit_parser.add_argument(
        "max_options",
        type=_non_negative_int,
        help="Maximum number of config options to keep",
    )

    # Apply command
    apply_parser = subparsers.add_parser(
        "apply",
        help="Apply the selected values of an 'arduino-cli board details --format json' file",
    )
    apply_parser.add_argument("fqbn", help="FQBN to update")
    apply_parser.add_argument("details_path", type=Path, help="Board details JSON file")

    # Parse arguments
    parsed_args = parser.parse_args(argv)

    # If no command specified, show help
    if not parsed_args.command:
        parser.print_help()
        sys.exit(0)

    configure_logging(parsed_args.verbose)

    # Execute command
    if parsed_args.command == "parse":
        parse_command(
            ParseArgs(
                fqbn=parsed_args.fqbn,
                as_json=parsed_args.as_json,
                verbose=parsed_args.verbose,
            )
        )
    elif parsed_args.command == "valid":
        valid_command(parsed_args.fqbn)
    elif parsed_args.command == "sanitize":
        sanitize_command(parsed_args.fqbn, parsed_args.verbose)
    elif parsed_args.command == "set":
        set_command(
            SetArgs(
                fqbn=parsed_args.fqbn,
                option=parsed_args.option,
                value=parsed_args.value,
                strict=parsed_args.strict,
                verbose=parsed_args.verbose,
            )
        )
    elif parsed_args.command == "merge":
        merge_command(
            MergeArgs(
                fqbn=parsed_args.fqbn,
                other=parsed_args.other,
                verbose=parsed_args.verbose,
            )
        )
    elif parsed_args.command == "limit":
        limit_command(
            LimitArgs(
                fqbn=parsed_args.fqbn,
                max_options=parsed_args.max_options,
                verbose=parsed_args.verbose,
            )
        )
    elif parsed_args.command == "apply":
        apply_command(
            ApplyArgs(
                fqbn=parsed_args.fqbn,
                details_path=parsed_args.details_path,
                verbose=parsed_args.verbose,
            )
        )


if __name__ == "__main__":
    main()
