"""CLI utility functions for the fqbn tool.

This module provides common utilities used across CLI commands including:
- Loading config options from Arduino CLI board details files
- Error handling and formatting
- Logging setup
"""

import json
import logging
import sys
from pathlib import Path
from typing import List

from fqbn.config_options import ConfigOption, config_options_from_board_details
from fqbn.errors import ConfigOptionError, InvalidFQBNError

logger = logging.getLogger(__name__)


class BoardDetailsLoader:
    """Loads config options from `arduino-cli board details --format json` output."""

    @staticmethod
    def load_config_options(details_path: Path) -> List[ConfigOption]:
        """Read the config options from a board details JSON file.

        Args:
            details_path: Path to the JSON file

        Returns:
            List of ConfigOption in file order

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the file is not valid JSON or not a board details document
        """
        if not details_path.exists():
            raise FileNotFoundError(f"Board details file not found: {details_path}")

        try:
            with open(details_path, "r", encoding="utf-8") as f:
                details = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Failed to parse {details_path}: {e}") from e

        options = config_options_from_board_details(details)
        logger.debug(f"Loaded {len(options)} config options from {details_path}")
        return options


class ErrorFormatter:
    """Formats and displays error messages with ANSI color codes."""

    # ANSI color codes
    RED = "\033[1;31m"
    GREEN = "\033[1;32m"
    YELLOW = "\033[1;33m"
    RESET = "\033[0m"

    @staticmethod
    def print_error(title: str, message: str) -> None:
        """Print formatted error message.

        Args:
            title: Error title (e.g., "Invalid FQBN")
            message: Error message details
        """
        print(f"{ErrorFormatter.RED}✗ {title}{ErrorFormatter.RESET}", file=sys.stderr)
        print(message, file=sys.stderr)

    @staticmethod
    def handle_invalid_fqbn(error: InvalidFQBNError) -> None:
        """Handle InvalidFQBNError and ConfigOptionError with standard formatting.

        Args:
            error: The error to handle
        """
        if isinstance(error, ConfigOptionError):
            ErrorFormatter.print_error("Error: Invalid config option", str(error))
        else:
            ErrorFormatter.print_error("Error: Invalid FQBN", str(error))
        sys.exit(1)

    @staticmethod
    def handle_file_not_found(error: FileNotFoundError) -> None:
        """Handle FileNotFoundError with standard formatting.

        Args:
            error: The FileNotFoundError to handle
        """
        ErrorFormatter.print_error("Error: File not found", str(error))
        sys.exit(1)

    @staticmethod
    def handle_unexpected_error(error: Exception, verbose: bool = False) -> None:
        """Handle unexpected errors with standard formatting.

        Args:
            error: The exception to handle
            verbose: Whether to print traceback
        """
        message = f"{type(error).__name__}: {error}"
        ErrorFormatter.print_error("Unexpected error", message)

        if verbose:
            import traceback

            print("Traceback:", file=sys.stderr)
            print(traceback.format_exc(), file=sys.stderr)

        sys.exit(1)


def configure_logging(verbose: bool = False) -> None:
    """Route library diagnostics to stderr.

    Args:
        verbose: Log DEBUG messages instead of warnings only
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )
