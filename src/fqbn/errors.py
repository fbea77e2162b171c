"""
Exceptions raised while parsing or updating an FQBN.

Both classes describe an invalid FQBN. ConfigOptionError narrows the
problem down to the custom board configuration options and carries a
human-readable detail message.
"""

from typing import Optional


class InvalidFQBNError(Exception):
    """Exception raised when an FQBN string cannot be parsed."""

    def __init__(self, fqbn: str, message: Optional[str] = None):
        """
        Initialize the error.

        Args:
            fqbn: The offending raw FQBN string
            message: Optional message replacing the default one
        """
        super().__init__(message or f"Invalid FQBN: {fqbn}")
        self.fqbn = fqbn


class ConfigOptionError(InvalidFQBNError):
    """Exception raised for invalid custom board configuration options."""

    def __init__(self, fqbn: str, detail: str):
        """
        Initialize the error.

        Args:
            fqbn: The FQBN string the options belong to
            detail: What is wrong with the options
        """
        super().__init__(fqbn, f"Invalid FQBN: {fqbn} ({detail})")
        self.detail = detail
