"""
Fully Qualified Board Name (FQBN) parsing and manipulation.

An FQBN identifies an Arduino board together with its custom board options:

    VENDOR:ARCHITECTURE:BOARD_ID[:MENU_ID=OPTION_ID[,MENU2_ID=OPTION_ID ...]]

Each field accepts letters, digits, underscores, dashes and dots. The `=`
character is also accepted inside an option value. VENDOR and ARCHITECTURE
may be empty, BOARD_ID may not.

FQBN instances are immutable. Every update returns a new instance, or the
very same instance when the update would not change anything.

Usage:
    fqbn = FQBN("arduino:samd:mkr1000")
    fqbn = fqbn.set_config_option("debug", "on")
    str(fqbn)  # 'arduino:samd:mkr1000:debug=on'
"""

import logging
import re
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from .config_options import ConfigOption
from .errors import ConfigOptionError, InvalidFQBNError

logger = logging.getLogger(__name__)

_SEGMENT_PATTERN = re.compile(r"[a-zA-Z0-9_.-]*")
_OPTION_KEY_PATTERN = re.compile(r"[a-zA-Z0-9_.-]+")
_OPTION_VALUE_PATTERN = re.compile(r"[a-zA-Z0-9=_.-]*")


class FQBN:
    """
    Immutable Fully Qualified Board Name.

    Attributes:
        vendor: Vendor identifier, may be empty (e.g., "arduino")
        arch: Architecture, may be empty (e.g., "samd")
        board_id: Board identifier, never empty (e.g., "mkr1000")
        options: Read-only, insertion-ordered custom board options, or None
            when the FQBN has no options

    Example:
        fqbn = FQBN("arduino:samd:mkr1000:o1=v1")
        fqbn.vendor    # 'arduino'
        fqbn.arch      # 'samd'
        fqbn.board_id  # 'mkr1000'
        fqbn.options   # mappingproxy({'o1': 'v1'})
    """

    __slots__ = ("vendor", "arch", "board_id", "options")

    vendor: str
    arch: str
    board_id: str
    options: Optional[Mapping[str, str]]

    def __init__(self, fqbn: str):
        """
        Parse and validate a raw FQBN string.

        Args:
            fqbn: The raw FQBN string

        Raises:
            InvalidFQBNError: If the segments are malformed
            ConfigOptionError: If the custom board options are malformed
            TypeError: If fqbn is not a string
        """
        if not isinstance(fqbn, str):
            raise TypeError(f"FQBN must be a string, not {type(fqbn).__name__}")

        segments = fqbn.split(":")
        if len(segments) < 3 or len(segments) > 4:
            raise InvalidFQBNError(fqbn)
        for segment in segments[:3]:
            if not _SEGMENT_PATTERN.fullmatch(segment):
                raise InvalidFQBNError(fqbn)

        vendor, arch, board_id = segments[:3]
        if not board_id:
            raise InvalidFQBNError(fqbn)

        options: Dict[str, str] = {}
        if len(segments) == 4:
            options = _parse_config_options(fqbn, segments[3])

        object.__setattr__(self, "vendor", vendor)
        object.__setattr__(self, "arch", arch)
        object.__setattr__(self, "board_id", board_id)
        object.__setattr__(self, "options", MappingProxyType(options) if options else None)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"FQBN is immutable, cannot set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"FQBN is immutable, cannot delete '{name}'")

    def __reduce__(self):
        return (FQBN, (self.to_string(),))

    def with_config_options(
        self, *config_options: Union[ConfigOption, Mapping[str, Any]]
    ) -> "FQBN":
        """
        Return a copy of this FQBN with the selected config option values applied.

        Existing options keep their position and get their value updated. New
        options are appended in the order they are given.

        Args:
            *config_options: Config options as reported by the Arduino CLI.
                Plain dictionaries in the CLI JSON shape are accepted too.

        Returns:
            The updated FQBN, or self when nothing changes

        Raises:
            ConfigOptionError: If an option has no or multiple selected values,
                if the same option is given twice, or if a selected value is
                not a valid option value

        Example:
            FQBN("arduino:samd:mkr1000:o1=v1,o2=w1").with_config_options(
                ConfigOption.selected("o3", "x1"),
                ConfigOption.selected("o2", "w2"),
            )
            # arduino:samd:mkr1000:o1=v1,o2=w2,o3=x1
        """
        if not config_options:
            return self

        new_options: Dict[str, str] = {}
        for config_option in config_options:
            if not isinstance(config_option, ConfigOption):
                config_option = ConfigOption.from_dict(dict(config_option))
            key = config_option.option
            selected = config_option.selected_values
            if not selected:
                raise ConfigOptionError(
                    self.to_string(), f"No selected value for config option: '{key}'"
                )
            if len(selected) > 1:
                raise ConfigOptionError(
                    self.to_string(),
                    f"Multiple selected values for config option: '{key}'",
                )
            value = selected[0].value
            if not _OPTION_KEY_PATTERN.fullmatch(key):
                raise ConfigOptionError(
                    self.to_string(), f"Invalid config option key: '{key}' ({key}={value})"
                )
            if not _OPTION_VALUE_PATTERN.fullmatch(value):
                raise ConfigOptionError(
                    self.to_string(),
                    f"Invalid config option value: '{value}' ({key}={value})",
                )
            if key in new_options:
                raise ConfigOptionError(
                    self.to_string(),
                    f"Duplicate config options: {key}:{new_options[key]}, {key}:{value}",
                )
            new_options[key] = value

        options = dict(self.options or {})
        did_update = False
        for key, value in new_options.items():
            if options.get(key) != value:
                options[key] = value
                did_update = True

        if not did_update:
            logger.debug(f"Config options already applied to {self}")
            return self

        updated = FQBN(serialize(self.vendor, self.arch, self.board_id, options))
        logger.debug(f"Updated FQBN: {self} -> {updated}")
        return updated

    def set_config_option(self, option: str, value: str, strict: bool = False) -> "FQBN":
        """
        Return a copy of this FQBN with a single config option set.

        Args:
            option: The config option key
            value: The selected value
            strict: When True, the option must already be present in the FQBN

        Returns:
            The updated FQBN, or self when the option already has the value

        Raises:
            ConfigOptionError: In strict mode when the option is absent, or
                when the key or value is invalid

        Example:
            FQBN("arduino:samd:mkr1000:o1=v1,o2=v2").set_config_option("o1", "v2")
            # arduino:samd:mkr1000:o1=v2,o2=v2
        """
        if strict and option not in (self.options or {}):
            raise ConfigOptionError(
                self.to_string(),
                f"Config option {option} must be present in the FQBN ({self}) "
                + "when using strict mode.",
            )
        return self.with_config_options(ConfigOption.selected(option, value))

    def with_fqbn(self, fqbn: Union[str, "FQBN"]) -> "FQBN":
        """
        Return a copy of this FQBN updated with the config options of another FQBN.

        Options of the other FQBN are merged in like with_config_options().
        Options present here but absent from the other FQBN are kept.

        Args:
            fqbn: The other FQBN, as a string or an FQBN instance

        Returns:
            The merged FQBN, or self when nothing changes

        Raises:
            InvalidFQBNError: If the other FQBN string is invalid
            ConfigOptionError: If vendor, architecture or board ID differ
        """
        other = fqbn if isinstance(fqbn, FQBN) else FQBN(fqbn)
        if not self.sanitize().equals(other.sanitize()):
            raise ConfigOptionError(
                other.to_string(), f"Mismatching FQBNs. this: {self}, other: {other}"
            )
        return self.with_config_options(
            *(
                ConfigOption.selected(option, value)
                for option, value in (other.options or {}).items()
            )
        )

    def sanitize(self) -> "FQBN":
        """
        Return this FQBN without any config options.

        Returns self when there are no config options.
        """
        if not self.options:
            return self
        return FQBN(self.to_string(skip_options=True))

    def limit_config_options(self, max_options: int) -> "FQBN":
        """
        Return a copy of this FQBN that keeps only the first config options.

        Args:
            max_options: Maximum number of config options to keep

        Returns:
            The limited FQBN, or self when it already satisfies the limit

        Raises:
            ValueError: If max_options is not a non-negative integer

        Example:
            FQBN("arduino:samd:mkr1000:o1=v1,o2=v2,o3=v3").limit_config_options(2)
            # arduino:samd:mkr1000:o1=v1,o2=v2
        """
        if (
            not isinstance(max_options, int)
            or isinstance(max_options, bool)
            or max_options < 0
        ):
            raise ValueError("max_options must be a non-negative integer")
        if not self.options:
            return self
        if max_options == 0:
            return self.sanitize()
        if len(self.options) <= max_options:
            return self

        limited = dict(list(self.options.items())[:max_options])
        return FQBN(serialize(self.vendor, self.arch, self.board_id, limited))

    def to_string(self, skip_options: bool = False) -> str:
        """
        Serialize the FQBN.

        Args:
            skip_options: When True, the config options are left out

        Returns:
            The FQBN string, config options in their current order
        """
        return serialize(
            self.vendor, self.arch, self.board_id, None if skip_options else self.options
        )

    def equals(self, other: "FQBN") -> bool:
        """
        Check whether two FQBNs are equal.

        The order of the config options is insignificant.
        """
        if self is other:
            return True
        return (
            self.vendor == other.vendor
            and self.arch == other.arch
            and self.board_id == other.board_id
            and dict(self.options or {}) == dict(other.options or {})
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FQBN):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        options = frozenset(self.options.items()) if self.options else None
        return hash((self.vendor, self.arch, self.board_id, options))

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"FQBN('{self.to_string()}')"


def serialize(
    vendor: str,
    arch: str,
    board_id: str,
    options: Optional[Mapping[str, str]] = None,
) -> str:
    """
    Build an FQBN string from its parts.

    Args:
        vendor: Vendor identifier
        arch: Architecture
        board_id: Board identifier
        options: Optional config options, serialized in iteration order

    Returns:
        FQBN string (e.g., 'arduino:avr:uno:cpu=atmega328')
    """
    configs = ",".join(f"{key}={value}" for key, value in (options or {}).items())
    return f"{vendor}:{arch}:{board_id}" + (f":{configs}" if configs else "")


def valid(fqbn: str) -> Optional[FQBN]:
    """
    Parse an FQBN string without raising on invalid input.

    Args:
        fqbn: The raw FQBN string

    Returns:
        The parsed FQBN, or None if the string is not a valid FQBN

    Raises:
        TypeError: If fqbn is not a string
    """
    try:
        return FQBN(fqbn)
    except InvalidFQBNError:
        return None


def _parse_config_options(fqbn: str, raw_options: str) -> Dict[str, str]:
    """Parse the comma separated `key=value` block of an FQBN."""
    options: Dict[str, str] = {}
    for pair in raw_options.split(","):
        config_segments = pair.split("=", 1)
        if len(config_segments) != 2:
            raise ConfigOptionError(fqbn, f"Invalid config option: '{pair}'")
        key, value = config_segments
        if not _OPTION_KEY_PATTERN.fullmatch(key):
            raise ConfigOptionError(fqbn, f"Invalid config option key: '{key}' ({pair})")
        if not _OPTION_VALUE_PATTERN.fullmatch(value):
            raise ConfigOptionError(
                fqbn, f"Invalid config option value: '{value}' ({pair})"
            )
        if key in options:
            raise ConfigOptionError(
                fqbn, f"Duplicate config options: {key}:{options[key]}, {key}:{value}"
            )
        options[key] = value
    return options
