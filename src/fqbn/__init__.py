"""Arduino FQBN (Fully Qualified Board Name) parsing and manipulation."""

from .config_options import (
    ConfigOption,
    ConfigValue,
    config_options_from_board_details,
)
from .errors import ConfigOptionError, InvalidFQBNError
from .fqbn import FQBN, serialize, valid

__version__ = "0.1.0"

__all__ = [
    "FQBN",
    "valid",
    "serialize",
    "ConfigOption",
    "ConfigValue",
    "config_options_from_board_details",
    "InvalidFQBNError",
    "ConfigOptionError",
]
