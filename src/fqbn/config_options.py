"""
Custom board configuration option descriptors.

The Arduino CLI reports the configurable menus of a board (CPU speed, upload
method, flash layout, ...) as config options. Each option lists its possible
values and marks exactly one of them as selected. These descriptors feed
FQBN.with_config_options().

Example `arduino-cli board details -b arduino:avr:nano --format json` excerpt:
    {
      "fqbn": "arduino:avr:nano",
      "config_options": [
        {
          "option": "cpu",
          "option_label": "Processor",
          "values": [
            {"value": "atmega328", "value_label": "ATmega328P", "selected": true},
            {"value": "atmega168", "value_label": "ATmega168"}
          ]
        }
      ]
    }
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class ConfigValue:
    """A possible value of a config option."""

    value: str
    selected: bool = False
    value_label: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ConfigValue":
        """
        Create a ConfigValue from its Arduino CLI JSON representation.

        Both snake_case (CLI JSON output) and camelCase (gRPC JSON) keys
        are accepted. A missing `selected` flag means not selected.

        Raises:
            ValueError: If `value` is missing or not a string, or if `selected`
                is not a boolean
        """
        if "value" not in data:
            raise ValueError(f"Config value is missing 'value': {data}")
        if not isinstance(data["value"], str):
            raise ValueError(f"Config value 'value' must be a string: {data}")
        selected = data.get("selected", False)
        if not isinstance(selected, bool):
            raise ValueError(f"Config value 'selected' must be a boolean: {data}")
        return cls(
            value=data["value"],
            selected=selected,
            value_label=data.get("value_label", data.get("valueLabel")),
        )


@dataclass(frozen=True)
class ConfigOption:
    """A custom board config option and its possible values."""

    option: str
    values: Tuple[ConfigValue, ...] = field(default_factory=tuple)
    option_label: Optional[str] = None

    def __post_init__(self) -> None:
        # Accept any sequence but store a tuple so the descriptor stays hashable
        object.__setattr__(self, "values", tuple(self.values))

    @classmethod
    def selected(cls, option: str, value: str) -> "ConfigOption":
        """Create an option whose only value is selected."""
        return cls(option=option, values=(ConfigValue(value=value, selected=True),))

    @property
    def selected_values(self) -> List[ConfigValue]:
        """All values marked as selected."""
        return [value for value in self.values if value.selected]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ConfigOption":
        """
        Create a ConfigOption from its Arduino CLI JSON representation.

        Args:
            data: Dictionary with `option`, `values` and optionally `option_label`

        Returns:
            ConfigOption instance

        Raises:
            ValueError: If `option` or `values` is missing or malformed
        """
        if "option" not in data:
            raise ValueError(f"Config option is missing 'option': {data}")
        if not isinstance(data["option"], str):
            raise ValueError(f"Config option 'option' must be a string: {data}")
        values = data.get("values")
        if not isinstance(values, list):
            raise ValueError(
                f"Config option '{data['option']}' has no 'values' list: {data}"
            )
        return cls(
            option=data["option"],
            values=tuple(ConfigValue.from_dict(value) for value in values),
            option_label=data.get("option_label", data.get("optionLabel")),
        )


def config_options_from_board_details(details: Dict[str, Any]) -> List[ConfigOption]:
    """
    Extract the config options from an Arduino CLI board details document.

    Args:
        details: Parsed `arduino-cli board details --format json` output

    Returns:
        List of ConfigOption in the order reported by the CLI (empty if the
        board has no custom options)

    Raises:
        ValueError: If the document or one of its options is malformed
    """
    if not isinstance(details, dict):
        raise ValueError("Board details must be a JSON object")
    raw_options = details.get("config_options", details.get("configOptions", []))
    if not isinstance(raw_options, list):
        raise ValueError("'config_options' must be a list")
    return [ConfigOption.from_dict(raw) for raw in raw_options]
