"""Temperature units and conversions.

Raw readings entering the system are always in degrees Celsius, so the
only conversion path needed is Celsius to the requested unit.
"""

from __future__ import annotations

from enum import Enum
from typing import Final


class TemperatureUnit(str, Enum):
    """Units a thermometer can report events in."""

    CELSIUS = "Celsius"
    FAHRENHEIT = "Fahrenheit"


#: Short aliases accepted by parse_unit (matched case-insensitively)
_UNIT_ALIASES: Final[dict[str, TemperatureUnit]] = {
    "c": TemperatureUnit.CELSIUS,
    "celsius": TemperatureUnit.CELSIUS,
    "f": TemperatureUnit.FAHRENHEIT,
    "fahrenheit": TemperatureUnit.FAHRENHEIT,
}


def celsius_to_fahrenheit(t_celsius: float) -> float:
    """Convert temperature from Celsius to Fahrenheit.

    Args:
        t_celsius: Temperature in degrees Celsius.

    Returns:
        Temperature in degrees Fahrenheit.
    """
    return t_celsius * 1.8 + 32


def convert(unit: TemperatureUnit, value: float) -> float:
    """Express a Celsius value in the given unit.

    Args:
        unit: Target unit.
        value: Temperature in degrees Celsius.

    Returns:
        The value in the target unit (unchanged for Celsius).
    """
    if unit == TemperatureUnit.CELSIUS:
        return value
    return celsius_to_fahrenheit(value)


def parse_unit(value: TemperatureUnit | str) -> TemperatureUnit:
    """Resolve a unit from its enum member, name or short alias.

    Args:
        value: A TemperatureUnit, "Celsius"/"Fahrenheit", or "C"/"F".

    Returns:
        The matching TemperatureUnit.

    Raises:
        ValueError: If the value names no known unit.
    """
    if isinstance(value, TemperatureUnit):
        return value
    unit = _UNIT_ALIASES.get(str(value).strip().lower())
    if unit is None:
        valid = [u.value for u in TemperatureUnit]
        msg = f"Unknown temperature unit '{value}'. Expected one of: {valid}"
        raise ValueError(msg)
    return unit
