"""Core module for the thermometer.

This module provides the foundational pieces:
- Temperature units and conversion
- Temperature events and the qualifier/listener types
- The Thermometer registry and dispatch loop
- Ready-made threshold qualifiers
- Configuration loading and validation
"""

from thermowatch.core.events import Listener, Qualifier, TemperatureEvent
from thermowatch.core.qualifiers import build_qualifier
from thermowatch.core.thermometer import Thermometer
from thermowatch.core.units import TemperatureUnit, convert, parse_unit

__all__ = [
    # Units
    "TemperatureUnit",
    "convert",
    "parse_unit",
    # Events
    "TemperatureEvent",
    "Qualifier",
    "Listener",
    # Thermometer
    "Thermometer",
    "build_qualifier",
]
