"""thermowatch: unit-aware thermometer with qualified listeners.

Raw Celsius readings go in; listeners are notified with events in the
thermometer's default unit whenever their qualifier accepts the reading.
"""

from thermowatch.core.events import TemperatureEvent
from thermowatch.core.thermometer import Thermometer
from thermowatch.core.units import TemperatureUnit

__version__ = "0.1.0"

__all__ = [
    "Thermometer",
    "TemperatureEvent",
    "TemperatureUnit",
    "__version__",
]
